"""Catalog samples: enums, collections, unions and mutual references."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, NamedTuple, TypedDict

from jsonschema_gen.type_introspection import JsonProperty


class Availability(str, Enum):
    IN_STOCK = "in_stock"
    BACKORDER = "backorder"
    DISCONTINUED = "discontinued"


class Dimensions(NamedTuple):
    width: float
    height: float
    unit: Annotated[str, JsonProperty(name="units", required=True)] = "cm"


class Supplier(TypedDict):
    name: str
    country: str


@dataclass
class Category:
    title: str
    parent: Category | None = None
    products: list[Product] = field(default_factory=list)


@dataclass
class Product:
    sku: str
    price: Decimal
    availability: Availability
    category: Category
    tags: set[str] = field(default_factory=set)
    attributes: dict[str, Any] = field(default_factory=dict)
    ratings: tuple[int, ...] = ()
    size: Dimensions | None = None
    supplier: Supplier | None = None
    released: datetime.date | None = None
    channel: Literal["web", "store"] = "web"
    related: list[Product] = field(default_factory=list)
    promotion: Category | Supplier | None = None
