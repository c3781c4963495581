"""Schema tree entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class PrimitiveNode:
    """JSON primitive (string, integer, number, boolean, null)."""

    json_type: str
    format: str | None = None


@dataclass(frozen=True)
class AnyNode:
    """Unconstrained value."""


@dataclass(frozen=True)
class ReferenceNode:
    """Pointer to an object already expanded in the same document."""

    target: str


@dataclass(frozen=True)
class EnumNode:
    """Fixed literal set."""

    values: tuple[Any, ...]
    json_type: str | None = None
    identifier: str | None = None


@dataclass(frozen=True)
class ArrayNode:
    """Homogeneous sequence."""

    items: SchemaNode
    unique_items: bool = False


@dataclass(frozen=True)
class MapNode:
    """String-keyed dictionary; `values` is None when unconstrained."""

    values: SchemaNode | None = None


@dataclass(frozen=True)
class UnionNode:
    """Value matching any of the options."""

    options: tuple[SchemaNode, ...]


@dataclass(frozen=True)
class PropertyNode:
    """One member of an object schema."""

    name: str
    schema: SchemaNode
    required: bool = False
    description: str | None = None


@dataclass(frozen=True)
class ObjectNode:
    """Object with named properties, carrying its reference identifier."""

    identifier: str | None
    properties: tuple[PropertyNode, ...] = ()


SchemaNode = Union[
    PrimitiveNode, AnyNode, ReferenceNode, EnumNode, ArrayNode, MapNode, UnionNode, ObjectNode
]
