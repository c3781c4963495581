"""Person graph samples: shared nested types and self references."""

from __future__ import annotations

from dataclasses import dataclass, field

from jsonschema_gen.type_introspection import json_field, json_ignore


@dataclass
class Address:
    street: str
    city: str


@dataclass
class Person:
    name: str
    home: Address
    work: Address


@dataclass
class Node:
    value: int
    next: Node | None = None


@dataclass
class Employee:
    employee_id: str = json_field(name="id", required=True)
    full_name: str = json_field(name="fullName", description="Display name")
    password_hash: str = json_ignore(default="")
    manager: Employee | None = None
    reports: list[Employee] = field(default_factory=list)
    _cache: dict[str, str] = field(default_factory=dict)
