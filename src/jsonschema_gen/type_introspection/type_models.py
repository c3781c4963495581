"""Structural type descriptors and the per-build descriptor arena."""

from __future__ import annotations

import dataclasses
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


class TypeKind(str, Enum):
    """Schema-relevant shape of a type."""

    PRIMITIVE = "primitive"
    OBJECT = "object"
    ARRAY = "array"
    MAP = "map"
    ENUM = "enum"
    UNION = "union"
    ANY = "any"


@dataclass(frozen=True)
class MemberDescriptor:
    """One serialized property of an object type."""

    serialized_name: str
    required: bool
    target: int
    description: str | None = None


@dataclass(frozen=True)
class TypeDescriptor:  # pylint: disable=too-many-instance-attributes
    """Structural description of one type.

    Nested types are referenced by arena handle, never embedded, so cyclic
    graphs are representable.
    """

    kind: TypeKind
    canonical_name: str
    simple_name: str
    members: tuple[MemberDescriptor, ...] = ()
    element: int | None = None
    values: tuple[Any, ...] = ()
    options: tuple[int, ...] = ()
    json_type: str | None = None
    format: str | None = None
    unique_items: bool = False


class TypeArena:
    """Descriptor store addressed by integer handles.

    Classes are keyed by identity, generic aliases and primitives by equality.
    One arena lives for exactly one root-type build.
    """

    def __init__(self) -> None:
        self._descriptors: list[TypeDescriptor] = []
        self._handles: dict[Hashable, int] = {}

    def register(self, key: Hashable, descriptor: TypeDescriptor) -> int:
        if key in self._handles:
            raise ValueError(f"Type already registered: {descriptor.canonical_name}")
        handle = len(self._descriptors)
        self._descriptors.append(descriptor)
        self._handles[key] = handle
        return handle

    def handle_for(self, key: Hashable) -> int | None:
        return self._handles.get(key)

    def complete(self, handle: int, **changes: Any) -> TypeDescriptor:
        """Fill in a descriptor registered before its members were known."""
        updated = dataclasses.replace(self._descriptors[handle], **changes)
        self._descriptors[handle] = updated
        return updated

    def __getitem__(self, handle: int) -> TypeDescriptor:
        return self._descriptors[handle]

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._descriptors)
