"""Schema tree assembly for one root type."""

from __future__ import annotations

import dataclasses
from typing import Any

from jsonschema_gen.reference_resolution import SeenSet, resolve_reference
from jsonschema_gen.type_introspection import (
    SchemaMappingError,
    TypeArena,
    TypeIntrospector,
    TypeKind,
)

from .schema_nodes import (
    AnyNode,
    ArrayNode,
    EnumNode,
    MapNode,
    ObjectNode,
    PrimitiveNode,
    PropertyNode,
    ReferenceNode,
    SchemaNode,
    UnionNode,
)
from .schema_rendering import render_schema


def build_schema(root_type: Any, *, sort_properties: bool = False) -> SchemaNode:
    """Build the schema tree for `root_type`.

    A fresh arena and SeenSet are created for every call, so repeated builds of
    an unchanged type produce equal trees. The root node's identifier is the
    root type's simple name.

    Raises:
      SchemaMappingError: If the type graph cannot be represented.
    """
    arena = TypeArena()
    root_handle = TypeIntrospector(arena, sort_properties=sort_properties).describe(root_type)
    node = _SchemaAssembler(arena, SeenSet()).assemble(root_handle)
    root_name = getattr(root_type, "__name__", None) or arena[root_handle].simple_name
    if isinstance(node, (ObjectNode, EnumNode)):
        return dataclasses.replace(node, identifier=root_name)
    raise SchemaMappingError(f"Root type {root_name} must describe an object or enum.")


def build_schema_text(root_type: Any, *, sort_properties: bool = False) -> str:
    """Build and render the schema document for `root_type`."""
    return render_schema(build_schema(root_type, sort_properties=sort_properties))


class _SchemaAssembler:
    """Walk arena descriptors, asking the resolver at every composite boundary."""

    def __init__(self, arena: TypeArena, seen: SeenSet) -> None:
        self._arena = arena
        self._seen = seen

    def assemble(self, handle: int) -> SchemaNode:
        descriptor = self._arena[handle]
        resolution = resolve_reference(handle, descriptor, self._seen)
        if not resolution.inline:
            assert resolution.identifier is not None
            return ReferenceNode(target=resolution.identifier)

        kind = descriptor.kind
        if kind is TypeKind.PRIMITIVE:
            assert descriptor.json_type is not None
            return PrimitiveNode(json_type=descriptor.json_type, format=descriptor.format)
        if kind is TypeKind.ANY:
            return AnyNode()
        if kind is TypeKind.ENUM:
            return EnumNode(values=descriptor.values, json_type=descriptor.json_type)
        if kind is TypeKind.ARRAY:
            assert descriptor.element is not None
            return ArrayNode(
                items=self.assemble(descriptor.element), unique_items=descriptor.unique_items
            )
        if kind is TypeKind.MAP:
            values = None if descriptor.element is None else self.assemble(descriptor.element)
            return MapNode(values=values)
        if kind is TypeKind.UNION:
            return UnionNode(options=tuple(self.assemble(option) for option in descriptor.options))
        return ObjectNode(
            identifier=resolution.identifier,
            properties=tuple(
                PropertyNode(
                    name=member.serialized_name,
                    schema=self.assemble(member.target),
                    required=member.required,
                    description=member.description,
                )
                for member in descriptor.members
            ),
        )
