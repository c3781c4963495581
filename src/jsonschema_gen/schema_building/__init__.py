"""Schema building exports."""

from .schema_builder import build_schema, build_schema_text
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
from .schema_rendering import SchemaRenderError, render_schema, schema_to_document

__all__ = [
    "AnyNode",
    "ArrayNode",
    "EnumNode",
    "MapNode",
    "ObjectNode",
    "PrimitiveNode",
    "PropertyNode",
    "ReferenceNode",
    "SchemaNode",
    "SchemaRenderError",
    "UnionNode",
    "build_schema",
    "build_schema_text",
    "render_schema",
    "schema_to_document",
]
