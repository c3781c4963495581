"""Schema tree rendering to canonical JSON text."""

from __future__ import annotations

import json
from typing import Any

from .schema_nodes import (
    AnyNode,
    ArrayNode,
    EnumNode,
    MapNode,
    ObjectNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaNode,
    UnionNode,
)


class SchemaRenderError(Exception):
    """Raised when a schema tree cannot be serialized."""


def render_schema(node: SchemaNode) -> str:
    """Render a schema tree as pretty-printed JSON with a trailing newline.

    Keys are emitted in a fixed keyword order and properties in member order,
    so the text is byte-identical for equal trees.
    """
    document = schema_to_document(node)
    try:
        text = json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SchemaRenderError(f"Schema is not JSON serializable: {exc}") from exc
    return text + "\n"


def schema_to_document(node: SchemaNode) -> dict[str, Any]:
    """Convert a schema tree into plain JSON-compatible dictionaries."""
    if isinstance(node, ReferenceNode):
        return {"$ref": node.target}
    if isinstance(node, PrimitiveNode):
        return _with_optional({"type": node.json_type}, format=node.format)
    if isinstance(node, AnyNode):
        return {}
    if isinstance(node, EnumNode):
        document = _with_optional({}, type=node.json_type, id=node.identifier)
        document["enum"] = list(node.values)
        return document
    if isinstance(node, ArrayNode):
        document = {"type": "array", "items": schema_to_document(node.items)}
        if node.unique_items:
            document["uniqueItems"] = True
        return document
    if isinstance(node, MapNode):
        mapping: dict[str, Any] = {"type": "object"}
        if node.values is not None:
            mapping["additionalProperties"] = schema_to_document(node.values)
        return mapping
    if isinstance(node, UnionNode):
        return {"anyOf": [schema_to_document(option) for option in node.options]}
    if isinstance(node, ObjectNode):
        return _object_document(node)
    raise SchemaRenderError(f"Unsupported schema node: {type(node).__name__}")


def _object_document(node: ObjectNode) -> dict[str, Any]:
    document = _with_optional({"type": "object"}, id=node.identifier)
    properties: dict[str, Any] = {}
    for prop in node.properties:
        child = schema_to_document(prop.schema)
        if prop.description:
            child["description"] = prop.description
        properties[prop.name] = child
    document["properties"] = properties
    required = [prop.name for prop in node.properties if prop.required]
    if required:
        document["required"] = required
    return document


def _with_optional(document: dict[str, Any], **optional: Any) -> dict[str, Any]:
    for key, value in optional.items():
        if value is not None:
            document[key] = value
    return document
