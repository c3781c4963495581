"""Schema builder tests."""

from __future__ import annotations

import json
from typing import Any

import pytest
from jsonschema_gen.schema_building import (
    EnumNode,
    ObjectNode,
    ReferenceNode,
    build_schema,
    build_schema_text,
)
from jsonschema_gen.type_introspection import SchemaMappingError
from sample_models.billing.invoice import Invoice
from sample_models.catalog import Availability, Category, Product, Supplier
from sample_models.people import Address, Employee, Node, Person
from sample_trees.forest import Forest

PERSON_SCHEMA = """{
  "type": "object",
  "id": "Person",
  "properties": {
    "name": {
      "type": "string"
    },
    "home": {
      "type": "object",
      "id": "Address",
      "properties": {
        "street": {
          "type": "string"
        },
        "city": {
          "type": "string"
        }
      }
    },
    "work": {
      "$ref": "Address"
    }
  }
}
"""


def _document(root_type: Any, **options: Any) -> dict[str, Any]:
    return json.loads(build_schema_text(root_type, **options))


def _collect(document: Any, key: str) -> list[Any]:
    found: list[Any] = []
    if isinstance(document, dict):
        for item_key, value in document.items():
            if item_key == key:
                found.append(value)
            found.extend(_collect(value, key))
    elif isinstance(document, list):
        for value in document:
            found.extend(_collect(value, key))
    return found


def test_repeated_nested_type_is_inlined_once_then_referenced() -> None:
    assert build_schema_text(Person) == PERSON_SCHEMA


def test_self_reference_becomes_reference_node() -> None:
    node = build_schema(Node)

    assert isinstance(node, ObjectNode)
    assert node.identifier == "Node"
    next_property = {prop.name: prop for prop in node.properties}["next"]
    assert next_property.schema == ReferenceNode(target="Node")


def test_mutual_reference_terminates_and_references_second_occurrence() -> None:
    document = _document(Product)

    category = document["properties"]["category"]
    assert category["id"] == "Category"
    assert category["properties"]["parent"] == {"$ref": "Category"}
    assert category["properties"]["products"] == {"type": "array", "items": {"$ref": "Product"}}
    assert document["properties"]["related"]["items"] == {"$ref": "Product"}


def test_every_identifier_is_a_reachable_simple_name() -> None:
    document = _document(Product)

    reachable = {"Product", "Category", "Dimensions", "Supplier"}
    assert set(_collect(document, "$ref")) <= reachable
    assert set(_collect(document, "id")) <= reachable
    assert not any(":" in value for value in _collect(document, "$ref"))


def test_catalog_shapes_render_as_json_schema_keywords() -> None:
    properties = _document(Product)["properties"]

    assert properties["price"] == {"type": "number"}
    assert properties["availability"] == {
        "type": "string",
        "enum": ["in_stock", "backorder", "discontinued"],
    }
    assert properties["tags"] == {"type": "array", "items": {"type": "string"}, "uniqueItems": True}
    assert properties["attributes"] == {"type": "object", "additionalProperties": {}}
    assert properties["ratings"] == {"type": "array", "items": {"type": "integer"}}
    assert properties["released"] == {"type": "string", "format": "date"}
    assert properties["channel"] == {"type": "string", "enum": ["web", "store"]}
    assert properties["size"]["required"] == ["units"]
    assert properties["supplier"]["required"] == ["name", "country"]
    assert properties["promotion"] == {"anyOf": [{"$ref": "Category"}, {"$ref": "Supplier"}]}


def test_renamed_member_appears_under_new_name_and_ignored_member_is_absent() -> None:
    document = _document(Employee)

    properties = document["properties"]
    assert list(properties) == ["id", "fullName", "manager", "reports"]
    assert "employee_id" not in properties
    assert "password_hash" not in properties
    assert properties["fullName"] == {"type": "string", "description": "Display name"}
    assert document["required"] == ["id"]


def test_build_is_idempotent_with_fresh_seen_sets() -> None:
    assert build_schema_text(Product) == build_schema_text(Product)
    assert build_schema(Category) == build_schema(Category)


def test_root_identifier_is_set_for_each_class_built_independently() -> None:
    address = _document(Address)
    supplier = _document(Supplier)

    assert address["id"] == "Address"
    assert supplier["id"] == "Supplier"


def test_enum_root_carries_identifier() -> None:
    node = build_schema(Availability)

    assert isinstance(node, EnumNode)
    assert node.identifier == "Availability"
    assert _document(Availability)["id"] == "Availability"


def test_simple_name_collision_is_preserved() -> None:
    properties = _document(Invoice)["properties"]

    assert properties["billing"]["id"] == "Address"
    assert list(properties["billing"]["properties"]) == ["line1", "postcode"]
    assert properties["customer"]["id"] == "Address"
    assert list(properties["customer"]["properties"]) == ["street", "city"]
    assert properties["shipping"] == {"$ref": "Address"}


def test_sort_properties_orders_rendered_properties() -> None:
    document = _document(Employee, sort_properties=True)

    assert list(document["properties"]) == ["fullName", "id", "manager", "reports"]


def test_primitive_root_is_rejected() -> None:
    with pytest.raises(SchemaMappingError, match="must describe an object or enum"):
        build_schema(str)


def test_tree_reached_through_list_is_inlined_once_then_referenced() -> None:
    document = _document(Forest)

    tree = document["properties"]["trees"]["items"]
    assert tree["id"] == "Tree"
    assert tree["properties"]["children"] == {"type": "array", "items": {"$ref": "Tree"}}
    assert document["properties"]["by_region"] == {
        "type": "object",
        "additionalProperties": {"type": "array", "items": {"$ref": "Tree"}},
    }
