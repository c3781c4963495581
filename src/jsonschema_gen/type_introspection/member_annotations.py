"""Serialization annotations for data class members."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

METADATA_KEY = "jsonschema_gen"


@dataclass(frozen=True)
class JsonProperty:
    """Member-level serialization policy.

    Usable as `dataclasses.field` metadata (see `json_field`) or as a
    `typing.Annotated` marker on TypedDict, NamedTuple and plain annotated classes.
    """

    name: str | None = None
    required: bool | None = None
    ignore: bool = False
    description: str | None = None


def json_field(
    *,
    name: str | None = None,
    required: bool | None = None,
    ignore: bool = False,
    description: str | None = None,
    **field_kwargs: Any,
) -> Any:
    """Declare a dataclass field carrying serialization policy.

    Args:
      name: Serialized property name, replacing the attribute name.
      required: Explicit required flag; omitted means optional.
      ignore: Exclude the member from the schema.
      description: Text copied into the property schema.
      field_kwargs: Passed through to `dataclasses.field`.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[METADATA_KEY] = JsonProperty(
        name=name, required=required, ignore=ignore, description=description
    )
    return dataclasses.field(metadata=metadata, **field_kwargs)


def json_ignore(**field_kwargs: Any) -> Any:
    """Declare a dataclass field that never appears in the schema."""
    return json_field(ignore=True, **field_kwargs)


def merge_policies(markers: Iterable[Any], field_metadata: Mapping[str, Any] | None) -> JsonProperty:
    """Combine Annotated markers and field metadata, field metadata winning."""
    merged = JsonProperty()
    for marker in markers:
        if isinstance(marker, JsonProperty):
            merged = _overlay(merged, marker)
    if field_metadata:
        declared = field_metadata.get(METADATA_KEY)
        if isinstance(declared, JsonProperty):
            merged = _overlay(merged, declared)
    return merged


def _overlay(base: JsonProperty, override: JsonProperty) -> JsonProperty:
    return JsonProperty(
        name=override.name if override.name is not None else base.name,
        required=override.required if override.required is not None else base.required,
        ignore=base.ignore or override.ignore,
        description=(
            override.description if override.description is not None else base.description
        ),
    )
