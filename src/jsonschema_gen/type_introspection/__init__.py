"""Type introspection exports."""

from .member_annotations import JsonProperty, json_field, json_ignore
from .type_introspector import SchemaMappingError, TypeIntrospector
from .type_models import MemberDescriptor, TypeArena, TypeDescriptor, TypeKind

__all__ = [
    "JsonProperty",
    "MemberDescriptor",
    "SchemaMappingError",
    "TypeArena",
    "TypeDescriptor",
    "TypeIntrospector",
    "TypeKind",
    "json_field",
    "json_ignore",
]
