"""Type introspection service: classify Python types into schema shapes."""

from __future__ import annotations

import collections
import collections.abc
import dataclasses
import datetime
import enum
import types
import typing
import uuid
from collections.abc import Mapping
from decimal import Decimal
from pathlib import PurePath
from typing import Any

from .member_annotations import JsonProperty, merge_policies
from .type_models import MemberDescriptor, TypeArena, TypeDescriptor, TypeKind


class SchemaMappingError(Exception):
    """Raised when a type cannot be represented as a JSON schema."""


_PRIMITIVES: dict[type, tuple[str, str | None]] = {
    bool: ("boolean", None),
    int: ("integer", None),
    float: ("number", None),
    Decimal: ("number", None),
    str: ("string", None),
    bytes: ("string", None),
    bytearray: ("string", None),
    uuid.UUID: ("string", None),
    PurePath: ("string", None),
    datetime.datetime: ("string", "date-time"),
    datetime.date: ("string", "date"),
    datetime.time: ("string", "time"),
    type(None): ("null", None),
}

_SEQUENCE_ORIGINS: frozenset[Any] = frozenset(
    {
        list,
        tuple,
        collections.deque,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Collection,
        collections.abc.Iterable,
    }
)
_SET_ORIGINS: frozenset[Any] = frozenset(
    {set, frozenset, collections.abc.Set, collections.abc.MutableSet}
)
_MAPPING_ORIGINS: frozenset[Any] = frozenset(
    {
        dict,
        collections.OrderedDict,
        collections.defaultdict,
        collections.abc.Mapping,
        collections.abc.MutableMapping,
    }
)
_UNION_ORIGINS: frozenset[Any] = frozenset({typing.Union, types.UnionType})
_SIGNATURE_ERRORS = (NameError, TypeError, AttributeError, SyntaxError)


class TypeIntrospector:
    """Describe types into a `TypeArena`, returning integer handles.

    Object types are registered before their members are described, so a class
    reached again through its own members resolves to the existing handle and
    cyclic graphs terminate.
    """

    def __init__(self, arena: TypeArena, *, sort_properties: bool = False) -> None:
        self._arena = arena
        self._sort_properties = sort_properties

    @property
    def arena(self) -> TypeArena:
        return self._arena

    def describe(self, tp: Any) -> int:
        """Return the arena handle describing `tp`."""
        tp, _ = _strip_annotated(tp)
        try:
            existing = self._arena.handle_for(tp)
        except TypeError as exc:
            raise SchemaMappingError(f"Unhashable type annotation: {tp!r}") from exc
        if existing is not None:
            return existing

        if isinstance(tp, (str, typing.ForwardRef)):
            raise SchemaMappingError(f"Unresolved forward reference: {tp!r}")
        if tp is Any or tp is object:
            return self._arena.register(tp, TypeDescriptor(TypeKind.ANY, "any", "any"))
        if isinstance(tp, typing.TypeVar):
            return self._describe_type_var(tp)
        if hasattr(tp, "__supertype__"):
            return self.describe(tp.__supertype__)

        origin = typing.get_origin(tp)
        if origin in _UNION_ORIGINS:
            return self._describe_union(tp)
        if origin is typing.Literal:
            return self._register_enum(tp, _label(tp), _label(tp), typing.get_args(tp))
        if isinstance(tp, type) and issubclass(tp, enum.Enum):
            values = tuple(_enum_value(member) for member in tp)
            return self._register_enum(tp, _canonical_name(tp), tp.__name__, values)

        primitive = _primitive_shape(tp)
        if primitive is not None:
            json_type, fmt = primitive
            descriptor = TypeDescriptor(
                TypeKind.PRIMITIVE, _label(tp), _label(tp), json_type=json_type, format=fmt
            )
            return self._arena.register(tp, descriptor)

        container = origin if origin is not None else tp
        if _is_named_tuple(container) or typing.is_typeddict(container):
            return self._describe_object(tp, container)
        if container in _MAPPING_ORIGINS:
            return self._describe_map(tp)
        if container in _SEQUENCE_ORIGINS or container in _SET_ORIGINS:
            return self._describe_array(tp, unique_items=container in _SET_ORIGINS)
        if isinstance(container, type):
            return self._describe_object(tp, container)
        raise SchemaMappingError(f"Unsupported type annotation: {tp!r}")

    def _describe_type_var(self, tp: typing.TypeVar) -> int:
        if tp.__bound__ is not None:
            return self.describe(tp.__bound__)
        return self.describe(Any)

    def _describe_union(self, tp: Any) -> int:
        options = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if not options:
            return self.describe(type(None))
        if len(options) == 1:
            return self.describe(options[0])
        handles = tuple(self.describe(option) for option in options)
        descriptor = TypeDescriptor(TypeKind.UNION, _label(tp), _label(tp), options=handles)
        return self._register_composite(tp, descriptor)

    def _register_enum(
        self, tp: Any, canonical_name: str, simple_name: str, values: tuple[Any, ...]
    ) -> int:
        normalized = tuple(
            _enum_value(value) if isinstance(value, enum.Enum) else value for value in values
        )
        descriptor = TypeDescriptor(
            TypeKind.ENUM,
            canonical_name,
            simple_name,
            values=normalized,
            json_type=_common_json_type(normalized),
        )
        return self._arena.register(tp, descriptor)

    def _describe_map(self, tp: Any) -> int:
        args = typing.get_args(tp)
        element: int | None = None
        if args:
            key_type, value_type = args
            _require_string_like_key(tp, key_type)
            element = self.describe(value_type)
        descriptor = TypeDescriptor(TypeKind.MAP, _label(tp), _label(tp), element=element)
        return self._register_composite(tp, descriptor)

    def _describe_array(self, tp: Any, *, unique_items: bool) -> int:
        element = self.describe(_element_type(tp))
        descriptor = TypeDescriptor(
            TypeKind.ARRAY, _label(tp), _label(tp), element=element, unique_items=unique_items
        )
        return self._register_composite(tp, descriptor)

    def _register_composite(self, tp: Any, descriptor: TypeDescriptor) -> int:
        # A recursive element may already have described this same alias.
        existing = self._arena.handle_for(tp)
        if existing is not None:
            return existing
        return self._arena.register(tp, descriptor)

    def _describe_object(self, tp: Any, cls: type) -> int:
        # Parametrised generics share the descriptor of their origin class.
        handle = self._arena.handle_for(cls)
        if handle is None:
            handle = self._arena.register(
                cls, TypeDescriptor(TypeKind.OBJECT, _canonical_name(cls), cls.__name__)
            )
            self._arena.complete(handle, members=self._object_members(cls))
        return handle

    def _object_members(self, cls: type) -> tuple[MemberDescriptor, ...]:
        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except _SIGNATURE_ERRORS as exc:
            raise SchemaMappingError(
                f"Cannot resolve annotations of {_canonical_name(cls)}: {exc}"
            ) from exc

        members: list[MemberDescriptor] = []
        seen_names: set[str] = set()
        for attribute, hint, field_metadata, declared_required in _member_candidates(cls, hints):
            annotation, markers = _strip_annotated(hint)
            policy = merge_policies(markers, field_metadata)
            if policy.ignore:
                continue
            # Underscore attributes stay private unless explicitly renamed.
            if attribute.startswith("_") and policy.name is None and not typing.is_typeddict(cls):
                continue
            member = self._describe_member(attribute, annotation, policy, declared_required)
            if member.serialized_name in seen_names:
                raise SchemaMappingError(
                    f"Duplicate property '{member.serialized_name}' on {_canonical_name(cls)}"
                )
            seen_names.add(member.serialized_name)
            members.append(member)

        if not members and not _declares_structure(cls):
            raise SchemaMappingError(
                f"No serializable members discovered on {_canonical_name(cls)}"
            )
        if self._sort_properties:
            members.sort(key=lambda member: member.serialized_name)
        return tuple(members)

    def _describe_member(
        self,
        attribute: str,
        annotation: Any,
        policy: JsonProperty,
        declared_required: bool,
    ) -> MemberDescriptor:
        required = policy.required if policy.required is not None else declared_required
        return MemberDescriptor(
            serialized_name=policy.name or attribute,
            required=required,
            target=self.describe(annotation),
            description=policy.description,
        )


def _member_candidates(
    cls: type, hints: Mapping[str, Any]
) -> list[tuple[str, Any, Mapping[str, Any] | None, bool]]:
    """Return (attribute, annotation, field metadata, declared required) in declaration order."""
    if dataclasses.is_dataclass(cls):
        return [
            (field.name, hints.get(field.name, field.type), field.metadata, False)
            for field in dataclasses.fields(cls)
        ]
    if typing.is_typeddict(cls):
        required_keys = getattr(cls, "__required_keys__", frozenset())
        return [
            (name, hint, None, name in required_keys)
            for name, hint in hints.items()
        ]
    if _is_named_tuple(cls):
        return [
            (name, hints.get(name, Any), None, False)
            for name in cls._fields  # type: ignore[attr-defined]
        ]
    return [
        (name, hint, None, False)
        for name, hint in hints.items()
        if typing.get_origin(hint) is not typing.ClassVar
    ]


def _declares_structure(cls: type) -> bool:
    return dataclasses.is_dataclass(cls) or typing.is_typeddict(cls) or _is_named_tuple(cls)


def _strip_annotated(tp: Any) -> tuple[Any, tuple[Any, ...]]:
    """Unwrap `Annotated` and `TypedDict` requiredness layers in any nesting order."""
    markers: tuple[Any, ...] = ()
    while True:
        origin = typing.get_origin(tp)
        if origin is typing.Annotated:
            markers += tuple(tp.__metadata__)
            tp = tp.__origin__
        elif origin in (typing.Required, typing.NotRequired):
            tp = typing.get_args(tp)[0]
        else:
            return tp, markers


def _element_type(tp: Any) -> Any:
    args = typing.get_args(tp)
    if not args:
        return Any
    if typing.get_origin(tp) is not tuple:
        return args[0]
    if len(args) == 2 and args[1] is Ellipsis:
        return args[0]
    distinct = set(args)
    if len(distinct) != 1:
        raise SchemaMappingError(f"Heterogeneous tuple cannot be mapped to an array: {tp!r}")
    return args[0]


def _require_string_like_key(tp: Any, key_type: Any) -> None:
    key_type, _ = _strip_annotated(key_type)
    if key_type in (str, int, Any) or typing.get_origin(key_type) is typing.Literal:
        return
    if isinstance(key_type, type) and issubclass(key_type, (str, enum.Enum)):
        return
    raise SchemaMappingError(f"Mapping keys must serialize as strings: {tp!r}")


def _primitive_shape(tp: Any) -> tuple[str, str | None] | None:
    if tp is None:
        return _PRIMITIVES[type(None)]
    if not isinstance(tp, type):
        return None
    for base in tp.__mro__:
        if base in _PRIMITIVES:
            return _PRIMITIVES[base]
    return None


def _is_named_tuple(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, tuple) and hasattr(tp, "_fields")


def _enum_value(member: enum.Enum) -> Any:
    value = member.value
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    return member.name


def _common_json_type(values: tuple[Any, ...]) -> str | None:
    json_types = {_json_type_of(value) for value in values}
    if len(json_types) == 1:
        return json_types.pop()
    return None


def _json_type_of(value: Any) -> str | None:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def _canonical_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _label(tp: Any) -> str:
    if tp is None or tp is type(None):
        return "None"
    if isinstance(tp, type) and typing.get_origin(tp) is None:
        return tp.__qualname__
    return repr(tp)
