"""Inline-or-reference decisions for composite types."""

from __future__ import annotations

from dataclasses import dataclass

from jsonschema_gen.type_introspection.type_models import TypeDescriptor, TypeKind

from .seen_set import SeenSet

REFERENCEABLE_KINDS: frozenset[TypeKind] = frozenset({TypeKind.OBJECT})


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving one type occurrence."""

    inline: bool
    identifier: str | None

    @staticmethod
    def inlined(identifier: str | None = None) -> Resolution:
        return Resolution(inline=True, identifier=identifier)

    @staticmethod
    def referenced(identifier: str) -> Resolution:
        return Resolution(inline=False, identifier=identifier)


def reference_identifier(descriptor: TypeDescriptor) -> str:
    """Return the bare simple name used as schema id and `$ref` target.

    Distinct types sharing a simple name map to the same identifier; the
    collision is not detected.
    """
    return descriptor.simple_name


def resolve_reference(handle: int, descriptor: TypeDescriptor, seen: SeenSet) -> Resolution:
    """Decide whether an occurrence of `descriptor` is expanded or referenced.

    The first occurrence of a composite type within `seen` is marked and
    inlined; every later occurrence of the same handle becomes a reference.
    Non-composite shapes are always inlined and never recorded.
    """
    if descriptor.kind not in REFERENCEABLE_KINDS:
        return Resolution.inlined()
    existing = seen.identifier_for(handle)
    if existing is not None:
        return Resolution.referenced(existing)
    identifier = reference_identifier(descriptor)
    seen.mark(handle, identifier)
    return Resolution.inlined(identifier)
