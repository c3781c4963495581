"""Reference resolution exports."""

from .reference_resolver import (
    REFERENCEABLE_KINDS,
    Resolution,
    reference_identifier,
    resolve_reference,
)
from .seen_set import SeenSet

__all__ = [
    "REFERENCEABLE_KINDS",
    "Resolution",
    "SeenSet",
    "reference_identifier",
    "resolve_reference",
]
