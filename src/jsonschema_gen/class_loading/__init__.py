"""Class loading exports."""

from .class_resolver import (
    DEFAULT_INCLUDE_PATTERN,
    ClassResolutionError,
    module_name_for,
    resolve_class_names,
    split_patterns,
)
from .type_loader import TypeLoader, TypeLoaderProtocol, TypeLoadError

__all__ = [
    "DEFAULT_INCLUDE_PATTERN",
    "ClassResolutionError",
    "TypeLoadError",
    "TypeLoader",
    "TypeLoaderProtocol",
    "module_name_for",
    "resolve_class_names",
    "split_patterns",
]
