"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DEFAULT_OUTPUT_SUBDIRECTORY, Configuration, GenerationSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate a YAML or JSON configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return Configuration(
        path=path,
        generation=parse_generation_settings(parsed, base_path=path.resolve().parent),
    )


def parse_generation_settings(section: Mapping[str, Any], *, base_path: Path) -> GenerationSettings:
    """Validate a mapping of generation settings, resolving paths against `base_path`."""
    source_directory = _resolve_path(
        base_path, _require_non_empty_string(section.get("source_directory"), "source_directory")
    )
    include_patterns = _normalize_patterns(section.get("include_patterns"), "include_patterns")
    if not include_patterns:
        raise ConfigurationError("include_patterns must contain at least one pattern.")
    exclude_patterns = _normalize_patterns(section.get("exclude_patterns"), "exclude_patterns")

    output_root_value = _optional_string(section.get("output_root"), "output_root")
    output_root = _resolve_path(base_path, output_root_value) if output_root_value else base_path
    output_subdirectory = (
        _optional_string(section.get("output_subdirectory"), "output_subdirectory")
        or DEFAULT_OUTPUT_SUBDIRECTORY
    )
    classpath = tuple(
        _resolve_path(base_path, entry)
        for entry in _normalize_patterns(section.get("classpath"), "classpath")
    )
    sort_properties = _optional_bool(section.get("sort_properties"), "sort_properties")

    return GenerationSettings(
        source_directory=source_directory,
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
        output_root=output_root,
        output_subdirectory=output_subdirectory,
        classpath=classpath,
        sort_properties=sort_properties,
    )


def _normalize_patterns(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if value is None:
        raise ConfigurationError(f"{field_name} is required.")
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
