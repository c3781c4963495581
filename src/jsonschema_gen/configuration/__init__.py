"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_generation_settings
from .runtime_settings import DEFAULT_OUTPUT_SUBDIRECTORY, Configuration, GenerationSettings

__all__ = [
    "Configuration",
    "GenerationSettings",
    "DEFAULT_OUTPUT_SUBDIRECTORY",
    "ConfigurationError",
    "load_configuration",
    "parse_generation_settings",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
