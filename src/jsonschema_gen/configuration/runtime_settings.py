"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUTPUT_SUBDIRECTORY = "json-schema"


@dataclass(frozen=True)
class GenerationSettings:
    """Normalized schema generation settings."""

    source_directory: Path
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...] = ()
    output_root: Path = Path(".")
    output_subdirectory: str = DEFAULT_OUTPUT_SUBDIRECTORY
    classpath: tuple[Path, ...] = ()
    sort_properties: bool = False

    @property
    def output_directory(self) -> Path:
        return self.output_root / self.output_subdirectory

    @property
    def import_roots(self) -> tuple[Path, ...]:
        """Source directory first, then extra classpath entries."""
        extras = tuple(entry for entry in self.classpath if entry != self.source_directory)
        return (self.source_directory, *extras)


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    generation: GenerationSettings
