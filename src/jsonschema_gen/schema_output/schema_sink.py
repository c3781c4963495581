"""Schema artifact persistence."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SchemaPersistenceError(Exception):
    """Raised when a schema artifact cannot be written."""


class SchemaSink(Protocol):
    """Destination for named schema artifacts."""

    def write(self, artifact_name: str, text: str) -> Path: ...


class DirectorySink:
    """Write schema artifacts as UTF-8 files into one directory."""

    def __init__(self, directory: Path | str) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def write(self, artifact_name: str, text: str) -> Path:
        """Write `text` to `<directory>/<artifact_name>`, creating the directory.

        Raises:
          SchemaPersistenceError: If the directory or file cannot be written.
        """
        destination = self._directory / artifact_name
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            destination.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise SchemaPersistenceError(f"Unable to write {destination}: {exc}") from exc
        return destination
