"""Pluggable type loading from an import path."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Sequence
from pathlib import Path
from types import TracebackType
from typing import Any, Protocol


class TypeLoadError(Exception):
    """Raised when a name does not resolve to a loadable class."""


class TypeLoaderProtocol(Protocol):
    """Capability used by the generation driver to turn names into types."""

    def load_type(self, name: str) -> type: ...


class TypeLoader:
    """Load classes by fully-qualified name.

    Used as a context manager, the configured classpath entries are prepended to
    `sys.path` and the previous import path is restored on exit.
    """

    def __init__(self, classpath: Sequence[Path | str] = ()) -> None:
        self._classpath = tuple(str(Path(entry).resolve()) for entry in classpath)
        self._saved_path: list[str] | None = None

    @property
    def classpath(self) -> tuple[str, ...]:
        return self._classpath

    def __enter__(self) -> TypeLoader:
        self._saved_path = list(sys.path)
        sys.path[:0] = [entry for entry in self._classpath if entry not in sys.path]
        importlib.invalidate_caches()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if self._saved_path is not None:
            sys.path[:] = self._saved_path
            self._saved_path = None

    def load_type(self, name: str) -> type:
        """Import the longest module prefix of `name` and resolve the rest as attributes."""
        parts = name.split(".")
        if len(parts) < 2 or not all(parts):
            raise TypeLoadError(f"Not a fully-qualified class name: {name}")

        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            module = _import_module(module_name, name)
            if module is not None:
                return _resolve_attributes(module, parts[split:], name)
        raise TypeLoadError(f"Unable to find class {name}")


def _import_module(module_name: str, requested: str) -> Any | None:
    try:
        return importlib.import_module(module_name)
    except ModuleNotFoundError as exc:
        missing = exc.name or ""
        if missing == module_name or module_name.startswith(f"{missing}."):
            return None
        raise TypeLoadError(f"Unable to import {module_name} for {requested}: {exc}") from exc
    except Exception as exc:  # noqa: BLE001 - arbitrary user module code runs on import
        raise TypeLoadError(f"Unable to import {module_name} for {requested}: {exc}") from exc


def _resolve_attributes(module: Any, attributes: Sequence[str], requested: str) -> type:
    target = module
    for attribute in attributes:
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise TypeLoadError(f"Unable to find class {requested}") from exc
    if not isinstance(target, type):
        raise TypeLoadError(f"{requested} does not name a class")
    return target
