"""Candidate class enumeration from a source directory."""

from __future__ import annotations

import ast
import fnmatch
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_INCLUDE_PATTERN = "**"


class ClassResolutionError(Exception):
    """Raised when the candidate class list cannot be enumerated."""


def split_patterns(patterns: Iterable[str] | None) -> tuple[str, ...]:
    """Flatten pattern entries, each of which may itself be comma-joined."""
    if not patterns:
        return ()
    flattened: list[str] = []
    for entry in patterns:
        for pattern in entry.split(","):
            stripped = pattern.strip().lstrip("/")
            if stripped:
                flattened.append(stripped)
    return tuple(flattened)


def resolve_class_names(
    source_directory: Path | str,
    include_patterns: Sequence[str] | None = None,
    exclude_patterns: Sequence[str] | None = None,
) -> list[str]:
    """Return fully-qualified names of public top-level classes in matching modules.

    Modules are discovered as `*.py` files relative to `source_directory`, filtered
    by glob patterns, and inspected with `ast` without being imported.

    Raises:
      ClassResolutionError: If the directory or a matching module cannot be read.
    """
    root = Path(source_directory)
    if not root.is_dir():
        raise ClassResolutionError(f"Source directory not found: {root}")

    includes = split_patterns(include_patterns) or (DEFAULT_INCLUDE_PATTERN,)
    excludes = split_patterns(exclude_patterns)
    class_names: list[str] = []
    for relative_path in _candidate_module_paths(root):
        if not _matches_any(relative_path, includes) or _matches_any(relative_path, excludes):
            continue
        module_name = module_name_for(relative_path)
        for class_name in _public_class_names(root / relative_path):
            class_names.append(f"{module_name}.{class_name}")
    logger.debug("Resolved candidate classes: %s", class_names)
    return class_names


def module_name_for(relative_path: str) -> str:
    """Convert `pkg/mod.py` into `pkg.mod` (and `pkg/__init__.py` into `pkg`)."""
    parts = list(Path(relative_path).with_suffix("").parts)
    if len(parts) > 1 and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)


def _candidate_module_paths(root: Path) -> list[str]:
    try:
        paths = sorted(path.relative_to(root).as_posix() for path in root.rglob("*.py"))
    except OSError as exc:
        raise ClassResolutionError(f"Unable to list modules under {root}: {exc}") from exc
    return [path for path in paths if not _in_skipped_directory(path)]


def _in_skipped_directory(relative_path: str) -> bool:
    directories = relative_path.split("/")[:-1]
    return any(part == "__pycache__" or part.startswith(".") for part in directories)


def _matches_any(relative_path: str, patterns: Sequence[str]) -> bool:
    return any(_matches(relative_path, pattern) for pattern in patterns)


def _matches(relative_path: str, pattern: str) -> bool:
    if fnmatch.fnmatchcase(relative_path, pattern):
        return True
    # `**/x.py` also matches `x.py` at the root.
    while pattern.startswith("**/"):
        pattern = pattern[3:]
        if fnmatch.fnmatchcase(relative_path, pattern):
            return True
    return False


def _public_class_names(module_path: Path) -> list[str]:
    try:
        source = module_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ClassResolutionError(f"Unable to read module {module_path}: {exc}") from exc
    try:
        tree = ast.parse(source, filename=str(module_path))
    except (SyntaxError, ValueError) as exc:
        logger.warning("Skipping module that does not parse: %s (%s)", module_path, exc)
        return []
    return [
        node.name
        for node in tree.body
        if isinstance(node, ast.ClassDef) and not node.name.startswith("_")
    ]
