"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class FailureKind(str, Enum):
    """Per-class failure category."""

    TYPE_LOAD = "type_load"
    SCHEMA_MAPPING = "schema_mapping"
    SCHEMA_RENDER = "schema_render"
    PERSISTENCE = "persistence"


@dataclass(frozen=True)
class ClassOutcome:
    """Outcome of generating the schema for one class."""

    class_name: str
    output_path: Path | None
    failure_kind: FailureKind | None
    detail: str | None

    @property
    def succeeded(self) -> bool:
        return self.failure_kind is None

    @staticmethod
    def written(class_name: str, output_path: Path) -> ClassOutcome:
        return ClassOutcome(
            class_name=class_name, output_path=output_path, failure_kind=None, detail=None
        )

    @staticmethod
    def failed(class_name: str, kind: FailureKind, error: Exception) -> ClassOutcome:
        return ClassOutcome(
            class_name=class_name, output_path=None, failure_kind=kind, detail=str(error)
        )


@dataclass(frozen=True)
class GenerationReport:
    """Folded outcomes of one batch, in input order."""

    outcomes: tuple[ClassOutcome, ...]

    @property
    def generated_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failures(self) -> tuple[ClassOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.succeeded)

    @property
    def written_paths(self) -> tuple[Path, ...]:
        return tuple(
            outcome.output_path for outcome in self.outcomes if outcome.output_path is not None
        )
