"""Generation domain exports."""

from .generation_contracts import ClassOutcome, FailureKind, GenerationReport
from .generation_driver import generate, generate_schemas
from .schema_generation_use_case import GenerationRunError, execute_schema_generation

__all__ = [
    "ClassOutcome",
    "FailureKind",
    "GenerationReport",
    "GenerationRunError",
    "execute_schema_generation",
    "generate",
    "generate_schemas",
]
