"""Schema generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from jsonschema_gen.class_loading import ClassResolutionError, TypeLoader, resolve_class_names
from jsonschema_gen.configuration import GenerationSettings
from jsonschema_gen.schema_output import DirectorySink, SchemaSink

from .generation_contracts import GenerationReport
from .generation_driver import generate_schemas

logger = logging.getLogger(__name__)

ClassResolver = Callable[[Path, Sequence[str], Sequence[str]], list[str]]


class GenerationRunError(Exception):
    """Raised when a generation run cannot enumerate its candidate classes."""


def execute_schema_generation(
    settings: GenerationSettings,
    *,
    class_resolver: ClassResolver | None = None,
    type_loader_factory: Callable[[Sequence[Path]], TypeLoader] | None = None,
    sink_factory: Callable[[Path], SchemaSink] | None = None,
) -> GenerationReport:
    """Enumerate candidate classes and generate one schema file per class.

    Raises:
      GenerationRunError: If the candidate class list cannot be enumerated.
    """
    resolved_class_resolver = class_resolver or resolve_class_names
    resolved_type_loader_factory = type_loader_factory or TypeLoader
    resolved_sink_factory = sink_factory or DirectorySink

    try:
        class_names = resolved_class_resolver(
            settings.source_directory, settings.include_patterns, settings.exclude_patterns
        )
    except ClassResolutionError as exc:
        raise GenerationRunError(f"Unable to get list of data classes: {exc}") from exc

    sink = resolved_sink_factory(settings.output_directory)
    with resolved_type_loader_factory(settings.import_roots) as type_loader:
        report = generate_schemas(
            class_names,
            type_loader=type_loader,
            sink=sink,
            sort_properties=settings.sort_properties,
        )
    logger.info("Generated %d JSON schema files.", report.generated_count)
    return report
