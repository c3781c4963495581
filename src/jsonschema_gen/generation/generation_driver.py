"""Per-class schema generation pipeline with independent failure containment."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from jsonschema_gen.class_loading import TypeLoaderProtocol, TypeLoadError
from jsonschema_gen.schema_building import SchemaRenderError, build_schema, render_schema
from jsonschema_gen.schema_output import SchemaPersistenceError, SchemaSink
from jsonschema_gen.type_introspection import SchemaMappingError

from .generation_contracts import ClassOutcome, FailureKind, GenerationReport

logger = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIX = ".json"


def generate_schemas(
    class_names: Iterable[str],
    *,
    type_loader: TypeLoaderProtocol,
    sink: SchemaSink,
    sort_properties: bool = False,
) -> GenerationReport:
    """Generate one schema per class, in input order, attempting each exactly once.

    A failure for one class is logged and recorded in its outcome; the remaining
    classes are still processed.
    """
    outcomes: list[ClassOutcome] = []
    written_by_artifact: dict[str, str] = {}
    for class_name in class_names:
        outcome = _generate_one(
            class_name,
            type_loader=type_loader,
            sink=sink,
            sort_properties=sort_properties,
            written_by_artifact=written_by_artifact,
        )
        if not outcome.succeeded:
            logger.error(
                "Unable to generate schema for %s (%s): %s",
                class_name,
                outcome.failure_kind.value if outcome.failure_kind else "unknown",
                outcome.detail,
            )
        outcomes.append(outcome)
    return GenerationReport(outcomes=tuple(outcomes))


def generate(
    class_names: Iterable[str],
    *,
    type_loader: TypeLoaderProtocol,
    sink: SchemaSink,
    sort_properties: bool = False,
) -> int:
    """Generate schemas and return the number written successfully."""
    report = generate_schemas(
        class_names, type_loader=type_loader, sink=sink, sort_properties=sort_properties
    )
    return report.generated_count


def _generate_one(
    class_name: str,
    *,
    type_loader: TypeLoaderProtocol,
    sink: SchemaSink,
    sort_properties: bool,
    written_by_artifact: dict[str, str],
) -> ClassOutcome:
    try:
        loaded = type_loader.load_type(class_name)
    except TypeLoadError as exc:
        return ClassOutcome.failed(class_name, FailureKind.TYPE_LOAD, exc)

    try:
        text = render_schema(build_schema(loaded, sort_properties=sort_properties))
    except SchemaMappingError as exc:
        return ClassOutcome.failed(class_name, FailureKind.SCHEMA_MAPPING, exc)
    except SchemaRenderError as exc:
        return ClassOutcome.failed(class_name, FailureKind.SCHEMA_RENDER, exc)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error while mapping %s", class_name, exc_info=True)
        return ClassOutcome.failed(class_name, FailureKind.SCHEMA_MAPPING, exc)

    artifact_name = f"{loaded.__name__}{SCHEMA_FILE_SUFFIX}"
    previous_writer = written_by_artifact.get(artifact_name)
    if previous_writer is not None:
        logger.warning(
            "%s overwrites %s already written for %s", class_name, artifact_name, previous_writer
        )
    try:
        output_path = sink.write(artifact_name, text)
    except SchemaPersistenceError as exc:
        return ClassOutcome.failed(class_name, FailureKind.PERSISTENCE, exc)

    written_by_artifact[artifact_name] = class_name
    logger.info("Generated: %s", output_path.name)
    return ClassOutcome.written(class_name, output_path)
