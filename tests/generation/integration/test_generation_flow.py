"""Schema generation flow integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jsonschema_gen.class_loading import ClassResolutionError
from jsonschema_gen.configuration import GenerationSettings
from jsonschema_gen.generation import FailureKind, GenerationRunError, execute_schema_generation

SAMPLES_ROOT = Path(__file__).resolve().parents[3] / "samples"


def _settings(output_root: Path, **overrides) -> GenerationSettings:
    values = {
        "source_directory": SAMPLES_ROOT,
        "include_patterns": ("sample_models/**",),
        "output_root": output_root,
    }
    values.update(overrides)
    return GenerationSettings(**values)


def test_generates_one_file_per_sample_class(tmp_path: Path) -> None:
    report = execute_schema_generation(_settings(tmp_path))

    output_dir = tmp_path / "json-schema"
    assert report.failures == ()
    assert report.generated_count == 11
    assert sorted(path.name for path in output_dir.iterdir()) == [
        "Address.json",
        "Availability.json",
        "Category.json",
        "Dimensions.json",
        "Employee.json",
        "Invoice.json",
        "Node.json",
        "Person.json",
        "Product.json",
        "Supplier.json",
    ]


def test_generated_documents_reference_repeated_and_recursive_types(tmp_path: Path) -> None:
    execute_schema_generation(_settings(tmp_path, output_subdirectory="schemas"))
    output_dir = tmp_path / "schemas"

    invoice = json.loads((output_dir / "Invoice.json").read_text(encoding="utf-8"))
    employee = json.loads((output_dir / "Employee.json").read_text(encoding="utf-8"))

    assert invoice["id"] == "Invoice"
    assert invoice["properties"]["billing"]["id"] == "Address"
    assert list(invoice["properties"]["customer"]["properties"]) == ["street", "city"]
    assert invoice["properties"]["shipping"] == {"$ref": "Address"}
    assert list(employee["properties"]) == ["id", "fullName", "manager", "reports"]
    assert employee["properties"]["manager"] == {"$ref": "Employee"}
    assert employee["properties"]["reports"] == {"type": "array", "items": {"$ref": "Employee"}}
    assert employee["required"] == ["id"]


def test_exclude_patterns_narrow_the_batch(tmp_path: Path) -> None:
    excluded = ("sample_models/catalog.py", "sample_models/billing/**")

    report = execute_schema_generation(_settings(tmp_path, exclude_patterns=excluded))

    assert [outcome.class_name for outcome in report.outcomes] == [
        "sample_models.people.Address",
        "sample_models.people.Person",
        "sample_models.people.Node",
        "sample_models.people.Employee",
    ]


def test_one_unmappable_class_does_not_stop_the_batch(tmp_path: Path) -> None:
    source = tmp_path / "src"
    (source / "shapes").mkdir(parents=True)
    (source / "shapes" / "__init__.py").write_text("", encoding="utf-8")
    (source / "shapes" / "flat.py").write_text(
        "from dataclasses import dataclass\n\n\n"
        "@dataclass\nclass Square:\n    side: float\n\n\n"
        "class Marker:\n    pass\n\n\n"
        "@dataclass\nclass Circle:\n    radius: float\n",
        encoding="utf-8",
    )

    report = execute_schema_generation(
        GenerationSettings(
            source_directory=source,
            include_patterns=("shapes/**",),
            output_root=tmp_path / "out",
        )
    )

    assert report.generated_count == 2
    assert [(failure.class_name, failure.failure_kind) for failure in report.failures] == [
        ("shapes.flat.Marker", FailureKind.SCHEMA_MAPPING)
    ]
    assert sorted(path.name for path in (tmp_path / "out" / "json-schema").iterdir()) == [
        "Circle.json",
        "Square.json",
    ]


def test_enumeration_failure_aborts_the_run(tmp_path: Path) -> None:
    def failing_resolver(*_args) -> list[str]:
        raise ClassResolutionError("Source directory not found: nowhere")

    with pytest.raises(GenerationRunError, match="Unable to get list of data classes"):
        execute_schema_generation(_settings(tmp_path), class_resolver=failing_resolver)

    assert not (tmp_path / "json-schema").exists()
