"""Type loader tests."""

from __future__ import annotations

import sys
import uuid
from pathlib import Path

import pytest
from jsonschema_gen.class_loading import TypeLoader, TypeLoadError


@pytest.fixture
def package_root(tmp_path: Path) -> tuple[Path, str]:
    package = f"loadpkg_{uuid.uuid4().hex[:10]}"
    package_dir = tmp_path / package
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text("", encoding="utf-8")
    (package_dir / "models.py").write_text(
        "from dataclasses import dataclass\n\n\n"
        "@dataclass\nclass Order:\n    number: str\n\n    @dataclass\n"
        "    class Line:\n        sku: str\n\n\nVERSION = '1'\n",
        encoding="utf-8",
    )
    (package_dir / "exploding.py").write_text("raise RuntimeError('boom')\n", encoding="utf-8")
    (package_dir / "needs_dependency.py").write_text(
        "import definitely_not_installed_dependency\n", encoding="utf-8"
    )
    return tmp_path, package


def test_loads_top_level_and_nested_classes(package_root: tuple[Path, str]) -> None:
    root, package = package_root

    with TypeLoader([root]) as loader:
        order = loader.load_type(f"{package}.models.Order")
        line = loader.load_type(f"{package}.models.Order.Line")

    assert order.__name__ == "Order"
    assert line.__name__ == "Line"


def test_classpath_is_restored_after_use(package_root: tuple[Path, str]) -> None:
    root, _ = package_root
    before = list(sys.path)

    with TypeLoader([root]) as loader:
        assert loader.classpath[0] in sys.path

    assert sys.path == before


@pytest.mark.parametrize(
    ("suffix", "message"),
    [
        ("models.Missing", "Unable to find class"),
        ("models.VERSION", "does not name a class"),
        ("exploding.Anything", "boom"),
        ("needs_dependency.Anything", "definitely_not_installed_dependency"),
    ],
)
def test_unloadable_names_raise_type_load_error(
    package_root: tuple[Path, str], suffix: str, message: str
) -> None:
    root, package = package_root

    with TypeLoader([root]) as loader, pytest.raises(TypeLoadError, match=message):
        loader.load_type(f"{package}.{suffix}")


def test_unknown_package_and_bare_names_raise_type_load_error() -> None:
    loader = TypeLoader()

    with pytest.raises(TypeLoadError, match="Unable to find class"):
        loader.load_type("no_such_package_anywhere.Model")
    with pytest.raises(TypeLoadError, match="Not a fully-qualified class name"):
        loader.load_type("Model")
