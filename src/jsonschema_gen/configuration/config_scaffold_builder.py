"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "jsonschema-gen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration template for jsonschema-gen.
# Replace every <REQUIRED> placeholder before running generate.
# Relative paths are resolved against the directory of this file.

# Root directory scanned for modules defining data classes.
source_directory: "<REQUIRED>"

# Glob patterns relative to source_directory, e.g. "com/acme/**".
# Entries may be comma-joined.
include_patterns:
  - "<REQUIRED>"
# exclude_patterns:
#   - "<OPTIONAL>"

# Schemas are written to <output_root>/<output_subdirectory>/<ClassName>.json.
# output_root defaults to the directory of this file.
# output_root: "<OPTIONAL>"
output_subdirectory: "json-schema"

# Extra import roots needed to load the data classes.
# source_directory is always searched first.
# classpath:
#   - "<OPTIONAL>"

# Emit object properties in lexicographic order instead of declaration order.
sort_properties: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
