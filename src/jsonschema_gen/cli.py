"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from jsonschema_gen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from jsonschema_gen.generation import GenerationRunError, execute_schema_generation

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


class _ClickEchoHandler(logging.Handler):
    """Route log records through click so they follow the active stderr stream."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # noqa: BLE001
            self.handleError(record)


def configure_logging(log_level: str) -> None:
    """Attach a single stderr handler to the package logger at the requested level."""
    package_logger = logging.getLogger("jsonschema_gen")
    package_logger.handlers.clear()
    package_logger.setLevel(log_level.upper())
    handler = _ClickEchoHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="jsonschema-gen")
def cli() -> None:
    """Generate JSON Schema files from annotated data classes."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generation configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generation configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generation configuration file",
)
@click.option(
    "--log-level",
    "log_level",
    required=False,
    default="INFO",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity for per-class progress and failures",
)
def generate(config_path: str, log_level: str) -> None:
    """Write one JSON schema file per data class selected by the configuration."""
    configure_logging(log_level)
    try:
        configuration = load_configuration(config_path)
        report = execute_schema_generation(configuration.generation)
    except (ConfigurationError, GenerationRunError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"Generated {report.generated_count} JSON schema files.")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
