"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from metamodel_codegen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    LOG_LEVELS,
    ConfigurationError,
    write_placeholder_configuration,
)
from metamodel_codegen.declaration_emitting import UnsupportedTypeError
from metamodel_codegen.generation_run import (
    GenerationRequest,
    execute_declaration_generation,
    resolve_run_configuration,
)
from metamodel_codegen.meta_model_fetching import TransportError
from metamodel_codegen.reference_resolution import (
    ReferenceNotFoundError,
    UnresolvedReferenceError,
)
from metamodel_codegen.schema_nodes import DecodeError

LOGGER = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="metamodel-codegen")
def cli() -> None:
    """Generate Go declarations from a protocol meta-model."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration with defaults and guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="emit")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML configuration file",
)
@click.option(
    "--type",
    "type_name",
    required=False,
    help="Structure to emit (default: Diagnostic)",
)
@click.option(
    "--source-url",
    "source_url",
    required=False,
    help="URL of the meta-model document",
)
@click.option(
    "--source-file",
    "source_file",
    required=False,
    type=click.Path(path_type=str),
    help="Local meta-model document, used instead of the URL",
)
@click.option(
    "--flatten/--no-flatten",
    "flatten_inheritance",
    default=None,
    help="Copy extended and mixed-in properties into each declaration",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write declarations to this file instead of standard output",
)
@click.option(
    "--log-level",
    "log_level",
    required=False,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Override the configured log level",
)
def emit(  # pylint: disable=too-many-arguments
    config_path: str | None,
    type_name: str | None,
    source_url: str | None,
    source_file: str | None,
    flatten_inheritance: bool | None,
    output_path: str | None,
    log_level: str | None,
) -> None:
    """Emit the declaration of one structure and every structure it references."""
    request = GenerationRequest(
        config_path=config_path,
        type_name=type_name,
        source_url=source_url,
        source_path=source_file,
        flatten_inheritance=flatten_inheritance,
    )
    try:
        configuration = resolve_run_configuration(request)
        _configure_logging(log_level or configuration.logging.level)
        outcome = execute_declaration_generation(
            request, output_path=output_path, configuration=configuration
        )
    except (
        ConfigurationError,
        TransportError,
        DecodeError,
        ReferenceNotFoundError,
        UnresolvedReferenceError,
        UnsupportedTypeError,
        OSError,
        ValueError,
    ) as exc:
        raise CliError(str(exc)) from exc
    LOGGER.info(
        "Emitted %s from meta-model %s: %s",
        outcome.type_name,
        outcome.meta_model_version,
        ", ".join(outcome.emitted_structures),
    )


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


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
