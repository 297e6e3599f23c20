"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from content_schema_gen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from content_schema_gen.schema_export import (
    SchemaExportError,
    TargetResolutionError,
    export_schemas,
    render_schema_text,
    resolve_target_type,
)
from content_schema_gen.schema_generation import SchemaGenerationError

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="content-schema-gen")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log generation details.")
def cli(verbose: bool) -> None:
    """Generate JSON schemas for configuration and content types."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


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
def generate(config_path: str) -> None:
    """Write one schema file per configured target."""
    try:
        configuration = load_configuration(config_path)
        exported = export_schemas(configuration)
    except (ConfigurationError, SchemaExportError) as exc:
        raise CliError(str(exc)) from exc
    for schema in exported:
        click.echo(str(schema.output_path))


@cli.command(name="show")
@click.argument("type_path")
@click.option("--schema-uri", default=None, help="Value for the $schema key")
@click.option(
    "--indent",
    default=2,
    show_default=True,
    type=click.IntRange(min=1),
    help="Indentation of the printed JSON",
)
def show(type_path: str, schema_uri: str | None, indent: int) -> None:
    """Print the schema document for TYPE_PATH (module:QualifiedName)."""
    try:
        text = render_schema_text(
            resolve_target_type(type_path), schema_uri=schema_uri, indent=indent
        )
    except (TargetResolutionError, SchemaGenerationError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(text, nl=False)


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
