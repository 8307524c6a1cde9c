"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from api_schema_kit.api_loading import ApiDefinition, ApiLoadError, load_api_definition
from api_schema_kit.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from api_schema_kit.openapi_projection import (
    SUPPORTED_FORMATS,
    OASBuilder,
    OpenAPIDocumentError,
    check_openapi_document,
    dump_openapi_document,
)
from api_schema_kit.validation import validate_response


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="api-schema-kit")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Schema-driven request validation and OpenAPI generation."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML API configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML API configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-openapi")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON API configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the OpenAPI document to write; printed to stdout when omitted",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice(SUPPORTED_FORMATS),
    help="Override the configured output format",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Validate the generated document against the OpenAPI 3.0 schema before writing.",
)
def generate_openapi(
    config_path: str, output_path: str | None, output_format: str | None, check: bool
) -> None:
    """Generate an OpenAPI 3.0 document from the configured API definition."""
    configuration, definition = _load_api(config_path)
    document = OASBuilder(
        configuration.info.to_openapi(),
        definition.operations,
        definition.responses,
    ).build()
    try:
        if check:
            check_openapi_document(document)
        text = dump_openapi_document(document, output_format or configuration.output.format)
        if output_path is None:
            click.echo(text, nl=False)
            return
        Path(output_path).write_text(text, encoding="utf-8")
    except (OpenAPIDocumentError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


@cli.command(name="validate-response")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON API configuration file",
)
@click.option(
    "--operation-id",
    "operation_id",
    required=True,
    help="operationId of the operation whose response schema is used",
)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a JSON file holding the response payload",
)
def validate_response_command(config_path: str, operation_id: str, input_path: str) -> None:
    """Validate a JSON response payload against an operation's response schema."""
    configuration, definition = _load_api(config_path)
    operation = definition.find_operation(operation_id)
    if operation is None:
        raise CliError(f"Unknown operationId: {operation_id}")
    try:
        payload = json.loads(Path(input_path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise CliError(f"Cannot read response payload: {exc}") from exc

    result = validate_response(
        operation,
        payload,
        detailed_errors=configuration.validation.detailed_errors,
    )
    if not result.success:
        raise CliError(f"{operation_id}: {result.description}")
    click.echo("ok")


def _load_api(config_path: str) -> tuple[Configuration, ApiDefinition]:
    try:
        configuration = load_configuration(config_path)
        definition = load_api_definition(configuration.api)
    except (ConfigurationError, ApiLoadError) as exc:
        raise CliError(str(exc)) from exc
    return configuration, definition


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
