"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys

import click
import yaml

from swagger_schema_validator.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    ValidationSettings,
    load_configuration,
    write_placeholder_configuration,
)
from swagger_schema_validator.payload_validation import (
    Deserializer,
    PayloadError,
    SwaggerValidator,
)
from swagger_schema_validator.schema_compilation import UnknownDefinitionError
from swagger_schema_validator.spec_loading import DocumentFormat, SpecParseError
from swagger_schema_validator.validation_reporting import render_report_json, render_report_text
from swagger_schema_validator.vendor_keywords import TransformationTableError

_PAYLOAD_DESERIALIZERS: dict[DocumentFormat, Deserializer] = {
    DocumentFormat.JSON: json.loads,
    DocumentFormat.YAML: yaml.safe_load,
}


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="swagger-schema-validator")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Validate JSON/YAML payloads against Swagger 2.0 definitions."""
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
    help="Path to the YAML validator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML validator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-definitions")
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(path_type=str),
    help="Path to the Swagger spec file",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=str),
    help="Path to the YAML validator configuration file",
)
def list_definitions(spec_path: str | None, config_path: str | None) -> None:
    """Print the pointer of every definition in the Swagger spec."""
    validator, _ = _build_validator(spec_path, config_path)
    for pointer in validator.definition_pointers():
        click.echo(pointer)


@cli.command(name="validate")
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(path_type=str),
    help="Path to the Swagger spec file",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=str),
    help="Path to the YAML validator configuration file",
)
@click.option(
    "--definition",
    "definition_pointer",
    required=True,
    help="Definition pointer, for example /definitions/User",
)
@click.option(
    "--payload",
    "payload_path",
    required=True,
    type=click.Path(path_type=str, allow_dash=True),
    help="Path to the payload file, or - for stdin",
)
@click.option(
    "--payload-format",
    type=click.Choice([item.value for item in DocumentFormat]),
    default=None,
    help="Payload format; defaults to the configured format or json",
)
@click.option(
    "--deep-check/--no-deep-check",
    default=None,
    help="Validate children of containers that already failed",
)
@click.option(
    "--output-format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
)
@click.pass_context
def validate(  # pylint: disable=too-many-arguments
    ctx: click.Context,
    spec_path: str | None,
    config_path: str | None,
    definition_pointer: str,
    payload_path: str,
    payload_format: str | None,
    deep_check: bool | None,
    output_format: str,
) -> None:
    """Validate a payload against one definition and print the report."""
    validator, settings = _build_validator(spec_path, config_path)
    resolved_deep_check = settings.deep_check if deep_check is None else deep_check
    resolved_format = (
        DocumentFormat(payload_format) if payload_format else settings.payload_format
    )
    try:
        with click.open_file(payload_path, encoding="utf-8") as stream:
            payload = stream.read()
        report = validator.validate(
            payload,
            definition_pointer,
            _PAYLOAD_DESERIALIZERS[resolved_format],
            deep_check=resolved_deep_check,
        )
    except (PayloadError, UnknownDefinitionError, ValueError, yaml.YAMLError, OSError) as exc:
        raise CliError(str(exc)) from exc

    if output_format == "json":
        click.echo(render_report_json(report))
    else:
        click.echo(render_report_text(report))
    if not report.is_success:
        ctx.exit(1)


def _build_validator(
    spec_path: str | None, config_path: str | None
) -> tuple[SwaggerValidator, ValidationSettings]:
    if bool(spec_path) == bool(config_path):
        raise click.UsageError("Provide exactly one of --spec or --config.")
    try:
        if spec_path:
            return SwaggerValidator.for_spec_file(spec_path), ValidationSettings()
        configuration = load_configuration(str(config_path))
        validator = SwaggerValidator.for_spec_file(
            configuration.spec.path,
            configuration.spec.document_format,
            configuration.transformations,
        )
    except (ConfigurationError, SpecParseError, TransformationTableError) as exc:
        raise CliError(str(exc)) from exc
    return validator, configuration.validation


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
