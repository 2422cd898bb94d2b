"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import math
import sys
from pathlib import Path

import click

from schema_transformer.code_generation import CodegenError, JavaScriptCodegen
from schema_transformer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_transformer.field_inventory import describe_field_type, write_field_inventory
from schema_transformer.record_checking import RecordCheckError, check_record, load_record
from schema_transformer.schema_catalog import list_bundled_schemas, resolve_schema
from schema_transformer.schema_management import (
    SchemaDocument,
    SchemaError,
    flatten_schema,
    parse_shape,
)
from schema_transformer.transform_search import (
    TransformSearchError,
    edit_distance,
    find_transform_path,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-transformer")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON configuration file",
)
@click.option("--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Inspect JSON schemas, check records and generate schema transformers."""
    configuration = Configuration()
    if config_path is not None:
        try:
            configuration = load_configuration(config_path)
        except ConfigurationError as exc:
            raise CliError(str(exc)) from exc
    _configure_logging("DEBUG" if verbose else configuration.logging.level)
    ctx.obj = configuration


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
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-schemas")
@click.pass_obj
def list_schemas(configuration: Configuration) -> None:
    """List bundled and configured schema names."""
    for name in list_bundled_schemas():
        document = _resolve(name, configuration)
        click.echo(f"{name}\t{document.title or '-'}\tbundled")
    for name, path in configuration.catalog.schemas.items():
        click.echo(f"{name}\t-\t{path}")


@cli.command(name="show-schema")
@click.argument("schema_ref")
@click.pass_obj
def show_schema(configuration: Configuration, schema_ref: str) -> None:
    """Print a schema document as indented JSON."""
    document = _resolve(schema_ref, configuration)
    click.echo(json.dumps(document.root, indent=2))


@cli.command(name="fields")
@click.argument("schema_ref")
@click.pass_obj
def fields(configuration: Configuration, schema_ref: str) -> None:
    """List the flattened fields of a schema."""
    document = _resolve(schema_ref, configuration)
    try:
        flattened = flatten_schema(document)
    except SchemaError as exc:
        raise CliError(str(exc)) from exc
    for field in flattened:
        required = "required" if field.required else "optional"
        click.echo(f"{field.path}\t{describe_field_type(field.definition)}\t{required}")


@cli.command(name="check")
@click.argument("schema_ref")
@click.argument("record_path", type=click.Path(path_type=str))
@click.pass_obj
def check(configuration: Configuration, schema_ref: str, record_path: str) -> None:
    """Check a JSON record against a schema."""
    document = _resolve(schema_ref, configuration)
    try:
        violations = check_record(document, load_record(record_path))
    except RecordCheckError as exc:
        raise CliError(str(exc)) from exc
    if not violations:
        click.echo("OK")
        return
    for violation in violations:
        click.echo(f"{violation.path}: {violation.message} [{violation.keyword}]")
    raise CliError(
        f"Record does not conform to schema '{document.name}': {len(violations)} violation(s)."
    )


@cli.command(name="transform")
@click.argument("source_ref")
@click.argument("target_ref")
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional file to write the generated JavaScript to",
)
@click.pass_obj
def transform(
    configuration: Configuration, source_ref: str, target_ref: str, output_path: str | None
) -> None:
    """Generate a JavaScript function converting SOURCE data into TARGET data."""
    source = _resolve(source_ref, configuration)
    target = _resolve(target_ref, configuration)
    try:
        path = find_transform_path(parse_shape(source.root), parse_shape(target.root))
        code = JavaScriptCodegen(
            argument_name=configuration.codegen.argument_name,
            function_name=configuration.codegen.function_name,
        ).generate(path)
    except SchemaError as exc:
        raise CliError(str(exc)) from exc
    except (TransformSearchError, CodegenError) as exc:
        raise CliError(f"Could not find transformer between schemas: {exc}") from exc

    if output_path is None:
        click.echo(code)
        return
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(code + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


@cli.command(name="distance")
@click.argument("lhs_ref")
@click.argument("rhs_ref")
@click.pass_obj
def distance(configuration: Configuration, lhs_ref: str, rhs_ref: str) -> None:
    """Print the structural edit distance between two schemas."""
    lhs = _resolve(lhs_ref, configuration)
    rhs = _resolve(rhs_ref, configuration)
    try:
        value = edit_distance(parse_shape(lhs.root), parse_shape(rhs.root))
    except SchemaError as exc:
        raise CliError(str(exc)) from exc
    click.echo("inf" if math.isinf(value) else str(int(value)))


@cli.command(name="export-fields")
@click.argument("schema_ref")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the field inventory workbook to write",
)
@click.pass_obj
def export_fields(configuration: Configuration, schema_ref: str, output_path: str) -> None:
    """Write an Excel workbook describing every field of a schema."""
    document = _resolve(schema_ref, configuration)
    try:
        written = write_field_inventory(document, flatten_schema(document), output_path)
    except (SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


def _resolve(reference: str, configuration: Configuration) -> SchemaDocument:
    try:
        return resolve_schema(reference, configuration.catalog.schemas)
    except SchemaError as exc:
        raise CliError(str(exc)) from exc


class _ClickStderrHandler(logging.Handler):  # pylint: disable=too-few-public-methods
    """Write log records to whatever stream click currently treats as stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


def _configure_logging(level: str) -> None:
    package_logger = logging.getLogger("schema_transformer")
    for handler in list(package_logger.handlers):
        if isinstance(handler, _ClickStderrHandler):
            package_logger.removeHandler(handler)
    handler = _ClickStderrHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level))


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
