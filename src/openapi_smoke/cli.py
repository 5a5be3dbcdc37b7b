"""CLI entry point for openapi-smoke."""

import sys
from pathlib import Path

import click

from openapi_smoke.generator.writer import write_suite
from openapi_smoke.parser.openapi import SchemaNotFoundError, load_schema

DEFAULT_SCHEMA = Path("schema.yml")
DEFAULT_OUTPUT = Path("tests") / "api" / "generated"


@click.command()
@click.option("-s", "--schema", "schema_path", default=DEFAULT_SCHEMA, show_default=True, type=click.Path(path_type=Path), help="OpenAPI document (YAML or JSON).")
@click.option("-o", "--output", default=DEFAULT_OUTPUT, show_default=True, type=click.Path(file_okay=False, path_type=Path), help="Directory for the generated test modules.")
def main(schema_path: Path, output: Path):
    """Generate one pytest smoke test per operation in an OpenAPI document."""
    schema_path = schema_path.resolve()
    output = output.resolve()

    try:
        document = load_schema(schema_path)
    except SchemaNotFoundError as e:
        click.echo(str(e), err=True)
        sys.exit(1)

    click.echo(f"Parsed {schema_path} ({len(document.paths)} paths).")
    result = write_suite(document, output)

    if result.collisions:
        click.echo(f"  {len(result.collisions)} file name collision(s); see warnings above.", err=True)
    click.echo(f"Generated {result.count} test files in {output}")
