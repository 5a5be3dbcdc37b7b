"""Write the generated suite to disk."""

from pathlib import Path

import click
from pydantic import BaseModel

from openapi_smoke.generator.naming import build_module_stem
from openapi_smoke.generator.testfile import render_conftest, render_manifest, render_test_module
from openapi_smoke.parser.base import ApiDocument
from openapi_smoke.parser.openapi import enumerate_operations

CONFTEST_NAME = "conftest.py"
MANIFEST_NAME = "__init__.py"


class GenerationResult(BaseModel):
    """What one generation run wrote."""

    output_dir: Path
    files: list[Path] = []
    module_names: list[str] = []
    collisions: list[str] = []

    @property
    def count(self) -> int:
        return len(self.files)


def write_suite(document: ApiDocument, output_dir: Path) -> GenerationResult:
    """Write one test module per operation, then the conftest and manifest.

    Existing files are overwritten without looking at them.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    result = GenerationResult(output_dir=output_dir)
    for descriptor in enumerate_operations(document):
        stem = build_module_stem(descriptor.method.value, descriptor.path)
        if stem in result.module_names:
            click.echo(
                f"  Warning: {descriptor.label} maps to {stem}.py, which was already "
                f"written in this run; overwriting",
                err=True,
            )
            result.collisions.append(stem)
        else:
            result.module_names.append(stem)

        file_path = output_dir / f"{stem}.py"
        file_path.write_text(render_test_module(descriptor), encoding="utf-8")
        result.files.append(file_path)

    default_base_url = document.default_server_url
    (output_dir / CONFTEST_NAME).write_text(render_conftest(default_base_url), encoding="utf-8")
    (output_dir / MANIFEST_NAME).write_text(
        render_manifest(result.module_names, default_base_url), encoding="utf-8"
    )
    return result
