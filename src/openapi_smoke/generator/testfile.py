"""Render generated files from the Jinja2 templates in openapi_smoke/templates.

Each renderer fills named slots and renders once; no code is assembled by
string concatenation here except the path expression, which comes from
paths.template_path.
"""

import json
from collections.abc import Sequence
from pathlib import Path

import jinja2

from openapi_smoke.generator.naming import build_function_name, build_module_stem
from openapi_smoke.generator.paths import template_path
from openapi_smoke.parser.base import OperationDescriptor

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"

_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def build_test_title(method: str, path: str, summary: str | None = None) -> str:
    """`GET /pets` or `GET /pets - List all pets`."""
    base = f"{method.upper()} {path}"
    return f"{base} - {summary}" if summary else base


def escape_single_quoted(text: str) -> str:
    """Escape text for a single-quoted Python string literal.

    Non-printable characters (NUL, line breaks, other controls) become
    backslash escapes so the generated module always parses.
    """
    out = []
    for ch in text:
        if ch == "\\":
            out.append("\\\\")
        elif ch == "'":
            out.append("\\'")
        elif not ch.isprintable():
            out.append(ch.encode("unicode_escape").decode("ascii"))
        else:
            out.append(ch)
    return "".join(out)


def render_test_module(descriptor: OperationDescriptor) -> str:
    """Render the smoke-test module for one operation."""
    method = descriptor.method.value
    operation = descriptor.operation
    title = build_test_title(method, descriptor.path, operation.summary)
    security = operation.security
    stem = build_module_stem(method, descriptor.path)

    template = _env.get_template("test_module.py.j2")
    return template.render(
        title=escape_single_quoted(title),
        function_name=build_function_name(stem),
        method=method.upper(),
        path_expression=template_path(descriptor.path).expression,
        security=json.dumps(security, default=str) if security is not None else None,
    )


def render_conftest(default_base_url: str | None) -> str:
    """Render the conftest that provides the `api_config` fixture."""
    template = _env.get_template("conftest.py.j2")
    return template.render(default_base_url=repr(default_base_url))


def render_manifest(module_names: Sequence[str], default_base_url: str | None) -> str:
    """Render the package `__init__.py` listing every generated module."""
    note = " ".join(default_base_url.split()) if default_base_url else "n/a"
    template = _env.get_template("manifest.py.j2")
    return template.render(
        module_names=[repr(name) for name in module_names],
        default_base_url_note=note,
    )
