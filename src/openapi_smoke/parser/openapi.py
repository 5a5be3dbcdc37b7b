"""OpenAPI document loader and operation enumerator.

Reads an OpenAPI 3.x document (YAML or JSON) into an
ApiDocument and walks its path table in document order.
"""

from collections.abc import Iterator
from pathlib import Path

import yaml

from .base import ApiDocument, HttpMethod, OperationDescriptor, PathItem, Server


class SchemaNotFoundError(FileNotFoundError):
    """The schema file does not exist."""


class SchemaError(ValueError):
    """The schema parsed, but its top level is not a mapping."""


def load_schema(file_path: Path) -> ApiDocument:
    """Load an OpenAPI file from disk into an ApiDocument.

    Raises SchemaNotFoundError when the file is missing. YAML syntax errors
    propagate as yaml.YAMLError.
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise SchemaNotFoundError(f"Schema not found at {file_path}")

    text = file_path.read_text(encoding="utf-8")
    doc = yaml.safe_load(text)
    return build_document(doc)


def build_document(doc: object) -> ApiDocument:
    """Convert an already-parsed mapping into an ApiDocument."""
    if doc is None:
        return ApiDocument()
    if not isinstance(doc, dict):
        raise SchemaError(f"Expected a mapping at the top level, got {type(doc).__name__}")

    paths = {}
    for pattern, path_item in (doc.get("paths") or {}).items():
        paths[str(pattern)] = PathItem.from_raw(path_item)

    servers = None
    raw_servers = doc.get("servers")
    if isinstance(raw_servers, list):
        servers = [
            Server(url=str(s["url"]) if s.get("url") is not None else None)
            for s in raw_servers
            if isinstance(s, dict)
        ]

    return ApiDocument(servers=servers, paths=paths)


def enumerate_operations(document: ApiDocument) -> Iterator[OperationDescriptor]:
    """Yield one descriptor per (path, method) defined in the document.

    Paths come out in document order; methods within a path follow
    HttpMethod's fixed order, not the order they were declared in.
    """
    for pattern, path_item in document.paths.items():
        for method in HttpMethod:
            operation = path_item.get(method)
            if operation is None:
                continue
            yield OperationDescriptor(method=method, path=pattern, operation=operation)
