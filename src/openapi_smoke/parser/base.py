"""Data models for a parsed OpenAPI document.

The loader converts the raw YAML/JSON mapping into these models; everything
downstream (enumeration, templating, rendering) works on them only.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class HttpMethod(str, Enum):
    """The HTTP methods the generator understands, in enumeration order."""

    GET = "get"
    POST = "post"
    PUT = "put"
    PATCH = "patch"
    DELETE = "delete"
    HEAD = "head"
    OPTIONS = "options"


class Server(BaseModel):
    """One entry of the document's `servers` list."""

    url: str | None = None


class Operation(BaseModel):
    """Metadata for one endpoint. Security is opaque and only echoed back."""

    model_config = ConfigDict(frozen=True)

    summary: str | None = None
    security: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> "Operation":
        if not isinstance(raw, dict):
            return cls()
        summary = raw.get("summary")
        security = raw.get("security")
        return cls(
            summary=str(summary) if summary is not None else None,
            security=security,
        )


class PathItem(BaseModel):
    """Operations defined on a single path, keyed by method."""

    operations: dict[HttpMethod, Operation] = {}

    @classmethod
    def from_raw(cls, raw: Any) -> "PathItem":
        if not isinstance(raw, dict):
            return cls()
        operations = {}
        for method in HttpMethod:
            if method.value in raw:
                operations[method] = Operation.from_raw(raw[method.value])
        return cls(operations=operations)

    def get(self, method: HttpMethod) -> Operation | None:
        return self.operations.get(method)


class ApiDocument(BaseModel):
    """A parsed API description: optional servers plus the path table."""

    servers: list[Server] | None = None
    paths: dict[str, PathItem] = {}

    @property
    def default_server_url(self) -> str | None:
        if not self.servers:
            return None
        return self.servers[0].url


class OperationDescriptor(BaseModel):
    """One (method, path) pair produced by enumeration."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str
    operation: Operation = Operation()

    @property
    def label(self) -> str:
        return f"{self.method.value.upper()} {self.path}"
