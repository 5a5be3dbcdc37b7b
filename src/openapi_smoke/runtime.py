"""Run-time support imported by the generated smoke tests.

The generated conftest builds one ApiConfig from the environment per test
session; the tests themselves only ever talk to that object.
"""

import os
from collections.abc import Mapping
from urllib.parse import quote, urlencode

from pydantic import BaseModel

DEFAULT_TIMEOUT = 30.0
BODY_SNIPPET_LIMIT = 500


class ApiConfig(BaseModel):
    """Everything a generated test needs to know about the target API."""

    base_url: str | None = None
    auth_header: str | None = None
    # Explicit values by placeholder name; these win over the environment.
    path_params: dict[str, str] = {}
    # Snapshot of PATH_* variables taken in from_env.
    env_path_params: dict[str, str] = {}
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(
        cls,
        default_base_url: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "ApiConfig":
        """Read BASE_URL, PW_BASE_URL, AUTH_HEADER and PATH_* once.

        Base URL precedence: BASE_URL > PW_BASE_URL > default_base_url.
        """
        env = os.environ if environ is None else environ
        base_url = env.get("BASE_URL") or env.get("PW_BASE_URL") or default_base_url
        return cls(
            base_url=base_url or None,
            auth_header=env.get("AUTH_HEADER") or None,
            env_path_params={k: v for k, v in env.items() if k.startswith("PATH_") and v},
        )

    def path_param(self, name: str, env: str, fallback: str) -> str:
        """Value for the `{name}` placeholder, percent-encoded as one segment.

        Falls back to the literal `fallback` (REPLACE_<NAME>) so an
        unresolved parameter produces an obviously bogus URL.
        """
        value = self.path_params.get(name) or self.env_path_params.get(env)
        if not value:
            return fallback
        return quote(str(value), safe="")

    def build_url(self, path: str, query: Mapping[str, object] | None = None) -> str:
        """Join the base URL and a path, keeping any path prefix on the base."""
        if not self.base_url:
            raise ValueError("base URL is not set")
        url = self.base_url.rstrip("/") + "/" + path.lstrip("/")
        if query:
            pairs = [(k, str(v)) for k, v in query.items() if v is not None]
            if pairs:
                url += "?" + urlencode(pairs)
        return url

    def auth_headers(self) -> dict[str, str]:
        """`Authorization` header from AUTH_HEADER, or nothing when it is unset."""
        if self.auth_header:
            return {"Authorization": self.auth_header}
        return {}


def describe_response(response, limit: int = BODY_SNIPPET_LIMIT) -> str:
    """One-line summary of a response for assertion messages."""
    request = getattr(response, "request", None)
    method = getattr(request, "method", None) or "?"
    body = response.text or ""
    return f"{method} {response.url} => {response.status_code} | body: {body[:limit]}"
