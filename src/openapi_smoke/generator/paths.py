"""Path templating: turn `/pets/{petId}` into a run-time path expression.

The generated test does not contain resolved values. It contains an
expression that asks the `api_config` fixture for each placeholder, so
values are picked up when the test runs, not when it is generated.
"""

import re
from collections.abc import Callable

from pydantic import BaseModel

# Braces delimit; names never contain braces. Unbalanced or empty braces
# don't match and stay in the path as literal text.
PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")

CONFIG_NAME = "api_config"

Lookup = Callable[[str, str, str], str]


def env_var_for(name: str) -> str:
    """Environment variable consulted for a placeholder, e.g. PATH_PETID."""
    return f"PATH_{name.upper()}"


def fallback_for(name: str) -> str:
    """Literal used when a placeholder cannot be resolved, e.g. REPLACE_PETID."""
    return f"REPLACE_{name.upper()}"


class PathTemplate(BaseModel):
    """A path pattern split into literal text and placeholders."""

    pattern: str
    has_path_params: bool
    param_names: list[str]
    expression: str

    def resolve(self, lookup: Lookup) -> str:
        """Substitute every placeholder through `lookup(name, env, fallback)`.

        This is the in-process twin of `expression`; ApiConfig.path_param
        has the matching signature.
        """
        return PLACEHOLDER_RE.sub(
            lambda m: lookup(m.group(1), env_var_for(m.group(1)), fallback_for(m.group(1))),
            self.pattern,
        )


def _param_call(name: str) -> str:
    return f"{CONFIG_NAME}.path_param({name!r}, {env_var_for(name)!r}, {fallback_for(name)!r})"


def template_path(pattern: str) -> PathTemplate:
    """Build the PathTemplate for an OpenAPI path pattern."""
    names = PLACEHOLDER_RE.findall(pattern)
    if not names:
        return PathTemplate(
            pattern=pattern,
            has_path_params=False,
            param_names=[],
            expression=repr(pattern),
        )

    parts = []
    pos = 0
    for match in PLACEHOLDER_RE.finditer(pattern):
        literal = pattern[pos:match.start()]
        if literal:
            parts.append(repr(literal))
        parts.append(_param_call(match.group(1)))
        pos = match.end()
    if pos < len(pattern):
        parts.append(repr(pattern[pos:]))

    return PathTemplate(
        pattern=pattern,
        has_path_params=True,
        param_names=names,
        expression=" + ".join(parts),
    )
