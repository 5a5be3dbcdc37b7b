"""File and function names for generated test modules.

Examples:
  get  /customers/{customerId}        -> test_get_customers_customerId.py
  post /offers/season-groups/{id}     -> test_post_offers_season-groups_id.py

Names depend only on (method, path). Two operations that sanitize to the
same name write the same file; the writer warns and the later one wins.
"""

import re

MAX_FILE_NAME_LENGTH = 200

MODULE_PREFIX = "test_"

_PLACEHOLDER_RUN = re.compile(r"\{[^}]+\}")
_NON_WORD = re.compile(r"\W", re.ASCII)
# A run of unsafe characters, together with any underscores touching it.
_UNSAFE_RUN = re.compile(r"_*[^a-zA-Z0-9_-]+_*")
_EDGE_UNDERSCORES = re.compile(r"^_+|_+$")


def sanitize_file_name(value: str) -> str:
    """Reduce an arbitrary string to a safe, bounded file base name."""
    name = _PLACEHOLDER_RUN.sub(lambda m: _NON_WORD.sub("", m.group(0)), value)
    name = _UNSAFE_RUN.sub("_", name)
    name = _EDGE_UNDERSCORES.sub("", name)
    return name[:MAX_FILE_NAME_LENGTH]


def build_module_stem(method: str, path: str) -> str:
    """Module name (file name without `.py`) for one operation."""
    return MODULE_PREFIX + sanitize_file_name(f"{method}_{path}")


def build_function_name(stem: str) -> str:
    """Test function name for a module stem; hyphens are not valid identifiers."""
    return stem.replace("-", "_")
