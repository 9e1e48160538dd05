"""
Matchers decide whether a candidate label survives filtering.

Queries are trimmed and matched literally (regex metacharacters are escaped)
and case-insensitively.
"""

from __future__ import annotations

import re

__all__ = ["filter_contains", "filter_starts_with", "MATCHERS", "compile_query"]


def compile_query(query: str, anchored: bool = False) -> re.Pattern[str]:
    """Compile the trimmed ``query`` into a literal, case-insensitive pattern."""
    escaped = re.escape(query.strip())
    if anchored:
        escaped = "^" + escaped
    return re.compile(escaped, re.IGNORECASE)


def filter_contains(label: str, query: str) -> bool:
    """Match when the trimmed query occurs anywhere in ``label``."""
    return compile_query(query).search(label) is not None


def filter_starts_with(label: str, query: str) -> bool:
    """Match when ``label`` begins with the trimmed query."""
    return compile_query(query, anchored=True).search(label) is not None


# Built-in matchers selectable by name from attribute-like configuration
MATCHERS = {
    "contains": filter_contains,
    "startswith": filter_starts_with,
    "starts-with": filter_starts_with,
}
