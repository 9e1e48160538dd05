"""
Utility functions for the typeahead package.
"""

import os
import re

# Leading integer prefix, the way browsers parse numeric attributes
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")

_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/typeahead).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def parse_int_prefix(raw: str | None) -> int | None:
    """
    Parse the leading integer of ``raw``.

    ``"12px"`` gives 12, ``"abc"`` and ``None`` give ``None``.
    """
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def parse_flag(raw: str | None) -> bool | None:
    """
    Interpret a boolean attribute.

    A missing attribute is ``None`` (not set). A present attribute is true
    unless its value spells out a negative.
    """
    if raw is None:
        return None
    return raw.strip().lower() not in _FALSE_WORDS


def split_delimited(raw: str) -> list[str]:
    """Split a comma-delimited list, trimming whitespace around each element."""
    return [part.strip() for part in raw.split(",")]
