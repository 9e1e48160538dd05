"""
Rankers order the labels that survived filtering.

A ranker is a three-way comparison; ``rank`` applies it through a stable sort
so equal-rank labels keep their source order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from functools import cmp_to_key
from typing import TypeVar

__all__ = ["sort_by_length", "rank"]

T = TypeVar("T")


def sort_by_length(a: str, b: str) -> int:
    """Shorter labels first, then lexicographic; identical labels tie."""
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    if a == b:
        return 0
    return -1 if a < b else 1


def rank(
    entries: Iterable[T],
    compare: Callable[[str, str], int],
    label_of: Callable[[T], str],
) -> Sequence[T]:
    """Sort ``entries`` by their labels using ``compare``."""
    key = cmp_to_key(lambda left, right: compare(label_of(left), label_of(right)))
    return sorted(entries, key=key)
