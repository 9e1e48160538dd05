"""
Renderers turn a candidate into the item the dropdown displays.

Every case-insensitive occurrence of the trimmed query is wrapped in a
``<mark>`` element in ``markup`` and recorded as an offset pair in
``highlights``; ``text`` stays the untouched label.
"""

from __future__ import annotations

import html

from typeahead.domain.types import Candidate, IdentifiedCandidate, PlainCandidate, RenderedItem

from .matching import compile_query

__all__ = ["render_candidate", "render_plain", "render_identified", "find_highlights", "mark_up"]

MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"


def find_highlights(label: str, query: str) -> tuple[tuple[int, int], ...]:
    """Offsets of every non-overlapping occurrence of the trimmed query."""
    if not query.strip():
        return ()
    pattern = compile_query(query)
    return tuple(match.span() for match in pattern.finditer(label))


def mark_up(label: str, highlights: tuple[tuple[int, int], ...]) -> str:
    """Escape ``label`` and wrap the highlighted ranges in ``<mark>``."""
    parts: list[str] = []
    cursor = 0
    for start, end in highlights:
        parts.append(html.escape(label[cursor:start]))
        parts.append(f"{MARK_OPEN}{html.escape(label[start:end])}{MARK_CLOSE}")
        cursor = end
    parts.append(html.escape(label[cursor:]))
    return "".join(parts)


def _render(candidate: Candidate, query: str) -> RenderedItem:
    highlights = find_highlights(candidate.label, query)
    return RenderedItem(
        candidate=candidate,
        text=candidate.label,
        markup=mark_up(candidate.label, highlights),
        highlights=highlights,
    )


def render_plain(candidate: PlainCandidate, query: str) -> RenderedItem:
    return _render(candidate, query)


def render_identified(candidate: IdentifiedCandidate, query: str) -> RenderedItem:
    """Render the label of a structured candidate; its id travels on the item."""
    return _render(candidate, query)


def render_candidate(candidate: Candidate, query: str) -> RenderedItem:
    """Default renderer: dispatch on the candidate variant."""
    if isinstance(candidate, IdentifiedCandidate):
        return render_identified(candidate, query)
    return render_plain(candidate, query)
