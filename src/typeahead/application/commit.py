"""
Committers write a selected item back into the consumer's surfaces.
"""

from __future__ import annotations

from typeahead.domain.protocols import TextSurface, ValueSurface
from typeahead.domain.types import RenderedItem
from typeahead.logger import get_logger

__all__ = ["commit_item", "commit_text", "commit_identified"]

logger = get_logger("commit")


def commit_text(item: RenderedItem, text: TextSurface, hidden: ValueSurface | None = None) -> None:
    """Replace the input text with the item's display text."""
    text.value = item.text


def commit_identified(item: RenderedItem, text: TextSurface, hidden: ValueSurface | None = None) -> None:
    """Replace the input text and store the candidate id in the companion value."""
    text.value = item.text
    if hidden is None:
        logger.warning(f"No companion value surface; id {item.candidate_id!r} not stored")
        return
    hidden.value = item.candidate_id or ""


def commit_item(item: RenderedItem, text: TextSurface, hidden: ValueSurface | None = None) -> None:
    """Default committer: dispatch on the candidate variant."""
    if item.candidate_id is not None:
        commit_identified(item, text, hidden)
    else:
        commit_text(item, text, hidden)
