"""Surface protocols.

Anything with a read/write ``value`` string can act as the text input, which
includes Textual's ``Input`` widget.
"""

from typing import Protocol

__all__ = ["TextSurface", "ValueSurface", "FocusSource"]


class TextSurface(Protocol):
    """The text field the engine reads its query from and commits into."""

    value: str


class ValueSurface(Protocol):
    """Companion value that receives the id of a structured candidate."""

    value: str


class FocusSource(Protocol):
    """Tells the engine whether the consumer currently holds input focus."""

    @property
    def has_focus(self) -> bool:
        """Return ``True`` when the attached input is focused."""
        ...
