"""Event types emitted by the suggestion engine.

Every engine transition that the consumer can observe is published as one of
these events on the engine's event bus.
"""

import time
from dataclasses import dataclass, field
from typing import ClassVar

from typeahead.domain.types import RenderedItem


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    Only events with ``cancelable = True`` honour ``cancel()``.
    """

    cancelable: ClassVar[bool] = False

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""
    cancelled: bool = field(default=False, init=False)
    """Whether a handler cancelled the event."""

    def cancel(self) -> None:
        """Cancel the default action of a cancelable event."""
        if self.cancelable:
            self.cancelled = True


@dataclass
class DropdownOpened(Event):
    """Published when the dropdown becomes visible.

    Attributes:
        item_count: Number of visible items
    """

    item_count: int = 0
    """Number of visible items."""


@dataclass
class DropdownClosed(Event):
    """Published whenever the engine transitions to CLOSED."""


@dataclass
class ItemHighlighted(Event):
    """Published when the highlighted index changes.

    Attributes:
        index: New highlighted index (-1 for no selection)
        text: Text of the highlighted item, ``None`` when nothing is highlighted
    """

    index: int = -1
    """New highlighted index."""
    text: str | None = None
    """Display text of the highlighted item."""


@dataclass
class SelectRequested(Event):
    """Published before an item is committed.

    Handlers veto the commit by calling ``cancel()`` or by returning ``True``.

    Attributes:
        text: Display text of the item about to be committed
        item: The rendered item about to be committed
    """

    cancelable: ClassVar[bool] = True

    text: str = ""
    """Display text of the item."""
    item: RenderedItem | None = None
    """The item about to be committed."""


@dataclass
class SelectCompleted(Event):
    """Published after a selection has been committed and the dropdown closed.

    Attributes:
        text: Committed text
        candidate_id: Committed id for structured candidates
    """

    text: str = ""
    """Committed text."""
    candidate_id: str | None = None
    """Committed id, if the candidate carries one."""
