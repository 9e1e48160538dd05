"""Engine state types.

``RenderedItem`` is what the dropdown shows for one candidate.
``EngineState`` is a read-only snapshot of the state machine.
"""

from dataclasses import dataclass, field
from enum import Enum

from .candidates import Candidate, IdentifiedCandidate


class EngineStatus(Enum):
    """States of the selection/navigation state machine."""

    CLOSED = "closed"
    OPEN_NO_SELECTION = "open_no_selection"
    OPEN_SELECTED = "open_selected"


@dataclass(frozen=True, slots=True)
class RenderedItem:
    """Display representation of a candidate for the current query.

    Attributes:
        candidate: The candidate this item was rendered from
        text: Plain display text (what gets committed)
        markup: Display text with query occurrences wrapped in ``<mark>``
        highlights: ``(start, end)`` offsets of query occurrences in ``text``
        selected: Whether this item is the highlighted one
    """

    candidate: Candidate
    text: str
    markup: str
    highlights: tuple[tuple[int, int], ...] = ()
    selected: bool = False

    @property
    def candidate_id(self) -> str | None:
        """Id of a structured candidate, ``None`` for plain labels."""
        if isinstance(self.candidate, IdentifiedCandidate):
            return self.candidate.id
        return None


@dataclass(frozen=True)
class EngineState:
    """Snapshot of the engine.

    Invariants:
        - ``-1 <= highlighted_index < len(visible_items)``
        - closed implies ``highlighted_index == -1``
        - no visible items implies closed
    """

    is_open: bool = False
    highlighted_index: int = -1
    visible_items: tuple[RenderedItem, ...] = field(default_factory=tuple)

    @property
    def status(self) -> EngineStatus:
        if not self.is_open:
            return EngineStatus.CLOSED
        if self.highlighted_index > -1:
            return EngineStatus.OPEN_SELECTED
        return EngineStatus.OPEN_NO_SELECTION

    @property
    def is_selected(self) -> bool:
        return self.highlighted_index > -1
