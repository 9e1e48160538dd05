"""Suggestion engine.

Ties the candidate store, matcher, ranker and renderer together and runs the
open/closed and highlight state machine on top of them:

    CLOSED --evaluate (matches)--> OPEN_NO_SELECTION --next/goto--> OPEN_SELECTED
       ^                                   |                              |
       +----- close / select / evaluate (no matches) --------------------+

Every transition is synchronous and leaves the state consistent:
the highlighted index is always -1 or a valid index into the visible items,
and it is -1 whenever the dropdown is closed.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any, Callable, Type, TypeVar

from typeahead.domain.events import (
    DropdownClosed,
    DropdownOpened,
    Event,
    EventBus,
    ItemHighlighted,
    SelectCompleted,
    SelectRequested,
)
from typeahead.domain.protocols import ElementResolver, FocusSource, TextSurface, ValueSurface
from typeahead.domain.types import Candidate, CandidateKind, EngineState, EngineStatus, RenderedItem
from typeahead.logger import get_logger

from .candidate_store import CandidateStore
from .config import EngineConfig, resolve_config, resolve_list_source
from .ranking import rank

logger = get_logger("engine")

E = TypeVar("E", bound=Event)

KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_UP = "up"
KEY_DOWN = "down"


class SuggestionEngine:
    """Filters, ranks and renders candidates for a text surface and tracks the dropdown state."""

    def __init__(
        self,
        text: TextSurface,
        source: Any = None,
        *,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, str] | None = None,
        hidden: ValueSurface | None = None,
        resolver: ElementResolver | None = None,
        focus: FocusSource | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        """
        Args:
            text: Surface holding the query; receives committed text
            source: List source (sequence, comma-delimited string or element reference)
            options: Explicit options (``min_chars``, ``max_items``, ``auto_first``,
                ``matcher``, ``ranker``, ``renderer``, ``committer``)
            attributes: Attribute-like overrides (``data-minchars``, ``list`` ...)
            hidden: Companion surface receiving the id of structured candidates
            resolver: Resolves element references used as list sources
            focus: Focus signal; a reassigned source re-evaluates while focused
            event_bus: Bus to publish on; a private one is created when omitted
        """
        self.text = text
        self.hidden = hidden
        self.events = event_bus or EventBus()
        self._focus = focus
        self._config = resolve_config(attributes, options)
        self._store = CandidateStore(resolve_list_source(attributes, source), resolver)

        self._items: list[RenderedItem] = []
        self._index = -1
        self._open = False

        self.committed_text: str | None = None
        """Text written by the last commit, until the next evaluation."""

        logger.debug(
            f"SuggestionEngine created (min_chars={self._config.min_chars}, "
            f"max_items={self._config.max_items}, auto_first={self._config.auto_first})"
        )

    # ------------------------------------------------------------------ #
    # Read-only state
    # ------------------------------------------------------------------ #

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def is_selected(self) -> bool:
        return self._index > -1

    @property
    def highlighted_index(self) -> int:
        return self._index

    @property
    def items(self) -> tuple[RenderedItem, ...]:
        return tuple(self._items)

    @property
    def highlighted_item(self) -> RenderedItem | None:
        if self._index > -1:
            return self._items[self._index]
        return None

    @property
    def status(self) -> EngineStatus:
        return self.state.status

    @property
    def status_text(self) -> str:
        """Text announced for the highlighted item, empty when nothing is highlighted."""
        item = self.highlighted_item
        return item.text if item is not None else ""

    @property
    def state(self) -> EngineState:
        return EngineState(is_open=self._open, highlighted_index=self._index, visible_items=self.items)

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._store.candidates

    @property
    def candidate_kind(self) -> CandidateKind:
        return self._store.kind

    @property
    def source(self) -> Any:
        return self._store.source

    @source.setter
    def source(self, source: Any) -> None:
        self._store.source = source
        if self._focus is not None and self._focus.has_focus:
            self.evaluate()

    def refresh_source(self) -> None:
        """Re-read the current source, re-evaluating while focused."""
        self._store.refresh()
        if self._focus is not None and self._focus.has_focus:
            self.evaluate()

    def subscribe(self, event_type: Type[E], handler: Callable[[E], Any]) -> None:
        """Register ``handler`` for ``event_type`` on this engine's bus."""
        self.events.subscribe(event_type, handler)

    def unsubscribe(self, event_type: Type[E], handler: Callable[[E], Any]) -> None:
        self.events.unsubscribe(event_type, handler)

    # ------------------------------------------------------------------ #
    # Transitions
    # ------------------------------------------------------------------ #

    def evaluate(self) -> None:
        """Run one filter/rank/render cycle for the current text, then open or close."""
        self.committed_text = None
        query = self.text.value or ""
        candidates = self._store.candidates

        if len(query.strip()) < self._config.min_chars or not candidates:
            logger.debug(f"Query {query!r} below threshold or no candidates; closing")
            self._replace_items([])
            self.close()
            return

        try:
            items = self._build_items(query, candidates)
        except Exception as e:
            logger.opt(exception=e).error(f"Evaluation failed for query {query!r}: {e}")
            items = []

        self._replace_items(items)
        logger.debug(f"Query {query!r} produced {len(items)} item(s)")

        if items:
            self.open()
        else:
            self.close()

    def open(self) -> None:
        """Show the dropdown. Without rendered items this is a no-op."""
        if not self._items:
            logger.debug("open() ignored: no items to show")
            return
        self._open = True
        if self._config.auto_first and self._index == -1:
            self.goto(0)
        self.events.publish(DropdownOpened(item_count=len(self._items)))

    def close(self) -> None:
        """Hide the dropdown and clear the highlight."""
        self._open = False
        self._set_index(-1)
        self.events.publish(DropdownClosed())

    def next(self) -> None:
        """Highlight the next item, wrapping to no selection after the last one."""
        if not self._open:
            return
        count = len(self._items)
        self.goto(self._index + 1 if self._index < count - 1 else -1)

    def previous(self) -> None:
        """Highlight the previous item; from no selection, jump to the last one."""
        if not self._open:
            return
        count = len(self._items)
        self.goto(self._index - 1 if self.is_selected else count - 1)

    def goto(self, index: int) -> None:
        """Highlight ``index``. Out-of-range indexes, or any index while closed, mean no selection."""
        if index != -1 and (not self._open or not 0 <= index < len(self._items)):
            logger.debug(f"goto({index}) outside the visible items; clearing highlight")
            index = -1
        self._set_index(index)
        self.events.publish(ItemHighlighted(index=index, text=self.status_text or None))

    def select(self, item: RenderedItem | int | None = None) -> bool:
        """
        Commit ``item`` (or the highlighted item) into the text surface.

        Args:
            item: A rendered item, an index into the visible items, or ``None``
                for the highlighted item

        Returns:
            ``True`` if the selection was committed, ``False`` when nothing
            resolved, a handler cancelled it, or the committer failed
        """
        target = self._resolve_target(item)
        if target is None:
            return False

        if not self.events.publish(SelectRequested(text=target.text, item=target)):
            logger.debug(f"Selection of {target.text!r} cancelled")
            return False

        self.committed_text = target.text
        try:
            self._config.committer(target, self.text, self.hidden)
        except Exception as e:
            self.committed_text = None
            logger.opt(exception=e).error(f"Commit of {target.text!r} failed: {e}")
            return False

        self.close()
        self.events.publish(SelectCompleted(text=target.text, candidate_id=target.candidate_id))
        logger.debug(f"Selected {target.text!r}")
        return True

    def handle_key(self, key: str) -> bool:
        """
        Apply a keyboard key to the open dropdown.

        Returns:
            ``True`` if the key was consumed; closed dropdowns consume nothing
        """
        if not self._open:
            return False
        if key == KEY_ENTER:
            if not self.is_selected:
                return False
            self.select()
            return True
        if key in (KEY_ESCAPE, "esc"):
            self.close()
            return True
        if key == KEY_DOWN:
            self.next()
            return True
        if key == KEY_UP:
            self.previous()
            return True
        return False

    def blur(self) -> None:
        self.close()

    def submit(self) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _build_items(self, query: str, candidates: Sequence[Candidate]) -> list[RenderedItem]:
        config = self._config
        matched = [candidate for candidate in candidates if config.matcher(candidate.label, query)]
        ranked = rank(matched, config.ranker, label_of=lambda candidate: candidate.label)
        return [config.renderer(candidate, query) for candidate in ranked[: config.max_items]]

    def _replace_items(self, items: list[RenderedItem]) -> None:
        # A fresh list never inherits the old highlight
        self._index = -1
        self._items = items

    def _set_index(self, index: int) -> None:
        if self._index > -1:
            self._items[self._index] = replace(self._items[self._index], selected=False)
        self._index = index
        if index > -1:
            self._items[index] = replace(self._items[index], selected=True)

    def _resolve_target(self, item: RenderedItem | int | None) -> RenderedItem | None:
        if item is None:
            return self.highlighted_item
        if isinstance(item, RenderedItem):
            return item
        if isinstance(item, bool) or not isinstance(item, int):
            logger.warning(f"select() expects an item, an index or None, got {item!r}")
            return None
        if 0 <= item < len(self._items):
            return self._items[item]
        logger.debug(f"select({item}) does not match a visible item")
        return None
