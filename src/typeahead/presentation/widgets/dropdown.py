"""
SuggestionDropdown - OptionList mirroring the engine's visible items.
"""

from rich.text import Text
from textual import events
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from typeahead.application import SuggestionEngine
from typeahead.domain.events import DropdownClosed, DropdownOpened, ItemHighlighted
from typeahead.domain.types import RenderedItem
from typeahead.logger import get_logger

logger = get_logger("suggestion_dropdown")

HIGHLIGHT_STYLE = "bold underline"


def item_to_text(item: RenderedItem) -> Text:
    """Rich text for an item, with query occurrences styled."""
    text = Text(item.text)
    for start, end in item.highlights:
        text.stylize(HIGHLIGHT_STYLE, start, end)
    return text


class SuggestionDropdown(OptionList):
    """Shows the engine's items while it is open.

    The dropdown never takes focus, so clicking an option does not blur the
    input (which would close the dropdown before the click lands). Hovering a
    row moves the engine highlight to it.
    """

    DEFAULT_CSS = """
    SuggestionDropdown {
        height: auto;
        max-height: 12;
        display: none;
    }
    """

    can_focus = False

    def __init__(self, engine: SuggestionEngine, **kwargs) -> None:
        super().__init__(**kwargs)
        self.engine = engine
        engine.subscribe(DropdownOpened, self._handle_opened)
        engine.subscribe(DropdownClosed, self._handle_closed)
        engine.subscribe(ItemHighlighted, self._handle_highlighted)

    def _handle_opened(self, event: DropdownOpened) -> None:
        self.clear_options()
        self.add_options([Option(item_to_text(item)) for item in self.engine.items])
        self._sync_highlight()
        self.display = True
        logger.debug(f"Dropdown showing {event.item_count} option(s)")

    def _handle_closed(self, event: DropdownClosed) -> None:
        self.display = False
        self.clear_options()

    def _handle_highlighted(self, event: ItemHighlighted) -> None:
        if self.engine.is_open and self.option_count == len(self.engine.items):
            self._sync_highlight()

    def _sync_highlight(self) -> None:
        index = self.engine.highlighted_index
        self.highlighted = index if index > -1 else None

    def on_mouse_move(self, event: events.MouseMove) -> None:
        # Hovering a row highlights it in the engine, like the arrow keys do
        index = event.style.meta.get("option")
        if index is not None and index != self.engine.highlighted_index:
            self.engine.goto(index)
