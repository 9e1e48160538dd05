"""
TypeaheadApp - a small Textual application hosting one TypeaheadField.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, OptionList, Static

from typeahead.domain.events import ItemHighlighted, SelectCompleted
from typeahead.infrastructure import HiddenValue
from typeahead.logger import get_logger
from typeahead.presentation.resolver import OptionListResolver
from typeahead.presentation.widgets import TypeaheadField

logger = get_logger("typeahead_app")

DATALIST_ID = "datalist"


class TypeaheadApp(App):
    """Demo application: type to get suggestions, pick one with the keyboard or mouse."""

    TITLE = "typeahead"

    CSS = """
    #datalist {
        display: none;
    }
    #status {
        height: auto;
        padding: 1 1;
        color: $text-muted;
    }
    """

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(
        self,
        source: Any = None,
        *,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, str] | None = None,
        datalist: Sequence[str] | None = None,
    ) -> None:
        """
        Args:
            source: List source for the field
            options: Explicit engine options
            attributes: Attribute-like overrides
            datalist: Labels for a hidden OptionList the field reads its list from
        """
        super().__init__()
        attributes = dict(attributes or {})
        self._datalist = list(datalist or [])
        if self._datalist:
            attributes["list"] = DATALIST_ID

        self.hidden_value = HiddenValue(name="id")
        self.field = TypeaheadField(
            source,
            options=options,
            attributes=attributes,
            hidden=self.hidden_value,
            resolver=OptionListResolver(self),
            placeholder="Start typing...",
        )
        self.status_line = Static("", id="status")

        self.field.engine.subscribe(ItemHighlighted, self._on_highlight)
        self.field.engine.subscribe(SelectCompleted, self._on_select_completed)

    def compose(self) -> ComposeResult:
        yield Header()
        if self._datalist:
            yield OptionList(*self._datalist, id=DATALIST_ID)
        yield self.field
        yield self.status_line
        yield Footer()

    def on_mount(self) -> None:
        self.field.input.focus()
        logger.info("TypeaheadApp mounted")

    def _on_highlight(self, event: ItemHighlighted) -> None:
        self.status_line.update(Text(event.text or ""))

    def _on_select_completed(self, event: SelectCompleted) -> None:
        suffix = f" (id={event.candidate_id})" if event.candidate_id is not None else ""
        self.status_line.update(Text(f"Selected: {event.text}{suffix}"))
        logger.info(f"Selected {event.text!r}{suffix}")
