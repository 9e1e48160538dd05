"""
TypeaheadField - input plus dropdown, wired to one engine.
"""

from collections.abc import Mapping
from typing import Any

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import OptionList

from typeahead.application import SuggestionEngine
from typeahead.domain.protocols import ElementResolver, ValueSurface
from typeahead.logger import get_logger

from .dropdown import SuggestionDropdown
from .input_field import TypeaheadInput

logger = get_logger("typeahead_field")


class TypeaheadField(Vertical):
    """Container composing a TypeaheadInput above its SuggestionDropdown.

    Clicking an option selects it through the engine, so the cancelable
    select event and the commit run exactly as for the keyboard.
    """

    DEFAULT_CSS = """
    TypeaheadField {
        height: auto;
    }
    """

    def __init__(
        self,
        source: Any = None,
        *,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, str] | None = None,
        hidden: ValueSurface | None = None,
        resolver: ElementResolver | None = None,
        placeholder: str = "",
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.input = TypeaheadInput(
            source,
            options=options,
            attributes=attributes,
            hidden=hidden,
            resolver=resolver,
            placeholder=placeholder,
        )
        self.dropdown = SuggestionDropdown(self.input.engine)

    @property
    def engine(self) -> SuggestionEngine:
        return self.input.engine

    def compose(self) -> ComposeResult:
        yield self.input
        yield self.dropdown

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        logger.debug(f"Pointer selected option {event.option_index}")
        self.engine.select(event.option_index)
