"""
TypeaheadInput - Input field bound to a SuggestionEngine.

The input is the engine's text surface and focus source. Every value change
re-evaluates the suggestions; Enter, Escape, Up and Down drive the dropdown
while it is open and fall through to the normal input behavior otherwise.
"""

from collections.abc import Mapping
from typing import Any

from textual.actions import SkipAction
from textual.binding import Binding
from textual.widgets import Input

from typeahead.application import SuggestionEngine
from typeahead.domain.protocols import ElementResolver, ValueSurface
from typeahead.logger import get_logger

logger = get_logger("typeahead_input")


class TypeaheadInput(Input):
    """Input whose value feeds a SuggestionEngine."""

    BINDINGS = [
        Binding("enter", "suggest_enter", "Select suggestion", show=False),
        Binding("escape", "suggest_close", "Close suggestions", show=False),
        Binding("down", "suggest_next", "Next suggestion", show=False),
        Binding("up", "suggest_previous", "Previous suggestion", show=False),
    ]

    def __init__(
        self,
        source: Any = None,
        *,
        options: Mapping[str, Any] | None = None,
        attributes: Mapping[str, str] | None = None,
        hidden: ValueSurface | None = None,
        resolver: ElementResolver | None = None,
        **kwargs,
    ):
        """
        Initialize the input field.

        Args:
            source: List source for the engine
            options: Explicit engine options
            attributes: Attribute-like option overrides
            hidden: Companion value for structured candidate ids
            resolver: Resolver for element references used as list source
        """
        super().__init__(**kwargs)
        self.engine = SuggestionEngine(
            self,
            source,
            options=options,
            attributes=attributes,
            hidden=hidden,
            resolver=resolver,
            focus=self,
        )
        logger.debug("TypeaheadInput initialized")

    def watch_value(self, value: str) -> None:
        """Re-evaluate suggestions whenever the text changes, except for our own commits."""
        if not self.is_mounted:
            return
        if value == self.engine.committed_text:
            return
        self.engine.evaluate()

    def on_blur(self) -> None:
        self.engine.blur()

    async def action_suggest_enter(self) -> None:
        if self.engine.handle_key("enter"):
            return
        self.engine.submit()
        await self.action_submit()

    def action_suggest_close(self) -> None:
        if not self.engine.handle_key("escape"):
            raise SkipAction()

    def action_suggest_next(self) -> None:
        if not self.engine.handle_key("down"):
            raise SkipAction()

    def action_suggest_previous(self) -> None:
        if not self.engine.handle_key("up"):
            raise SkipAction()
