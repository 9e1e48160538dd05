"""Resolve element references against the Textual DOM."""

from collections.abc import Sequence

from textual.css.query import QueryError
from textual.dom import DOMNode
from textual.widgets import OptionList

from typeahead.logger import get_logger

logger = get_logger("option_list_resolver")


class OptionListResolver:
    """Resolves ``#id`` to the option prompts of an OptionList under ``root``.

    A hidden OptionList plays the part of a ``<datalist>``.
    """

    def __init__(self, root: DOMNode) -> None:
        self._root = root

    def resolve(self, reference: str) -> Sequence[str] | None:
        try:
            option_list = self._root.query_one(reference, OptionList)
        except QueryError:
            logger.debug(f"No OptionList matches {reference!r}")
            return None
        return [
            str(option_list.get_option_at_index(index).prompt).strip()
            for index in range(option_list.option_count)
        ]
