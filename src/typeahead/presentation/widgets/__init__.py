"""Textual widgets for the typeahead field."""

from .input_field import TypeaheadInput
from .dropdown import SuggestionDropdown, item_to_text
from .autocomplete import TypeaheadField

__all__ = ["TypeaheadInput", "SuggestionDropdown", "TypeaheadField", "item_to_text"]
