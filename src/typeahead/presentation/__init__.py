"""Presentation layer - Textual widgets driving the suggestion engine."""

from .resolver import OptionListResolver
from .widgets import SuggestionDropdown, TypeaheadField, TypeaheadInput

__all__ = ["TypeaheadInput", "SuggestionDropdown", "TypeaheadField", "OptionListResolver"]
