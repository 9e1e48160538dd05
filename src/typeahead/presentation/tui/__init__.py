"""Textual application for trying the typeahead field."""

from .app import TypeaheadApp

__all__ = ["TypeaheadApp"]
