"""Infrastructure layer - in-memory implementations of the domain protocols."""

from .elements import ElementRegistry
from .surfaces import HiddenValue, StaticFocus, TextBuffer

__all__ = ["ElementRegistry", "TextBuffer", "HiddenValue", "StaticFocus"]
