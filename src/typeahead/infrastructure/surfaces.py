"""In-memory surfaces.

Plain holders for the text input, the companion hidden value and the focus
signal. Useful for headless use of the engine, for the CLI and for tests.
"""

from dataclasses import dataclass


@dataclass
class TextBuffer:
    """Text surface backed by a string.

    Example:
        >>> buffer = TextBuffer("ap")
        >>> buffer.value = "apple"
        >>> buffer.value
        'apple'
    """

    value: str = ""


@dataclass
class HiddenValue:
    """Companion value surface for structured candidate ids."""

    value: str = ""
    name: str | None = None


@dataclass
class StaticFocus:
    """Focus source whose state is set by the caller."""

    has_focus: bool = False
