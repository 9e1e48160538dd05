"""Domain exceptions."""

from typing import Any

__all__ = ["TypeaheadError", "ConfigurationError"]


class TypeaheadError(Exception):
    """Base class for all typeahead errors."""


class ConfigurationError(TypeaheadError):
    """An option or list source could not be resolved.

    These errors never escape the engine: they are logged where they are
    caught and the engine falls back to a default option value or an empty
    candidate list.

    Attributes:
        option: Name of the option or source that failed
        value: The offending value
    """

    def __init__(self, message: str, option: str | None = None, value: Any = None):
        super().__init__(message)
        self.option = option
        self.value = value
