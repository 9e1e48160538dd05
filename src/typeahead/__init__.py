"""typeahead - suggestion engine and dropdown state machine for text inputs."""

from typeahead.application import EngineConfig, SuggestionEngine
from typeahead.domain.errors import ConfigurationError
from typeahead.domain.types import EngineStatus, IdentifiedCandidate, PlainCandidate, RenderedItem

__version__ = "0.1.0"

__all__ = [
    "SuggestionEngine",
    "EngineConfig",
    "EngineStatus",
    "RenderedItem",
    "PlainCandidate",
    "IdentifiedCandidate",
    "ConfigurationError",
]
