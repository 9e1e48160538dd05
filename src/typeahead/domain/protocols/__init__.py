"""Domain protocols - interfaces the engine consumes.

This module defines protocols (structural types) describing what the engine
needs from its surroundings: somewhere to read and write text, a focus
signal, a way to resolve element references, and the pluggable matching,
ranking, rendering and commit strategies.
"""

from typeahead.domain.protocols.surfaces import FocusSource, TextSurface, ValueSurface
from typeahead.domain.protocols.resolver import ElementResolver
from typeahead.domain.protocols.strategies import Committer, Matcher, Ranker, Renderer

__all__ = [
    "TextSurface",
    "ValueSurface",
    "FocusSource",
    "ElementResolver",
    "Matcher",
    "Ranker",
    "Renderer",
    "Committer",
]
