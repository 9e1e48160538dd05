"""Strategy protocols plugged into the engine configuration."""

from typing import Protocol

from typeahead.domain.protocols.surfaces import TextSurface, ValueSurface
from typeahead.domain.types import Candidate, RenderedItem

__all__ = ["Matcher", "Ranker", "Renderer", "Committer"]


class Matcher(Protocol):
    def __call__(self, label: str, query: str) -> bool:
        """Return ``True`` when ``label`` matches ``query``."""
        ...


class Ranker(Protocol):
    def __call__(self, a: str, b: str) -> int:
        """Compare two labels; negative when ``a`` ranks first."""
        ...


class Renderer(Protocol):
    def __call__(self, candidate: Candidate, query: str) -> RenderedItem:
        """Build the display representation of ``candidate`` for ``query``."""
        ...


class Committer(Protocol):
    def __call__(
        self,
        item: RenderedItem,
        text: TextSurface,
        hidden: ValueSurface | None,
    ) -> None:
        """Write the selected item back into the consumer's surfaces."""
        ...
