"""Element resolver protocol."""

from collections.abc import Sequence
from typing import Protocol

__all__ = ["ElementResolver"]


class ElementResolver(Protocol):
    """Resolves a reference (e.g. ``"#fruits"``) to an external ordered collection."""

    def resolve(self, reference: str) -> Sequence[str] | None:
        """Return the visible text of each child of the referenced element.

        Args:
            reference: Element reference, usually ``#<id>``

        Returns:
            Ordered child texts, or ``None`` when nothing matches the reference
        """
        ...
