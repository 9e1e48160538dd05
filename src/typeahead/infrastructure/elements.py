"""In-memory element registry.

Stands in for a document: ordered collections of child texts registered under
an id and looked up with ``#id`` references, the way a ``<datalist>`` is
referenced from an input's ``list`` attribute.
"""

from collections.abc import Iterable, Sequence

from typeahead.logger import get_logger

logger = get_logger(__name__)


class ElementRegistry:
    """Element resolver over registered collections.

    Example:
        >>> registry = ElementRegistry()
        >>> registry.register("fruits", ["  apple ", "banana"])
        >>> registry.resolve("#fruits")
        ['apple', 'banana']
        >>> registry.resolve("#missing") is None
        True
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._elements: dict[str, list[str]] = {}

    def register(self, element_id: str, children: Iterable[str]) -> None:
        """Register (or replace) the children of ``element_id``."""
        self._elements[element_id] = list(children)
        logger.debug(f"Registered element #{element_id} with {len(self._elements[element_id])} children")

    def unregister(self, element_id: str) -> None:
        self._elements.pop(element_id, None)

    def resolve(self, reference: str) -> Sequence[str] | None:
        """Return the trimmed child texts of ``#id`` (or bare ``id``), ``None`` when unknown."""
        element_id = reference[1:] if reference.startswith("#") else reference
        children = self._elements.get(element_id)
        if children is None:
            logger.debug(f"Element reference {reference!r} not found")
            return None
        return [child.strip() for child in children]
