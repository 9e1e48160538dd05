"""Event system for observing the suggestion engine.

The engine publishes one event per observable transition. Consumers subscribe
to the event types they care about.

Example:
    ```python
    from typeahead.domain.events import EventBus, SelectRequested

    bus = EventBus()

    def veto_banana(event: SelectRequested) -> bool:
        return event.text == "banana"

    bus.subscribe(SelectRequested, veto_banana)
    proceed = bus.publish(SelectRequested(text="banana"))
    assert proceed is False
    ```
"""

from .bus import EventBus
from .types import (
    DropdownClosed,
    DropdownOpened,
    Event,
    ItemHighlighted,
    SelectCompleted,
    SelectRequested,
)

__all__ = [
    "EventBus",
    "Event",
    "DropdownOpened",
    "DropdownClosed",
    "ItemHighlighted",
    "SelectRequested",
    "SelectCompleted",
]
