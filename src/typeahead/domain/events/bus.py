"""Event bus for the engine's observable events.

The EventBus lets consumers observe the engine without the engine knowing
about them. Each engine owns its own bus; there is no process-wide registry.

Event Handler Contract:
    Event handlers MUST be synchronous (non-async) functions. This is enforced
    at subscription time. All handlers run inside the transition that
    published the event, before the transition continues.

    Handlers of cancelable events (``SelectRequested``) may veto the default
    action either by calling ``event.cancel()`` or by returning ``True``.
"""

import inspect
from typing import Any, Callable, Type, TypeVar

from typeahead.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

# Type alias for event handlers - must be synchronous
EventHandler = Callable[[Event], Any]


class EventBus:
    """Event bus for publishing and subscribing to events.

    Example:
        ```python
        bus = EventBus()

        def on_close(event: DropdownClosed):
            print("dropdown closed")

        bus.subscribe(DropdownClosed, on_close)
        bus.publish(DropdownClosed())
        ```

    Thread safety:
        This implementation is NOT thread-safe. The engine is driven from a
        single UI thread/event loop.
    """

    def __init__(self):
        """Initialize the event bus."""
        self._handlers: dict[Type[Event], list[Callable[[Any], Any]]] = {}
        """Registry of event handlers by event type."""

    def subscribe(self, event_type: Type[T], handler: Callable[[T], Any]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to (e.g., SelectRequested)
            handler: Callback invoked with the event instance. MUST be synchronous.

        Raises:
            TypeError: If handler is an async function (coroutine function)
        """
        if inspect.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is an async function (coroutine function)."
            )

        if event_type not in self._handlers:
            self._handlers[event_type] = []

        # Avoid duplicate subscriptions of the same handler
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)
            logger.debug(f"Subscribed handler for {event_type.__name__}")
        else:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], Any]) -> None:
        """
        Unsubscribe a handler from events of a specific type.

        Note:
            If the handler was not subscribed, this is a no-op.
        """
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Unsubscribed handler for {event_type.__name__}")
            except ValueError:
                logger.debug(f"Handler not found in subscriptions for {event_type.__name__}")

    def publish(self, event: Event) -> bool:
        """
        Publish an event to all subscribed handlers.

        Args:
            event: The event instance to publish

        Returns:
            ``False`` if a handler cancelled a cancelable event, ``True`` otherwise.

        Execution Model:
            Handlers are called synchronously in the order they were subscribed.
            Every handler runs even after a cancellation.

        Error Handling:
            If a handler raises an exception, it is logged and does not prevent
            other handlers from being called.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(f"No handlers subscribed for {event_type.__name__}")
            return not event.cancelled

        logger.debug(f"Publishing {event_type.__name__} to {len(handlers)} handler(s)")

        for handler in handlers:
            try:
                result = handler(event)
            except Exception as e:
                logger.opt(exception=e).error(
                    f"Error in event handler for {event_type.__name__}: {e}"
                )
                continue
            if result is True:
                event.cancel()

        return not event.cancelled

    def clear(self) -> None:
        """
        Clear all event subscriptions.

        This is useful for cleanup or testing scenarios.
        """
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        """
        Check if there are any subscribers for a specific event type.

        Returns:
            True if there are any subscribers, False otherwise
        """
        return event_type in self._handlers and len(self._handlers[event_type]) > 0
