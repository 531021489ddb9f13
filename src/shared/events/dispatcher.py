"""Synchronous in-process event dispatcher.

Handlers are registered under an event name and run in registration order
when an event of that name is notified. Delivery is a plain function call:
there is no queue, no retry and no isolation between handlers. A handler that
raises stops delivery and the error reaches the caller of ``notify``.

The registry is mutated in place and is not locked. A dispatcher shared
between threads must be guarded by the caller.
"""

import structlog

from shared.events.handler import EventHandler

logger = structlog.get_logger(__name__)


def event_name_of(event) -> str:
    """Name an event is dispatched under: its class name."""
    return type(event).__name__


def pending_events(aggregate) -> list:
    """Drain the events raised on ``aggregate`` so they can be notified.

    Protean keeps raised events on the aggregate until a unit of work
    publishes them. Draining them first keeps them out of the event store;
    they are delivered through the dispatcher only.
    """
    events = list(aggregate._events)
    aggregate._events.clear()
    return events


class EventDispatcher:
    """Registry of event name -> ordered list of handlers."""

    def __init__(self):
        self._handlers: dict[str, list[EventHandler]] = {}

    @property
    def event_handlers(self) -> dict[str, list[EventHandler]]:
        """Copy of the registry, for inspection."""
        return {name: list(handlers) for name, handlers in self._handlers.items()}

    def handlers_for(self, event_name: str) -> tuple[EventHandler, ...]:
        return tuple(self._handlers.get(event_name, ()))

    def register(self, event_name: str, handler: EventHandler) -> None:
        """Append ``handler`` to the handlers of ``event_name``.

        Registering the same handler twice is allowed and makes it run twice.
        """
        self._handlers.setdefault(event_name, []).append(handler)
        logger.debug(
            "Event handler registered",
            event_name=event_name,
            handler=type(handler).__name__,
        )

    def unregister(self, event_name: str, handler: EventHandler) -> None:
        """Remove the first registration of ``handler`` under ``event_name``.

        Unknown names and handlers are ignored.
        """
        handlers = self._handlers.get(event_name)
        if not handlers:
            return

        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                break
        else:
            return

        if not handlers:
            del self._handlers[event_name]

        logger.debug(
            "Event handler unregistered",
            event_name=event_name,
            handler=type(handler).__name__,
        )

    def unregister_all(self) -> None:
        """Drop every registration."""
        self._handlers.clear()
        logger.debug("All event handlers unregistered")

    def notify(self, event) -> None:
        """Deliver ``event`` to its handlers, in registration order.

        The handler list is read once when the call starts, so handlers
        registered or removed by a running handler take effect from the
        next notification.
        """
        event_name = event_name_of(event)
        handlers = self.handlers_for(event_name)
        if not handlers:
            return

        logger.debug("Notifying event", event_name=event_name, handler_count=len(handlers))

        for handler in handlers:
            try:
                handler.handle(event)
            except Exception:
                logger.exception(
                    "Event handler failed",
                    event_name=event_name,
                    handler=type(handler).__name__,
                )
                raise
