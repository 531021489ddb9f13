"""In-process domain event notification."""

from shared.events.dispatcher import EventDispatcher, event_name_of, pending_events
from shared.events.handler import EventHandler

__all__ = ["EventDispatcher", "EventHandler", "event_name_of", "pending_events"]
