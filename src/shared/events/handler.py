"""Event handler port: the single capability every reaction implements."""

from abc import ABC, abstractmethod


class EventHandler(ABC):
    """A reaction to a domain event.

    Handlers only produce side effects. They run after the state change that
    raised the event has happened and cannot veto or roll it back.
    """

    @abstractmethod
    def handle(self, event) -> None:
        """React to ``event``. The return value is ignored."""
        ...
