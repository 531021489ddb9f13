"""Reactions to Customer events.

These only log. They are registered with the dispatcher by the composition
root, not discovered by the domain.
"""

import structlog

from shared.events import EventHandler

logger = structlog.get_logger(__name__)


class LogWhenCustomerIsCreatedHandler(EventHandler):
    def handle(self, event) -> None:
        logger.info(
            "This is the first log of the event: CustomerCreated",
            customer_id=str(event.customer_id),
        )


class ConfirmWhenCustomerIsCreatedHandler(EventHandler):
    def handle(self, event) -> None:
        logger.info(
            "This is the second log of the event: CustomerCreated",
            customer_id=str(event.customer_id),
        )


class InformWhenCustomerAddressIsChangedHandler(EventHandler):
    """Announce the new address of a customer."""

    def handle(self, event) -> None:
        logger.info(f"Customer address: {event.customer_id}, {event.name} changed to: {event.address}")
