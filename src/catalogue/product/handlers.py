"""Reactions to Product events."""

import structlog

from shared.events import EventHandler

logger = structlog.get_logger(__name__)


class SendEmailWhenProductIsCreatedHandler(EventHandler):
    """Announce a new product to subscribers.

    Delivery is out of scope; the announcement is logged.
    """

    def handle(self, event) -> None:
        logger.info(
            f"Sending email about new product: {event.name} ({event.product_id})",
            price=event.price,
        )
