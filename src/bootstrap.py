"""Composition root.

Initializes the bounded contexts and builds the single event dispatcher the
process uses. The dispatcher is returned, never stored globally: whoever
needs to register handlers or notify events receives it explicitly.

Usage:
    from bootstrap import bootstrap

    dispatcher = bootstrap()
"""

import structlog
from catalogue.domain import catalogue
from catalogue.product.handlers import SendEmailWhenProductIsCreatedHandler
from identity.customer.handlers import (
    ConfirmWhenCustomerIsCreatedHandler,
    InformWhenCustomerAddressIsChangedHandler,
    LogWhenCustomerIsCreatedHandler,
)
from identity.domain import identity
from ordering.domain import ordering

from shared.events import EventDispatcher

logger = structlog.get_logger(__name__)

DOMAINS = (identity, catalogue, ordering)


def build_dispatcher() -> EventDispatcher:
    """Return a dispatcher with the standard reactions registered."""
    dispatcher = EventDispatcher()

    dispatcher.register("CustomerCreated", LogWhenCustomerIsCreatedHandler())
    dispatcher.register("CustomerCreated", ConfirmWhenCustomerIsCreatedHandler())
    dispatcher.register("CustomerAddressChanged", InformWhenCustomerAddressIsChangedHandler())
    dispatcher.register("ProductCreated", SendEmailWhenProductIsCreatedHandler())

    return dispatcher


def bootstrap() -> EventDispatcher:
    """Initialize every domain and return the process dispatcher."""
    for domain in DOMAINS:
        domain.init()

    dispatcher = build_dispatcher()
    logger.info(
        "Application bootstrapped",
        domains=[domain.name for domain in DOMAINS],
        events=sorted(dispatcher.event_handlers),
    )
    return dispatcher
