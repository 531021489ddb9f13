"""Customer application service.

Loads and stores customers through the repository and hands the events each
operation raised to the dispatcher once the change is persisted. The customer
id is bound to the logging context for the duration of each operation, so
records emitted by event handlers carry it too.
"""

import structlog

from identity.customer.customer import Customer
from shared.events import pending_events
from shared.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


class CustomerService:
    def __init__(self, repository, dispatcher):
        self.repository = repository
        self.dispatcher = dispatcher

    def _publish(self, events):
        for event in events:
            self.dispatcher.notify(event)

    def create(self, customer_id, name):
        """Create and persist a customer, then announce it."""
        add_context(customer_id=str(customer_id))
        try:
            customer = Customer.create(id=customer_id, name=name)
            events = pending_events(customer)

            self.repository.create(customer)
            logger.info("Customer created")

            self._publish(events)
            return customer
        finally:
            clear_context()

    def change_address(self, customer_id, address):
        add_context(customer_id=str(customer_id))
        try:
            customer = self.repository.find(customer_id)
            customer.change_address(address)
            events = pending_events(customer)

            self.repository.update(customer)
            logger.info("Customer address changed")

            self._publish(events)
            return customer
        finally:
            clear_context()

    def activate(self, customer_id):
        add_context(customer_id=str(customer_id))
        try:
            customer = self.repository.find(customer_id)
            customer.activate()

            self.repository.update(customer)
            logger.info("Customer activated")
            return customer
        finally:
            clear_context()
