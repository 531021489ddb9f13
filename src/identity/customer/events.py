"""Domain events for the Customer aggregate.

Each event carries only what its reactions read. Addresses travel already
rendered to their display string.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="Customer")
class CustomerCreated:
    """A new customer was created."""

    __version__ = "v1"

    customer_id: Identifier(required=True)
    name: String(required=True)
    occurred_at: DateTime(default=lambda: datetime.now(UTC))


@identity.event(part_of="Customer")
class CustomerAddressChanged:
    """A customer's address was set or replaced."""

    __version__ = "v1"

    customer_id: Identifier(required=True)
    name: String(required=True)
    address: String(required=True)
    occurred_at: DateTime(default=lambda: datetime.now(UTC))
