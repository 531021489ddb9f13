"""Domain events for the Product aggregate."""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = "v1"

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    occurred_at: DateTime(default=lambda: datetime.now(UTC))
