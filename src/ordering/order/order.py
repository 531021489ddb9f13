"""Order aggregate with its OrderItem entities.

An order owns its items outright. Items are created for one order and are
not edited once attached; changing an order replaces the whole item list.
The order total is always derived from the items and never stored.
"""

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Float, HasMany, Identifier, Integer, String

from ordering.domain import ordering


@ordering.entity(part_of="Order")
class OrderItem:
    """A line of an order: a product, its unit price and how many were bought."""

    id: Identifier(identifier=True, required=True)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)

    def total(self):
        return self.price * self.quantity


@ordering.aggregate
class Order:
    id: Identifier(identifier=True, required=True)
    customer_id: Identifier(required=True)
    items: HasMany(OrderItem)

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["Order must have at least one item"]})

    @invariant.post
    def item_ids_must_be_unique(self):
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValidationError({"items": ["Order items must have distinct ids"]})

    def total(self):
        """Sum of the item totals, recomputed on every call."""
        return sum(item.total() for item in self.items)

    def change_items(self, items):
        """Replace every item of the order with ``items``."""
        items = list(items)
        if not items:
            raise ValidationError({"items": ["Order must have at least one item"]})

        with atomic_change(self):
            for item in list(self.items):
                self.remove_items(item)
            for item in items:
                self.add_items(item)
