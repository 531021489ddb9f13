"""Order placement and reporting."""

from uuid import uuid4

import structlog
from protean.exceptions import ValidationError

from ordering.order.order import Order

logger = structlog.get_logger(__name__)


def orders_total(orders):
    """Sum of the totals of ``orders``."""
    return sum(order.total() for order in orders)


def place_order(customer, items):
    """Create an order for ``customer`` and credit them half its total in reward points.

    ``customer`` is any object exposing ``id`` and ``add_reward_points``.
    """
    items = list(items)
    if not items:
        raise ValidationError({"items": ["Order must have at least one item"]})

    order = Order(id=str(uuid4()), customer_id=customer.id, items=items)

    points = int(order.total() / 2)
    if points > 0:
        customer.add_reward_points(points)

    logger.info(
        "Order placed",
        order_id=order.id,
        customer_id=str(customer.id),
        total=order.total(),
        reward_points=points,
    )
    return order
