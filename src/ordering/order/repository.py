"""Persistence for the Order aggregate."""

from ordering.order.order import Order
from shared.repository import DomainRepository


class OrderRepository(DomainRepository):
    aggregate_cls = Order
