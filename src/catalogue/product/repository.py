"""Persistence for the Product aggregate."""

from catalogue.product.product import Product
from shared.repository import DomainRepository


class ProductRepository(DomainRepository):
    aggregate_cls = Product
