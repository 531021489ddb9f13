"""Persistence for the Customer aggregate."""

from identity.customer.customer import Customer
from shared.repository import DomainRepository


class CustomerRepository(DomainRepository):
    aggregate_cls = Customer
