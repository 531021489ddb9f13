"""Errors shared across bounded contexts.

Invariant violations use ``protean.exceptions.ValidationError`` directly.
"""


class NotFoundError(Exception):
    """No persisted aggregate matches the requested identifier."""

    def __init__(self, aggregate: str, identifier):
        self.aggregate = aggregate
        self.identifier = identifier
        super().__init__(f"{aggregate} {identifier} not found")
