"""Customer aggregate root with the Address value object."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, Identifier, Integer, String, ValueObject

from identity.domain import identity


@identity.value_object(part_of="Customer")
class Address:
    """A postal address. Immutable and compared by value.

    Renders as ``"{street}, {number} {zip_code} {city}"``, the form carried
    by address change notifications.
    """

    street: String(required=True, max_length=255)
    number: Integer(required=True)
    zip_code: String(required=True, max_length=20)
    city: String(required=True, max_length=100)

    def __str__(self):
        return f"{self.street}, {self.number} {self.zip_code} {self.city}"


@identity.aggregate
class Customer:
    """A person who places orders.

    The identifier is assigned by the caller. A customer starts inactive and
    without an address; it can only be activated once an address is set.
    Reward points only ever grow.
    """

    id: Identifier(identifier=True, required=True)
    name: String(required=True, max_length=255)
    address: ValueObject(Address)
    active: Boolean(default=False)
    reward_points: Integer(default=0, min_value=0)

    @invariant.post
    def active_customer_must_have_address(self):
        if self.active and self.address is None:
            raise ValidationError({"address": ["Address is mandatory to activate a customer"]})

    @classmethod
    def create(cls, id, name):
        from identity.customer.events import CustomerCreated

        customer = cls(id=id, name=name)
        customer.raise_(
            CustomerCreated(
                customer_id=customer.id,
                name=customer.name,
            )
        )
        return customer

    def change_name(self, name):
        if not name:
            raise ValidationError({"name": ["Name is required"]})

        self.name = name

    def change_address(self, address):
        from identity.customer.events import CustomerAddressChanged

        if address is None:
            raise ValidationError({"address": ["Address is required"]})

        self.address = address
        self.raise_(
            CustomerAddressChanged(
                customer_id=self.id,
                name=self.name,
                address=str(address),
            )
        )

    def activate(self):
        if self.address is None:
            raise ValidationError({"address": ["Address is mandatory to activate a customer"]})

        self.active = True

    def deactivate(self):
        self.active = False

    def is_active(self):
        return self.active

    def add_reward_points(self, points):
        if points is None or points <= 0:
            raise ValidationError({"reward_points": ["Reward points to add must be positive"]})

        self.reward_points += points
