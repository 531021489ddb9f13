"""Product aggregate root."""

from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String

from catalogue.domain import catalogue


@catalogue.aggregate
class Product:
    """A sellable item with a name and a non-negative unit price."""

    id: Identifier(identifier=True, required=True)
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.0)

    @classmethod
    def create(cls, id, name, price):
        from catalogue.product.events import ProductCreated

        product = cls(id=id, name=name, price=price)
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                price=product.price,
            )
        )
        return product

    def change_name(self, name):
        if not name:
            raise ValidationError({"name": ["Name is required"]})

        self.name = name

    def change_price(self, price):
        if price is None or price < 0:
            raise ValidationError({"price": ["Price must be zero or greater"]})

        self.price = price
