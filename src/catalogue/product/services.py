"""Bulk operations over products."""

from protean.exceptions import ValidationError


def increase_prices(products, percentage):
    """Raise the price of every product by ``percentage`` percent.

    Products are changed in place and returned.
    """
    if percentage is None or percentage < 0:
        raise ValidationError({"percentage": ["Percentage must be zero or greater"]})

    for product in products:
        product.change_price(product.price + product.price * percentage / 100)

    return products
