"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class ProductAddedToCart:
    """A product snapshot was added to a user's cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    unit_cost = Float(required=True)


@storefront.event(part_of="Cart")
class CartQuantityUpdated:
    """The quantity of a product already in the cart was replaced."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class ProductRemovedFromCart:
    """A product was taken out of the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="Cart")
class CartCheckedOut:
    """The cart was paid for from the owner's wallet and emptied."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    total_cost = Float(required=True)
    items = Text(required=True)  # JSON: list of {product_id, cost, quantity}
    checked_out_at = DateTime(required=True)
