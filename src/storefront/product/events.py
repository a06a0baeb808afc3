"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue and can now be put in carts."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    cost: Float(required=True)
    added_at: DateTime(required=True)
