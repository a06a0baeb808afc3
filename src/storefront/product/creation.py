"""Product creation: command and handler."""

from protean import handle
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    category: String(required=True, max_length=100)
    cost: Float(required=True, min_value=0.0)
    rating: Integer(min_value=0, max_value=5)
    image: String(max_length=500)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            category=command.category,
            cost=command.cost,
            rating=command.rating or 0,
            image=command.image,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
