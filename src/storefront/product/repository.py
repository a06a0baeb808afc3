"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.repository(part_of=Product)
class ProductRepository:
    def find(self, product_id: str) -> Product | None:
        """Return the product, or None when the id does not resolve."""
        if not product_id:
            return None
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def list_all(self) -> list[Product]:
        return self._dao.query.all().items
