"""Product aggregate — read-only reference data used to price cart items."""

from datetime import datetime

from protean.fields import DateTime, Float, Integer, String

from storefront.domain import storefront


@storefront.aggregate
class Product:
    name: String(required=True, max_length=255)
    category: String(required=True, max_length=100)
    cost: Float(required=True, min_value=0.0)
    rating: Integer(min_value=0, max_value=5, default=0)
    image: String(max_length=500)
    created_at: DateTime(default=datetime.now)

    @classmethod
    def create(cls, name, category, cost, rating=0, image=None):
        from storefront.product.events import ProductAdded

        now = datetime.now()
        product = cls(
            name=name,
            category=category,
            cost=cost,
            rating=rating,
            image=image,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=name,
                category=category,
                cost=cost,
                added_at=now,
            )
        )
        return product
