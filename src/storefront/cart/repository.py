"""Repository for the Cart aggregate."""

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.shared.email import normalize_email


@storefront.repository(part_of=Cart)
class CartRepository:
    def find_by_email(self, email: str) -> Cart | None:
        """Find the cart owned by `email`, with its items loaded."""
        matches = self._dao.query.filter(email=normalize_email(email)).all().items
        if not matches:
            return None
        return self.get(matches[0].id)
