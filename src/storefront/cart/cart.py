"""Cart aggregate, one per user, holding product snapshots and quantities.

Items embed a copy of the product taken when they were added. Pricing at
checkout uses that copy, so catalogue price changes only reach a cart when the
product is removed and added again.
"""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.cart.events import (
    CartCheckedOut,
    CartQuantityUpdated,
    ProductAddedToCart,
    ProductRemovedFromCart,
)
from storefront.domain import storefront
from storefront.shared.email import normalize_email

DEFAULT_PAYMENT_OPTION = "PAYMENT_OPTION_DEFAULT"


@storefront.value_object(part_of="Cart")
class ProductSnapshot:
    product_id = Identifier(required=True)
    name = String(max_length=255)
    category = String(max_length=100)
    cost = Float(required=True, min_value=0.0)
    rating = Integer()
    image = String(max_length=500)

    @classmethod
    def of(cls, product):
        return cls(
            product_id=str(product.id),
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image=product.image,
        )


@storefront.entity(part_of="Cart")
class CartItem:
    product = ValueObject(ProductSnapshot, required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    def holds(self, product_id) -> bool:
        return str(self.product.product_id) == str(product_id)

    def subtotal(self) -> float:
        return self.product.cost * self.quantity


@storefront.aggregate
class Cart:
    email = String(required=True, max_length=254, unique=True)
    cart_items = HasMany(CartItem)
    payment_option = String(max_length=50, default=DEFAULT_PAYMENT_OPTION)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def products_must_be_unique(self):
        product_ids = [str(item.product.product_id) for item in self.cart_items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"cart_items": ["A product can only appear once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, email):
        now = datetime.now(UTC)
        return cls(
            email=normalize_email(email),
            payment_option=DEFAULT_PAYMENT_OPTION,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        return next((item for item in self.cart_items if item.holds(product_id)), None)

    def add_product(self, snapshot, quantity):
        """Append a new item. Quantities are never merged into an existing item."""
        if self.find_item(snapshot.product_id) is not None:
            raise ValidationError({"product_id": ["Product already in cart"]})

        now = datetime.now(UTC)
        self.add_cart_items(CartItem(product=snapshot, quantity=quantity, added_at=now))
        self.updated_at = now

        self.raise_(
            ProductAddedToCart(
                cart_id=str(self.id),
                email=self.email,
                product_id=str(snapshot.product_id),
                quantity=quantity,
                unit_cost=snapshot.cost,
            )
        )

    def update_quantity(self, product_id, quantity):
        """Replace the quantity of an item in place."""
        item = self.find_item(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Product not in cart"]})

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_product(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Product not in cart"]})

        self.remove_cart_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductRemovedFromCart(
                cart_id=str(self.id),
                product_id=str(product_id),
            )
        )

    def total_cost(self) -> float:
        return sum(item.subtotal() for item in self.cart_items)

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def empty_after_checkout(self, total_cost):
        """Drop every item once the owner has paid `total_cost` for them."""
        if not self.cart_items:
            raise ValidationError({"cart_items": ["Cannot check out an empty cart"]})

        items_snapshot = [
            {
                "product_id": str(item.product.product_id),
                "cost": item.product.cost,
                "quantity": item.quantity,
            }
            for item in self.cart_items
        ]

        for item in list(self.cart_items):
            self.remove_cart_items(item)

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                email=self.email,
                total_cost=total_cost,
                items=json.dumps(items_snapshot),
                checked_out_at=now,
            )
        )
