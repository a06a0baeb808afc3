"""Pydantic request/response schemas for the Storefront API.

These are the external contracts; commands and aggregates stay internal.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- User schemas ---


class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "crio-user",
                    "email": "crio-user@gmail.com",
                    "password": "$2a$09$hashed-credential",
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=8, max_length=255)


class UpdateAddressRequest(BaseModel):
    address: str = Field(..., min_length=1, max_length=500)


class UserIdResponse(BaseModel):
    user_id: str


class UserResponse(BaseModel):
    user_id: str
    name: str
    email: str
    wallet_money: float
    address: str

    @classmethod
    def from_user(cls, user) -> UserResponse:
        return cls(
            user_id=str(user.id),
            name=user.name,
            email=user.email,
            wallet_money=user.wallet_money,
            address=user.address,
        )


# --- Product schemas ---


class CreateProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "UNIFACTOR Mens Running Shoes",
                    "category": "Fashion",
                    "cost": 50,
                    "rating": 5,
                    "image": "https://crio-directus-assets.s3.ap-south-1.amazonaws.com/shoes.png",
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)
    cost: float = Field(..., ge=0)
    rating: int = Field(0, ge=0, le=5)
    image: str | None = Field(None, max_length=500)


class ProductIdResponse(BaseModel):
    product_id: str


class ProductResponse(BaseModel):
    product_id: str
    name: str
    category: str
    cost: float
    rating: int | None = None
    image: str | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            product_id=str(product.id),
            name=product.name,
            category=product.category,
            cost=product.cost,
            rating=product.rating,
            image=product.image,
        )


# --- Cart schemas ---


class AddToCartRequest(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class UpdateCartRequest(BaseModel):
    """A quantity of zero removes the product from the cart."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=0)


class ProductSnapshotResponse(BaseModel):
    product_id: str
    name: str | None = None
    category: str | None = None
    cost: float
    rating: int | None = None
    image: str | None = None


class CartItemResponse(BaseModel):
    product: ProductSnapshotResponse
    quantity: int


class CartResponse(BaseModel):
    cart_id: str
    email: str
    cart_items: list[CartItemResponse]
    payment_option: str | None = None
    total_cost: float

    @classmethod
    def from_cart(cls, cart) -> CartResponse:
        return cls(
            cart_id=str(cart.id),
            email=cart.email,
            cart_items=[
                CartItemResponse(
                    product=ProductSnapshotResponse(
                        product_id=str(item.product.product_id),
                        name=item.product.name,
                        category=item.product.category,
                        cost=item.product.cost,
                        rating=item.product.rating,
                        image=item.product.image,
                    ),
                    quantity=item.quantity,
                )
                for item in cart.cart_items
            ],
            payment_option=cart.payment_option,
            total_cost=cart.total_cost(),
        )


class StatusResponse(BaseModel):
    status: str = "ok"
