"""FastAPI routes for the Storefront: users, products and carts."""

from fastapi import APIRouter, Depends, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddToCartRequest,
    CartResponse,
    CreateProductRequest,
    ProductIdResponse,
    ProductResponse,
    RegisterUserRequest,
    StatusResponse,
    UpdateAddressRequest,
    UpdateCartRequest,
    UserIdResponse,
    UserResponse,
)
from storefront.cart.service import CartService
from storefront.config import StorefrontSettings, get_settings
from storefront.errors import NotFoundError
from storefront.product.creation import AddProduct
from storefront.product.product import Product
from storefront.user.address import UpdateAddress
from storefront.user.registration import RegisterUser
from storefront.user.user import User


def get_cart_service(settings: StorefrontSettings = Depends(get_settings)) -> CartService:
    return CartService(settings)


def _load_user(user_id: str) -> User:
    try:
        return current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise NotFoundError("User not found") from None


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(
    body: RegisterUserRequest,
    settings: StorefrontSettings = Depends(get_settings),
) -> UserIdResponse:
    command = RegisterUser.with_defaults(settings, name=body.name, email=body.email, password=body.password)
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str) -> UserResponse:
    return UserResponse.from_user(_load_user(user_id))


@user_router.put("/{user_id}/address", response_model=StatusResponse)
async def update_address(user_id: str, body: UpdateAddressRequest) -> StatusResponse:
    _load_user(user_id)
    command = UpdateAddress(user_id=user_id, address=body.address)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def create_product(body: CreateProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        category=body.category,
        cost=body.cost,
        rating=body.rating,
        image=body.image,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.get("", response_model=list[ProductResponse])
async def list_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).list_all()
    return [ProductResponse.from_product(product) for product in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).find(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return ProductResponse.from_product(product)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/users/{user_id}/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart(user_id: str, service: CartService = Depends(get_cart_service)) -> CartResponse:
    cart = service.get_cart_by_user(_load_user(user_id))
    return CartResponse.from_cart(cart)


@cart_router.post("", response_model=CartResponse)
async def add_product_to_cart(
    user_id: str,
    body: AddToCartRequest,
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    cart = service.add_product_to_cart(_load_user(user_id), body.product_id, body.quantity)
    return CartResponse.from_cart(cart)


@cart_router.put("", response_model=CartResponse)
async def update_product_in_cart(
    user_id: str,
    body: UpdateCartRequest,
    service: CartService = Depends(get_cart_service),
):
    user = _load_user(user_id)
    if body.quantity == 0:
        service.delete_product_from_cart(user, body.product_id)
        return Response(status_code=204)

    cart = service.update_product_in_cart(user, body.product_id, body.quantity)
    return CartResponse.from_cart(cart)


@cart_router.put("/checkout", status_code=204)
async def checkout(user_id: str, service: CartService = Depends(get_cart_service)) -> Response:
    service.checkout(_load_user(user_id))
    return Response(status_code=204)


@cart_router.delete("/{product_id}", status_code=204)
async def delete_product_from_cart(
    user_id: str,
    product_id: str,
    service: CartService = Depends(get_cart_service),
) -> Response:
    service.delete_product_from_cart(_load_user(user_id), product_id)
    return Response(status_code=204)
