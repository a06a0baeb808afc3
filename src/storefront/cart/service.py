"""Cart service — cart mutation and checkout for an already resolved user.

Every operation is a single read-modify-write against the repositories.
Guards run in a fixed order and the first failing guard raises; nothing is
written before all guards have passed.

Checkout writes the user and the cart one after the other. The two writes
are independent: if the cart write fails, the wallet stays debited.
"""

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart, ProductSnapshot
from storefront.config import StorefrontSettings
from storefront.errors import BadRequestError, ConflictError, InternalError, NotFoundError
from storefront.product.product import Product
from storefront.user.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

USER_HAS_NO_CART = "User does not have a cart"
CART_CREATION_FAILED = "Cart creation failed"
PRODUCT_ALREADY_IN_CART = "Product already in cart. Use the cart sidebar to update or remove product from cart"
PRODUCT_NOT_IN_DATABASE = "Product doesn't exist in database"
NO_CART_TO_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
NO_CART_TO_DELETE_FROM = "User does not have a cart."
PRODUCT_NOT_IN_CART = "Product not in cart"
CART_IS_EMPTY = "Cart is empty"
ADDRESS_NOT_SET = "Address not set"
INSUFFICIENT_MONEY = "User has insufficient money to process"


class CartService:
    def __init__(self, settings: StorefrontSettings):
        self.settings = settings

    def get_cart_by_user(self, user: User) -> Cart:
        cart = current_domain.repository_for(Cart).find_by_email(user.email)
        if cart is None:
            raise NotFoundError(USER_HAS_NO_CART)
        return cart

    def add_product_to_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        repo = current_domain.repository_for(Cart)

        cart = repo.find_by_email(user.email)
        if cart is None:
            cart = self._create_cart(repo, user)

        if cart.find_item(product_id) is not None:
            raise ConflictError(PRODUCT_ALREADY_IN_CART)

        product = current_domain.repository_for(Product).find(product_id)
        if product is None:
            raise BadRequestError(PRODUCT_NOT_IN_DATABASE)

        cart.add_product(ProductSnapshot.of(product), quantity)
        repo.add(cart)

        logger.info(
            "product_added_to_cart",
            email=user.email,
            cart_id=str(cart.id),
            product_id=str(product_id),
            quantity=quantity,
        )
        return cart

    def update_product_in_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        repo = current_domain.repository_for(Cart)

        cart = repo.find_by_email(user.email)
        if cart is None:
            raise BadRequestError(NO_CART_TO_UPDATE)

        if current_domain.repository_for(Product).find(product_id) is None:
            raise BadRequestError(PRODUCT_NOT_IN_DATABASE)

        if cart.find_item(product_id) is None:
            raise BadRequestError(PRODUCT_NOT_IN_CART)

        cart.update_quantity(product_id, quantity)
        repo.add(cart)

        logger.info(
            "cart_quantity_updated",
            email=user.email,
            cart_id=str(cart.id),
            product_id=str(product_id),
            quantity=quantity,
        )
        return cart

    def delete_product_from_cart(self, user: User, product_id: str) -> None:
        repo = current_domain.repository_for(Cart)

        cart = repo.find_by_email(user.email)
        if cart is None:
            raise BadRequestError(NO_CART_TO_DELETE_FROM)

        if cart.find_item(product_id) is None:
            raise BadRequestError(PRODUCT_NOT_IN_CART)

        cart.remove_product(product_id)
        repo.add(cart)

        logger.info(
            "product_removed_from_cart",
            email=user.email,
            cart_id=str(cart.id),
            product_id=str(product_id),
        )

    def checkout(self, user: User) -> None:
        repo = current_domain.repository_for(Cart)

        cart = repo.find_by_email(user.email)
        if cart is None:
            raise NotFoundError(USER_HAS_NO_CART)

        if not cart.cart_items:
            raise BadRequestError(CART_IS_EMPTY)

        if not user.has_set_non_default_address(self.settings.default_address):
            raise BadRequestError(ADDRESS_NOT_SET)

        total_cost = cart.total_cost()
        if total_cost > user.wallet_money:
            raise BadRequestError(INSUFFICIENT_MONEY)

        user.debit_wallet(total_cost)
        current_domain.repository_for(User).add(user)

        cart.empty_after_checkout(total_cost)
        repo.add(cart)

        logger.info(
            "checkout_completed",
            email=user.email,
            cart_id=str(cart.id),
            total_cost=total_cost,
            wallet_money=user.wallet_money,
        )

    def _create_cart(self, repo, user: User) -> Cart:
        try:
            cart = Cart.create(email=user.email)
            repo.add(cart)
        except Exception as exc:
            logger.exception("cart_creation_failed", email=user.email)
            raise InternalError(CART_CREATION_FAILED) from exc

        logger.info("cart_created", email=user.email, cart_id=str(cart.id))
        return cart
