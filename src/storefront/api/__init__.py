"""Storefront API package."""

from storefront.api.errors import register_api_error_handler
from storefront.api.routes import cart_router, product_router, user_router

__all__ = ["cart_router", "product_router", "user_router", "register_api_error_handler"]
