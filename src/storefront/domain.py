"""Storefront bounded context — users, products, carts and checkout.

Users hold a wallet and a shipping address, products are read-only reference
data for pricing, and each user owns at most one cart that checkout converts
into a wallet debit.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
