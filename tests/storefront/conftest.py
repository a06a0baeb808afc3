import pytest

from storefront.config import StorefrontSettings


@pytest.fixture(scope="session")
def _storefront_domain():
    """Initialize the storefront domain once per session."""
    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def settings():
    return StorefrontSettings(default_wallet_money=500, default_address="ADDRESS_NOT_SET")


@pytest.fixture()
def cart_service(settings):
    from storefront.cart.service import CartService

    return CartService(settings)


@pytest.fixture()
def make_user(settings):
    """Persist a user with the configured defaults, optionally overriding wallet and address."""
    from protean import current_domain
    from storefront.user.user import User

    def _make(email="crio-user@gmail.com", name="crio-user", wallet_money=None, address=None):
        user = User.register(
            name=name,
            email=email,
            password="$2a$09$credential-hash",
            wallet_money=settings.default_wallet_money if wallet_money is None else wallet_money,
            address=settings.default_address if address is None else address,
        )
        repo = current_domain.repository_for(User)
        repo.add(user)
        return repo.get(user.id)

    return _make


@pytest.fixture()
def make_product():
    """Persist a product and return it."""
    from protean import current_domain
    from storefront.product.product import Product

    def _make(name="UNIFACTOR Mens Running Shoes", category="Fashion", cost=50.0, rating=5, image=None):
        product = Product.create(name=name, category=category, cost=cost, rating=rating, image=image)
        repo = current_domain.repository_for(Product)
        repo.add(product)
        return repo.get(product.id)

    return _make
