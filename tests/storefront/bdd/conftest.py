"""Shared BDD fixtures and step definitions for the storefront."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from storefront.cart.cart import Cart
from storefront.user.user import User


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for the captured service error."""
    return {"exc": None}


@pytest.fixture()
def products():
    """Products the shopper has put in the cart, in order."""
    return []


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("a shopper with {amount:d} in their wallet"), target_fixture="shopper")
def shopper_with_wallet(make_user, amount):
    return make_user(wallet_money=amount)


@given(parsers.cfparse('the shopper has set their address to "{address}"'))
def shopper_with_address(shopper, address):
    shopper.update_address(address)
    current_domain.repository_for(User).add(shopper)


@given(parsers.cfparse("the shopper has {quantity:d} of a product costing {cost:g} in their cart"))
def product_in_cart(shopper, cart_service, make_product, products, quantity, cost):
    product = make_product(name=f"Product {len(products) + 1}", cost=cost)
    cart_service.add_product_to_cart(shopper, product.id, quantity)
    products.append(product)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the shopper's cart holds {count:d} items"))
def cart_holds(shopper, count):
    cart = current_domain.repository_for(Cart).find_by_email(shopper.email)
    assert len(cart.cart_items) == count


@then(parsers.cfparse("the shopper's cart totals {total:g}"))
def cart_totals(shopper, total):
    cart = current_domain.repository_for(Cart).find_by_email(shopper.email)
    assert cart.total_cost() == total


@then(parsers.cfparse("the shopper's wallet holds {amount:g}"))
def wallet_holds(shopper, amount):
    assert current_domain.repository_for(User).get(shopper.id).wallet_money == amount
