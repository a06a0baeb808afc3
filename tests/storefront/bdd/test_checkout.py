"""BDD tests for checkout."""

from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.cart.cart import Cart
from storefront.errors import ApiError

scenarios("features/checkout.feature")


@given("the shopper has emptied their cart")
def emptied_cart(shopper, cart_service, make_product):
    product = make_product(name="Short-lived")
    cart_service.add_product_to_cart(shopper, product.id, 1)
    cart_service.delete_product_from_cart(shopper, product.id)


@when("the shopper checks out")
def checks_out(shopper, cart_service, error):
    try:
        cart_service.checkout(shopper)
    except ApiError as exc:
        error["exc"] = exc


@then("the checkout succeeds")
def checkout_succeeds(error):
    assert error["exc"] is None


@then(parsers.cfparse('the checkout fails with "{message}"'))
def checkout_fails(error, message):
    assert error["exc"] is not None
    assert error["exc"].message == message


@then("the shopper's cart is empty")
def cart_is_empty(shopper):
    cart = current_domain.repository_for(Cart).find_by_email(shopper.email)
    assert cart is not None
    assert cart.cart_items == []
