"""Shared BDD fixtures and step definitions for the Storefront domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then
from storefront.cart.cart import Cart
from storefront.cart.items import DeleteProductFromCart, add_product_to_cart
from storefront.catalogue.product import Product
from storefront.customer.customer import Customer
from storefront.errors import CartError


@pytest.fixture()
def products():
    """Products created by Given steps, by name."""
    return {}


@pytest.fixture()
def error():
    """Container for the captured cart error."""
    return {"exc": None}


@pytest.fixture()
def capture(error):
    """Run a callable and keep the ``CartError`` it raises, if any."""

    def _capture(fn, *args, **kwargs):
        try:
            fn(*args, **kwargs)
        except CartError as exc:
            error["exc"] = exc

    return _capture


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" costing {cost:f}'))
def a_product(products, name, cost):
    product = Product(name=name, cost=cost)
    current_domain.repository_for(Product).add(product)
    products[name] = product


@given(parsers.cfparse('a customer "{email}" with {wallet:f} in the wallet living at "{address}"'))
def a_customer_with_address(email, wallet, address):
    customer = Customer.register(email=email, wallet_money=wallet, address=address)
    current_domain.repository_for(Customer).add(customer)


@given(parsers.cfparse('a customer "{email}" with {wallet:f} in the wallet'))
def a_customer(email, wallet):
    customer = Customer.register(email=email, wallet_money=wallet)
    current_domain.repository_for(Customer).add(customer)


@given(parsers.cfparse('"{email}" added {qty:d} of "{name}" to the cart'))
def added_to_cart(products, email, qty, name):
    add_product_to_cart(email, products[name].id, qty)


@given(parsers.cfparse('"{email}" removed "{name}" from the cart'))
def removed_from_cart(products, email, name):
    current_domain.process(
        DeleteProductFromCart(email=email, product_id=str(products[name].id)),
        asynchronous=False,
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the request fails with status {status:d} and message \"{message}\""))
def request_fails(error, status, message):
    assert error["exc"] is not None, "Expected a cart error but none was raised"
    assert isinstance(error["exc"], CartError)
    assert error["exc"].status_code == status
    assert error["exc"].message == message


@then(parsers.cfparse('the cart of "{email}" has {count:d} item'))
def cart_has_n_items_singular(email, count):
    assert len(current_domain.repository_for(Cart).find_by_email(email).items) == count


@then(parsers.cfparse('the cart of "{email}" has {count:d} items'))
def cart_has_n_items(email, count):
    assert len(current_domain.repository_for(Cart).find_by_email(email).items) == count


@then(parsers.cfparse('the cart of "{email}" holds {qty:d} of "{name}"'))
def cart_holds(products, email, qty, name):
    cart = current_domain.repository_for(Cart).find_by_email(email)
    assert cart.find_item(products[name].id).quantity == qty
