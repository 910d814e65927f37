"""BDD tests for cart line items."""

from protean import current_domain
from pytest_bdd import parsers, scenarios, when
from storefront.cart.items import DeleteProductFromCart, UpdateProductInCart, add_product_to_cart

scenarios("features/cart_items.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{email}" adds {qty:d} of "{name}" to the cart'))
def add_to_cart(products, capture, email, qty, name):
    capture(add_product_to_cart, email, products[name].id, qty)


@when(parsers.cfparse('"{email}" changes the quantity of "{name}" to {qty:d}'))
def change_quantity(products, capture, email, name, qty):
    command = UpdateProductInCart(email=email, product_id=str(products[name].id), quantity=qty)
    capture(current_domain.process, command, asynchronous=False)


@when(parsers.cfparse('"{email}" removes "{name}" from the cart'))
def remove_from_cart(products, capture, email, name):
    command = DeleteProductFromCart(email=email, product_id=str(products[name].id))
    capture(current_domain.process, command, asynchronous=False)
