"""Read side of the cart: fetch a customer's cart as-is."""

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.errors import CART_NOT_FOUND, CartError


def get_cart_by_user(email):
    """Return the cart owned by ``email``; a missing cart is a 404."""
    cart = current_domain.repository_for(Cart).find_by_email(email)
    if cart is None:
        raise CartError(404, CART_NOT_FOUND)
    return cart
