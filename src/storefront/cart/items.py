"""Cart item management: commands and handler.

Carts are addressed by the owner's email. ``add_product_to_cart`` opens the
cart on the first add; the item commands themselves expect the cart to exist.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.cart.management import CreateCart
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import (
    CART_NOT_FOUND,
    CART_NOT_FOUND_USE_POST,
    PRODUCT_ALREADY_IN_CART,
    PRODUCT_NOT_FOUND,
    CartError,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Cart")
class AddProductToCart:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class UpdateProductInCart:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class DeleteProductFromCart:
    email = String(required=True, max_length=254)
    product_id = Identifier(required=True)


def _get_product(product_id):
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise CartError(400, PRODUCT_NOT_FOUND) from None


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddProductToCart)
    def add_product_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_email(command.email)
        if cart is None:
            raise CartError(404, CART_NOT_FOUND)

        # Duplicates are rejected before the product is even looked up
        if cart.contains(command.product_id):
            raise CartError(400, PRODUCT_ALREADY_IN_CART)

        product = _get_product(command.product_id)
        cart.add_item(
            product_id=product.id,
            cost=product.cost,
            quantity=command.quantity,
            product_name=product.name,
        )
        repo.add(cart)

        logger.info(
            "Product added to cart",
            cart_id=str(cart.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(UpdateProductInCart)
    def update_product_in_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_email(command.email)
        if cart is None:
            raise CartError(400, CART_NOT_FOUND_USE_POST)

        _get_product(command.product_id)

        cart.update_item_quantity(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)

        logger.info(
            "Cart quantity updated",
            cart_id=str(cart.id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(DeleteProductFromCart)
    def delete_product_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.find_by_email(command.email)
        if cart is None:
            raise CartError(400, CART_NOT_FOUND)

        cart.remove_item(product_id=command.product_id)
        repo.add(cart)

        logger.info("Product removed from cart", cart_id=str(cart.id), product_id=str(command.product_id))
        return str(cart.id)


def add_product_to_cart(email, product_id, quantity):
    """Add a product to the user's cart, opening the cart first if needed.

    ``CreateCart`` and ``AddProductToCart`` run in separate units of work.
    Returns the cart id.
    """
    if current_domain.repository_for(Cart).find_by_email(email) is None:
        current_domain.process(CreateCart(email=email), asynchronous=False)

    command = AddProductToCart(email=email, product_id=str(product_id), quantity=quantity)
    return current_domain.process(command, asynchronous=False)
