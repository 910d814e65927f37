"""Cart management: opening a customer's cart.

A cart is opened by its own command, so it is committed before any item is
added to it. A rejected first add leaves the empty cart in place.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.config import DEFAULT_PAYMENT_OPTION
from storefront.domain import storefront
from storefront.errors import CART_CREATION_FAILED, CartError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Cart")
class CreateCart:
    """Open an empty cart for the customer with this email."""

    email = String(required=True, max_length=254)
    payment_option = String(max_length=50)


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = Cart.create(
            email=command.email,
            payment_option=command.payment_option or DEFAULT_PAYMENT_OPTION,
        )
        try:
            current_domain.repository_for(Cart).add(cart)
        except ValidationError:
            raise CartError(500, CART_CREATION_FAILED) from None

        logger.info("Cart created", cart_id=str(cart.id), email=command.email)
        return str(cart.id)
