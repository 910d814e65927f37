"""Checkout: pay for the cart from the customer's wallet.

Preconditions are checked in a fixed order: the cart must exist, hold at
least one item, the customer must have replaced the default address, and the
wallet must cover the total (enforced by ``Customer.debit_wallet``). The debit
and the emptied cart are saved in the handler's unit of work, so either both
persist or neither does.
"""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.customer.customer import Customer
from storefront.domain import storefront
from storefront.errors import (
    ADDRESS_NOT_SET,
    CART_EMPTY,
    CART_NOT_FOUND,
    USER_NOT_FOUND,
    CartError,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Cart")
class Checkout:
    """Pay for every item in the customer's cart and empty it."""

    email = String(required=True, max_length=254)


@storefront.command_handler(part_of=Cart)
class CheckoutHandler:
    @handle(Checkout)
    def checkout(self, command):
        cart_repo = current_domain.repository_for(Cart)
        customer_repo = current_domain.repository_for(Customer)

        cart = cart_repo.find_by_email(command.email)
        if cart is None:
            raise CartError(404, CART_NOT_FOUND)

        if not cart.items:
            raise CartError(400, CART_EMPTY)

        customer = customer_repo.find_by_email(command.email)
        if customer is None:
            raise CartError(404, USER_NOT_FOUND)

        if not customer.has_set_non_default_address():
            raise CartError(400, ADDRESS_NOT_SET)

        total = cart.total
        customer.debit_wallet(total)
        cart.check_out()

        customer_repo.add(customer)
        cart_repo.add(cart)

        logger.info(
            "Cart checked out",
            cart_id=str(cart.id),
            email=command.email,
            total=total,
            balance=customer.wallet_money,
        )
        return total
