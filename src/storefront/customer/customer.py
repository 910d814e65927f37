"""Customer aggregate: the shopper whose wallet pays for checkout."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String, Text

from storefront.config import DEFAULT_ADDRESS, DEFAULT_WALLET_MONEY
from storefront.domain import storefront
from storefront.errors import INSUFFICIENT_BALANCE, CartError


@storefront.aggregate
class Customer:
    """A registered shopper, identified by email.

    The wallet holds the money checkout is paid from. The address starts out
    as a sentinel value; checkout is refused until the customer replaces it.
    """

    email: String(required=True, max_length=254, unique=True)
    name: String(max_length=100)
    wallet_money: Float(default=DEFAULT_WALLET_MONEY)
    address: Text(default=DEFAULT_ADDRESS)
    registered_at: DateTime()

    @invariant.post
    def wallet_cannot_go_negative(self):
        if self.wallet_money is not None and self.wallet_money < 0:
            raise ValidationError({"wallet_money": ["Wallet balance cannot be negative"]})

    @classmethod
    def register(cls, email, name=None, wallet_money=None, address=None):
        from storefront.customer.events import CustomerRegistered

        customer = cls(
            email=email,
            name=name,
            wallet_money=DEFAULT_WALLET_MONEY if wallet_money is None else wallet_money,
            address=address or DEFAULT_ADDRESS,
            registered_at=datetime.now(UTC),
        )
        customer.raise_(
            CustomerRegistered(
                customer_id=customer.id,
                email=email,
                wallet_money=customer.wallet_money,
                registered_at=customer.registered_at,
            )
        )
        return customer

    def has_set_non_default_address(self):
        return bool(self.address) and self.address != DEFAULT_ADDRESS

    def set_address(self, address):
        from storefront.customer.events import AddressSet

        self.address = address
        self.raise_(AddressSet(customer_id=self.id, address=address))

    def debit_wallet(self, amount):
        """Take ``amount`` out of the wallet; refuses to overdraw."""
        from storefront.customer.events import WalletDebited

        if amount > self.wallet_money:
            raise CartError(400, INSUFFICIENT_BALANCE)

        self.wallet_money -= amount
        self.raise_(
            WalletDebited(
                customer_id=self.id,
                amount=amount,
                balance=self.wallet_money,
            )
        )
