"""Domain events for the Customer aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class CustomerRegistered:
    """A new shopper account was created."""

    __version__ = 1

    customer_id: Identifier(required=True)
    email: String(required=True)
    wallet_money: Float(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="Customer")
class AddressSet:
    """A customer replaced their delivery address."""

    __version__ = 1

    customer_id: Identifier(required=True)
    address: Text(required=True)


@storefront.event(part_of="Customer")
class WalletDebited:
    """Money was taken out of a customer's wallet at checkout."""

    __version__ = 1

    customer_id: Identifier(required=True)
    amount: Float(required=True)
    balance: Float(required=True)
