"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartCreated:
    """A cart was opened for a customer on their first add-to-cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    payment_option = String()


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    product_id = Identifier(required=True)
    cost = Float(required=True)
    quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemQuantityUpdated:
    """The quantity of a product in the cart was changed."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class CartItemRemoved:
    """A product was removed from the cart."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="Cart")
class CartCheckedOut:
    """The cart was paid for from the customer's wallet and emptied."""

    __version__ = 1

    cart_id = Identifier(required=True)
    email = String(required=True)
    total = Float(required=True)
    item_count = Integer(required=True)
