"""Cart aggregate (CQRS): one per customer email, emptied at checkout.

The cart is a standard CQRS aggregate (not event sourced). Each line item
keeps a snapshot of the product's name and cost taken when it was added, so
checkout totals do not depend on later catalogue changes.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.cart.events import (
    CartCheckedOut,
    CartCreated,
    CartItemAdded,
    CartItemQuantityUpdated,
    CartItemRemoved,
)
from storefront.config import DEFAULT_PAYMENT_OPTION
from storefront.domain import storefront
from storefront.errors import (
    CART_EMPTY,
    PRODUCT_NOT_IN_CART,
    CartError,
)


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    product_name = String(max_length=255)
    cost = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def subtotal(self):
        return self.cost * self.quantity


@storefront.aggregate
class Cart:
    email = String(required=True, max_length=254, unique=True)
    items = HasMany(CartItem)
    payment_option = String(max_length=50, default=DEFAULT_PAYMENT_OPTION)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def product_can_appear_only_once(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, email, payment_option=None):
        now = datetime.now(UTC)
        cart = cls(
            email=email,
            payment_option=payment_option or DEFAULT_PAYMENT_OPTION,
            created_at=now,
            updated_at=now,
        )
        cart.raise_(
            CartCreated(
                cart_id=str(cart.id),
                email=email,
                payment_option=cart.payment_option,
            )
        )
        return cart

    # -------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        """Return the line item for ``product_id``, or ``None``."""
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def contains(self, product_id):
        return self.find_item(product_id) is not None

    @property
    def total(self):
        return sum((item.subtotal for item in self.items), 0.0)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, cost, quantity, product_name=None):
        """Add a product that is not yet in the cart.

        A second line for the same product violates ``product_can_appear_only_once``.
        """
        now = datetime.now(UTC)
        item = CartItem(
            product_id=product_id,
            product_name=product_name,
            cost=cost,
            quantity=quantity,
            added_at=now,
        )
        self.add_items(item)
        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                email=self.email,
                product_id=str(product_id),
                cost=cost,
                quantity=quantity,
            )
        )

    def update_item_quantity(self, product_id, quantity):
        """Set the quantity of a product already in the cart."""
        item = self.find_item(product_id)
        if item is None:
            raise CartError(400, PRODUCT_NOT_IN_CART)

        previous_quantity = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous_quantity,
                new_quantity=quantity,
            )
        )

    def remove_item(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise CartError(400, PRODUCT_NOT_IN_CART)

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                product_id=str(product_id),
            )
        )

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def check_out(self):
        """Empty the cart after a successful payment; returns the amount charged."""
        if not self.items:
            raise CartError(400, CART_EMPTY)

        total = self.total
        item_count = len(self.items)
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                email=self.email,
                total=total,
                item_count=item_count,
            )
        )
        return total
