"""Pydantic request/response schemas for the Storefront API.

These are external contracts, separate from internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class AddProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "BW0jAAeDJmlZCF8i", "quantity": 1}]}}

    product_id: str
    quantity: int = Field(ge=1, default=1)


class UpdateQuantityRequest(BaseModel):
    """A quantity of 0 removes the product from the cart."""

    quantity: int = Field(ge=0)


# ---------------------------------------------------------------------------
# Customer Request Schemas
# ---------------------------------------------------------------------------
class RegisterCustomerRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"email": "jane.doe@example.com", "name": "Jane Doe", "wallet_money": 500.0}]
        }
    }

    email: str = Field(..., max_length=254)
    name: str | None = Field(None, max_length=100)
    wallet_money: float | None = Field(None, ge=0)
    address: str | None = None


class SetAddressRequest(BaseModel):
    address: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartItemResponse(BaseModel):
    product_id: str
    product_name: str | None = None
    cost: float
    quantity: int


class CartResponse(BaseModel):
    cart_id: str
    email: str
    payment_option: str
    items: list[CartItemResponse]
    total: float

    @classmethod
    def from_cart(cls, cart) -> "CartResponse":
        return cls(
            cart_id=str(cart.id),
            email=cart.email,
            payment_option=cart.payment_option,
            items=[
                CartItemResponse(
                    product_id=str(item.product_id),
                    product_name=item.product_name,
                    cost=item.cost,
                    quantity=item.quantity,
                )
                for item in cart.items
            ],
            total=cart.total,
        )


class CustomerIdResponse(BaseModel):
    customer_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
