"""Business rule failures for the storefront, each tied to an HTTP status code."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

CART_NOT_FOUND = "User does not have a cart"
CART_NOT_FOUND_USE_POST = "User does not have a cart. Use POST to create cart and add a product"
CART_CREATION_FAILED = "User cart creation failed because user already have a cart"
PRODUCT_ALREADY_IN_CART = "Product already in cart. Use the cart sidebar to update or remove product from cart"
PRODUCT_NOT_FOUND = "Product doesn't exist in database"
PRODUCT_NOT_IN_CART = "Product not in cart"
CART_EMPTY = "Cart is empty"
ADDRESS_NOT_SET = "Address not set"
INSUFFICIENT_BALANCE = "User has insufficient money to process"
USER_NOT_FOUND = "User not found"


class CartError(Exception):
    """A cart or checkout rule was violated.

    Carries the HTTP status code the API answers with and a fixed,
    user-facing message.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"CartError({self.status_code}, {self.message!r})"


async def cart_error_handler(request: Request, exc: CartError) -> JSONResponse:  # noqa: ARG001
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Answer ``CartError`` with its own status, and Protean errors the Protean way."""
    register_exception_handlers(app)
    app.add_exception_handler(CartError, cart_error_handler)
