"""FastAPI routes for the Storefront domain: carts and customers."""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddProductRequest,
    CartResponse,
    CustomerIdResponse,
    RegisterCustomerRequest,
    SetAddressRequest,
    StatusResponse,
    UpdateQuantityRequest,
)
from storefront.cart.checkout import Checkout
from storefront.cart.items import DeleteProductFromCart, UpdateProductInCart, add_product_to_cart
from storefront.cart.queries import get_cart_by_user
from storefront.customer.address import SetAddress
from storefront.customer.registration import RegisterCustomer

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


@cart_router.get("/{email}", response_model=CartResponse)
async def get_cart(email: str) -> CartResponse:
    return CartResponse.from_cart(get_cart_by_user(email))


@cart_router.post("/{email}/items", status_code=201, response_model=CartResponse)
async def add_product(email: str, body: AddProductRequest) -> CartResponse:
    add_product_to_cart(email, body.product_id, body.quantity)
    return CartResponse.from_cart(get_cart_by_user(email))


@cart_router.put("/{email}/items/{product_id}", response_model=CartResponse)
async def update_product(email: str, product_id: str, body: UpdateQuantityRequest):
    """Set a product's quantity. Zero removes the product and answers 204."""
    if body.quantity == 0:
        current_domain.process(DeleteProductFromCart(email=email, product_id=product_id), asynchronous=False)
        return Response(status_code=204)

    command = UpdateProductInCart(
        email=email,
        product_id=product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return CartResponse.from_cart(get_cart_by_user(email))


@cart_router.delete("/{email}/items/{product_id}", response_model=CartResponse)
async def delete_product(email: str, product_id: str) -> CartResponse:
    command = DeleteProductFromCart(email=email, product_id=product_id)
    current_domain.process(command, asynchronous=False)
    return CartResponse.from_cart(get_cart_by_user(email))


@cart_router.put("/{email}/checkout", status_code=204)
async def checkout(email: str) -> Response:
    current_domain.process(Checkout(email=email), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Customer Router
# ---------------------------------------------------------------------------
customer_router = APIRouter(prefix="/customers", tags=["customers"])


@customer_router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: RegisterCustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(
        email=body.email,
        name=body.name,
        wallet_money=body.wallet_money,
        address=body.address,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@customer_router.put("/{email}/address", response_model=StatusResponse)
async def set_address(email: str, body: SetAddressRequest) -> StatusResponse:
    current_domain.process(SetAddress(email=email, address=body.address), asynchronous=False)
    return StatusResponse()
