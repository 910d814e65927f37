"""Storefront domain API package."""

from storefront.api.routes import cart_router, customer_router

__all__ = ["cart_router", "customer_router"]
