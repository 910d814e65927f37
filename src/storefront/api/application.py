"""FastAPI application factory for the Storefront API.

Expects the storefront domain to be initialized already.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.routes import cart_router, customer_router
from storefront.domain import storefront
from storefront.errors import register_error_handlers
from storefront.utils.logging import add_context, clear_context


def create_app() -> FastAPI:
    app = FastAPI(
        title="Storefront API",
        description="Shopping carts and wallet checkout",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and tag log lines with the request."""
        add_context(method=request.method, path=request.url.path)
        try:
            with storefront.domain_context():
                return await call_next(request)
        finally:
            clear_context()

    app.include_router(cart_router)
    app.include_router(customer_router)
    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app
