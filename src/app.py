"""Storefront FastAPI application.

Processes cart and checkout commands synchronously via HTTP. Every request
runs inside the storefront domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# PROTEAN_ENV selects the config overlay in storefront/domain.toml:
#   - "test"       -> in-memory providers
#   - "production" -> PostgreSQL
from storefront.domain import storefront

storefront.init()

from storefront.api.application import create_app  # noqa: E402

app = create_app()
