"""Faker-based data generators for Locust load test scenarios.

Payloads match the Storefront API's Pydantic request schemas.
"""

import os
import random
import uuid

from faker import Faker

fake = Faker()


def catalogue_product_ids() -> list[str]:
    """Seeded product ids, read from ``LOADTEST_PRODUCT_IDS`` (comma separated)."""
    raw = os.getenv("LOADTEST_PRODUCT_IDS", "")
    return [pid.strip() for pid in raw.split(",") if pid.strip()]


def unique_email() -> str:
    return f"{fake.user_name()[:20]}.{uuid.uuid4().hex[:8]}@{fake.free_email_domain()}"


def customer_data(wallet_money: float = 5000.0) -> dict:
    """Generate a RegisterCustomerRequest payload."""
    return {
        "email": unique_email(),
        "name": fake.name(),
        "wallet_money": wallet_money,
    }


def address_data() -> dict:
    """Generate a SetAddressRequest payload."""
    return {"address": fake.address().replace("\n", ", ")}


def cart_item_data(product_id: str) -> dict:
    """Generate an AddProductRequest payload."""
    return {"product_id": product_id, "quantity": random.randint(1, 3)}


def quantity_update_data() -> dict:
    """Generate an UpdateQuantityRequest payload."""
    return {"quantity": random.randint(1, 5)}
