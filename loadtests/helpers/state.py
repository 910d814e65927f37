"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state; nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """One simulated shopper, from registration to checkout."""

    email: str | None = None
    wallet_money: float = 0.0
    cart_product_ids: list[str] = field(default_factory=list)
    checked_out: bool = False
