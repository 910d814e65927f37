"""Business defaults for the storefront domain, read from the environment."""

import os

# Payment option assigned to newly created carts
DEFAULT_PAYMENT_OPTION = os.getenv("DEFAULT_PAYMENT_OPTION", "PAYMENT_OPTION_DEFAULT")

# Opening wallet balance for newly registered customers
DEFAULT_WALLET_MONEY = float(os.getenv("DEFAULT_WALLET_MONEY", "500"))

# Sentinel address; checkout is refused until a customer replaces it
DEFAULT_ADDRESS = os.getenv("DEFAULT_ADDRESS", "ADDRESS_NOT_SET")
