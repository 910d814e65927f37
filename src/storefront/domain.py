"""Storefront bounded context: shopping carts, customers' wallets and checkout.

Carts are standard CQRS aggregates keyed by the customer's email. Products
are looked up read-only, and checkout debits the customer's wallet in the
same unit of work that empties the cart.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="storefront")

logger = get_logger(__name__)

storefront = Domain(name="storefront")
