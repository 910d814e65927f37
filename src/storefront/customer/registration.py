"""Customer registration: command and handler."""

from protean import handle
from protean.fields import Float, String, Text
from protean.utils.globals import current_domain

from storefront.customer.customer import Customer
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Customer")
class RegisterCustomer:
    """Create a shopper account with an opening wallet balance."""

    email: String(required=True, max_length=254)
    name: String(max_length=100)
    wallet_money: Float(min_value=0.0)
    address: Text()


@storefront.command_handler(part_of=Customer)
class RegisterCustomerHandler:
    @handle(RegisterCustomer)
    def register_customer(self, command):
        customer = Customer.register(
            email=command.email,
            name=command.name,
            wallet_money=command.wallet_money,
            address=command.address,
        )
        current_domain.repository_for(Customer).add(customer)
        logger.info("Customer registered", customer_id=str(customer.id), email=command.email)
        return str(customer.id)
