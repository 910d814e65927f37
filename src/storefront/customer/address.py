"""Customer address: command and handler."""

from protean import handle
from protean.fields import String, Text
from protean.utils.globals import current_domain

from storefront.customer.customer import Customer
from storefront.domain import storefront
from storefront.errors import USER_NOT_FOUND, CartError


@storefront.command(part_of="Customer")
class SetAddress:
    """Replace the delivery address of the customer with this email."""

    email: String(required=True, max_length=254)
    address: Text(required=True)


@storefront.command_handler(part_of=Customer)
class SetAddressHandler:
    @handle(SetAddress)
    def set_address(self, command):
        repo = current_domain.repository_for(Customer)
        customer = repo.find_by_email(command.email)
        if customer is None:
            raise CartError(404, USER_NOT_FOUND)

        customer.set_address(command.address)
        repo.add(customer)
