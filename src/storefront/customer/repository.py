"""Repository for the Customer aggregate."""

from storefront.customer.customer import Customer
from storefront.domain import storefront


@storefront.repository(part_of=Customer)
class CustomerRepository:
    def find_by_email(self, email: str) -> Customer | None:
        """Find a customer by email, or ``None``."""
        customers = self._dao.query.filter(email=email).all().items
        return customers[0] if customers else None
