"""Repository for the Cart aggregate."""

from storefront.cart.cart import Cart
from storefront.domain import storefront


@storefront.repository(part_of=Cart)
class CartRepository:
    """Carts are looked up by the owning customer's email, never by id."""

    def find_by_email(self, email: str) -> Cart | None:
        carts = self._dao.query.filter(email=email).all().items
        return carts[0] if carts else None
