"""Product aggregate: read-only price list the cart resolves products against."""

from protean.fields import Float, String

from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A sellable product. The cart only ever reads it."""

    name = String(required=True, max_length=255)
    category = String(max_length=100)
    cost = Float(required=True, min_value=0.0)
    rating = Float(min_value=0.0, max_value=5.0)
    image = String(max_length=1024)
