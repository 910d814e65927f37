"""Starter products for local development and load testing."""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product

SEED_PRODUCTS = [
    {"name": "UNIFACTOR Mens Running Shoes", "category": "Fashion", "cost": 50.0, "rating": 5.0},
    {"name": "YONEX Smash Badminton Racquet", "category": "Sports", "cost": 100.0, "rating": 5.0},
    {"name": "Tan Leatherette Weekender Duffle", "category": "Fashion", "cost": 150.0, "rating": 4.0},
    {"name": "The Minimalist Slim Leather Watch", "category": "Electronics", "cost": 60.0, "rating": 5.0},
    {"name": "Atomberg 1200mm BLDC Ceiling Fan", "category": "Home & Kitchen", "cost": 78.0, "rating": 3.0},
]


def seed_products(products=None):
    """Add the given (or starter) products; returns the new product ids."""
    repo = current_domain.repository_for(Product)
    ids = []
    for data in products or SEED_PRODUCTS:
        product = Product(**data)
        repo.add(product)
        ids.append(str(product.id))
    return ids
