import pytest


@pytest.fixture(scope="session")
def _storefront_domain():
    """Initialize the storefront domain once per session."""
    from storefront.domain import storefront

    storefront.init()
    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def product():
    """A persisted product costing 50.0."""
    from protean import current_domain
    from storefront.catalogue.product import Product

    product = Product(name="Running Shoes", category="Fashion", cost=50.0, rating=5.0)
    current_domain.repository_for(Product).add(product)
    return product


@pytest.fixture()
def other_product():
    """A persisted product costing 100.0."""
    from protean import current_domain
    from storefront.catalogue.product import Product

    product = Product(name="Badminton Racquet", category="Sports", cost=100.0, rating=4.0)
    current_domain.repository_for(Product).add(product)
    return product


@pytest.fixture()
def customer():
    """A persisted customer with a real address and 500.0 in the wallet."""
    from protean import current_domain
    from storefront.customer.customer import Customer

    customer = Customer.register(email="jane@example.com", name="Jane", wallet_money=500.0, address="12 Elm Street")
    current_domain.repository_for(Customer).add(customer)
    return customer
