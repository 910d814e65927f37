"""Application tests for customer registration and address commands."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError
from storefront.config import DEFAULT_ADDRESS, DEFAULT_WALLET_MONEY
from storefront.customer.address import SetAddress
from storefront.customer.customer import Customer
from storefront.customer.registration import RegisterCustomer
from storefront.errors import USER_NOT_FOUND, CartError


class TestRegisterCustomerCommand:
    def test_register_persists_with_defaults(self):
        customer_id = current_domain.process(RegisterCustomer(email="jane@example.com"), asynchronous=False)

        customer = current_domain.repository_for(Customer).get(customer_id)
        assert customer.email == "jane@example.com"
        assert customer.wallet_money == DEFAULT_WALLET_MONEY
        assert customer.address == DEFAULT_ADDRESS

    def test_register_with_opening_balance(self):
        customer_id = current_domain.process(
            RegisterCustomer(email="jane@example.com", wallet_money=42.0),
            asynchronous=False,
        )
        assert current_domain.repository_for(Customer).get(customer_id).wallet_money == 42.0

    def test_email_must_be_unique(self):
        current_domain.process(RegisterCustomer(email="jane@example.com"), asynchronous=False)
        with pytest.raises(ValidationError):
            current_domain.process(RegisterCustomer(email="jane@example.com"), asynchronous=False)


class TestSetAddressCommand:
    def test_set_address_persists(self, customer):
        current_domain.process(SetAddress(email=customer.email, address="7 Oak Avenue"), asynchronous=False)
        assert current_domain.repository_for(Customer).get(customer.id).address == "7 Oak Avenue"

    def test_unknown_user(self):
        with pytest.raises(CartError) as exc:
            current_domain.process(SetAddress(email="ghost@example.com", address="7 Oak Avenue"), asynchronous=False)
        assert exc.value.status_code == 404
        assert exc.value.message == USER_NOT_FOUND
