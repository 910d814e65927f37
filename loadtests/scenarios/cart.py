"""Cart and checkout load test scenarios.

Stateful SequentialTaskSet journeys over the Storefront API. Steps execute in
order; each depends on the previous step succeeding. Product ids come from
``LOADTEST_PRODUCT_IDS`` (see ``python src/manage.py seed-products``).
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    address_data,
    cart_item_data,
    catalogue_product_ids,
    customer_data,
    quantity_update_data,
)
from loadtests.helpers.state import ShopperState


class _ShopperJourney(SequentialTaskSet):
    """Shared registration and add-to-cart steps."""

    def on_start(self):
        self.state = ShopperState()
        self.product_ids = catalogue_product_ids()
        if not self.product_ids:
            raise RuntimeError("LOADTEST_PRODUCT_IDS is empty; seed products first")

    def register(self):
        payload = customer_data()
        with self.client.post(
            "/customers",
            json=payload,
            catch_response=True,
            name="POST /customers",
        ) as resp:
            if resp.status_code == 201:
                self.state.email = payload["email"]
                self.state.wallet_money = payload["wallet_money"]
            else:
                resp.failure(f"Register customer failed: {resp.status_code}")
                self.interrupt()

    def add_random_product(self):
        remaining = [pid for pid in self.product_ids if pid not in self.state.cart_product_ids]
        if not remaining:
            return
        product_id = random.choice(remaining)
        with self.client.post(
            f"/carts/{self.state.email}/items",
            json=cart_item_data(product_id),
            catch_response=True,
            name="POST /carts/{email}/items",
        ) as resp:
            if resp.status_code == 201:
                self.state.cart_product_ids.append(product_id)
            else:
                resp.failure(f"Add to cart failed: {resp.status_code}")


class CartCheckoutJourney(_ShopperJourney):
    """Register -> Set Address -> Add x2 -> Update Quantity -> View -> Checkout.

    Models a shopper who fills a cart and pays from their wallet.
    Generates 7 events: CustomerRegistered, AddressSet, CartCreated,
    CartItemAdded (x2), CartItemQuantityUpdated, WalletDebited,
    CartCheckedOut.
    """

    @task
    def register_customer(self):
        self.register()

    @task
    def set_address(self):
        with self.client.put(
            f"/customers/{self.state.email}/address",
            json=address_data(),
            catch_response=True,
            name="PUT /customers/{email}/address",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Set address failed: {resp.status_code}")
                self.interrupt()

    @task
    def add_first_product(self):
        self.add_random_product()

    @task
    def add_second_product(self):
        self.add_random_product()

    @task
    def update_quantity(self):
        if not self.state.cart_product_ids:
            return
        product_id = self.state.cart_product_ids[0]
        with self.client.put(
            f"/carts/{self.state.email}/items/{product_id}",
            json=quantity_update_data(),
            catch_response=True,
            name="PUT /carts/{email}/items/{product_id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update quantity failed: {resp.status_code}")

    @task
    def view_cart(self):
        with self.client.get(
            f"/carts/{self.state.email}",
            catch_response=True,
            name="GET /carts/{email}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"View cart failed: {resp.status_code}")

    @task
    def checkout(self):
        with self.client.put(
            f"/carts/{self.state.email}/checkout",
            catch_response=True,
            name="PUT /carts/{email}/checkout",
        ) as resp:
            if resp.status_code == 204:
                self.state.checked_out = True
            else:
                resp.failure(f"Checkout failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class CartBrowsingJourney(_ShopperJourney):
    """Register -> Add -> Remove via zero quantity -> Add -> Delete.

    Models a shopper who changes their mind and leaves without paying.
    """

    @task
    def register_customer(self):
        self.register()

    @task
    def add_product(self):
        self.add_random_product()

    @task
    def zero_quantity(self):
        if not self.state.cart_product_ids:
            return
        product_id = self.state.cart_product_ids.pop()
        with self.client.put(
            f"/carts/{self.state.email}/items/{product_id}",
            json={"quantity": 0},
            catch_response=True,
            name="PUT /carts/{email}/items/{product_id}",
        ) as resp:
            if resp.status_code != 204:
                resp.failure(f"Zero quantity failed: {resp.status_code}")

    @task
    def add_again(self):
        self.add_random_product()

    @task
    def delete_product(self):
        if not self.state.cart_product_ids:
            return
        product_id = self.state.cart_product_ids.pop()
        with self.client.delete(
            f"/carts/{self.state.email}/items/{product_id}",
            catch_response=True,
            name="DELETE /carts/{email}/items/{product_id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    """Shoppers who mostly pay for what they put in the cart."""

    wait_time = between(0.5, 2.0)
    tasks = {
        CartCheckoutJourney: 3,
        CartBrowsingJourney: 1,
    }


class BrowsingShopperUser(HttpUser):
    """Shoppers who never check out."""

    wait_time = between(1.0, 3.0)
    tasks = [CartBrowsingJourney]
