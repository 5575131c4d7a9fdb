"""Orders load test scenarios.

Stateful SequentialTaskSet journeys covering the full order lifecycle
against stored lookup data, and a read-heavy browsing journey over a
user's order history.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    address_data,
    order_data,
    order_update_data,
    payment_method_data,
    user_data,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import AccountState, OrderState


class OrderLifecycleJourney(SequentialTaskSet):
    """Register User -> Add Address -> Add Payment Method -> Create Order ->
    Get -> Ship -> List User Orders -> Delete.

    The happy path: one order from creation to removal.
    Generates events: OrderCreated, OrderUpdated.
    """

    def on_start(self):
        self.state = OrderState()

    @task
    def register_user(self):
        with self.client.post(
            "/users",
            json=user_data(),
            catch_response=True,
            name="POST /users",
        ) as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["user_id"]
            else:
                resp.failure(f"Register user failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def add_address(self):
        with self.client.post(
            f"/users/{self.state.user_id}/addresses",
            json=address_data(),
            catch_response=True,
            name="POST /users/{id}/addresses",
        ) as resp:
            if resp.status_code == 201:
                self.state.address_id = resp.json()["address_id"]
            else:
                resp.failure(f"Add address failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def add_payment_method(self):
        with self.client.post(
            f"/users/{self.state.user_id}/payment-methods",
            json=payment_method_data(),
            catch_response=True,
            name="POST /users/{id}/payment-methods",
        ) as resp:
            if resp.status_code == 201:
                self.state.payment_method_id = resp.json()["payment_method_id"]
            else:
                resp.failure(f"Add payment method failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def create_order(self):
        payload = order_data(self.state.user_id, self.state.address_id, self.state.payment_method_id)
        with self.client.post(
            "/orders",
            json=payload,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.order_id = body["id"]
                self.state.total_amount = body["total_amount"]
            else:
                resp.failure(f"Create order failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def get_order(self):
        with self.client.get(
            f"/orders/{self.state.order_id}",
            catch_response=True,
            name="GET /orders/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def ship_order(self):
        payload = order_update_data(
            status="shipped",
            address_id=self.state.address_id,
            payment_method_id=self.state.payment_method_id,
            total_amount=self.state.total_amount,
        )
        with self.client.put(
            f"/orders/{self.state.order_id}",
            json=payload,
            catch_response=True,
            name="PUT /orders/{id}",
        ) as resp:
            if resp.status_code == 200:
                self.state.current_status = "shipped"
            else:
                resp.failure(f"Ship failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def list_user_orders(self):
        with self.client.get(
            f"/orders/user/{self.state.user_id}",
            catch_response=True,
            name="GET /orders/user/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List user orders failed: {resp.status_code} - {extract_error_detail(resp)}")
            elif self.state.order_id not in [order["id"] for order in resp.json()]:
                resp.failure("Created order missing from user order list")

    @task
    def delete_order(self):
        with self.client.delete(
            f"/orders/{self.state.order_id}",
            catch_response=True,
            name="DELETE /orders/{id}",
        ) as resp:
            if resp.status_code != 204:
                resp.failure(f"Delete order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class OrderHistoryJourney(SequentialTaskSet):
    """Register User -> Create 3 Orders -> List User Orders -> List All Orders.

    Models a returning customer browsing their history. Leaves the orders
    in place so list endpoints see a growing data set.
    """

    def on_start(self):
        self.state = AccountState()
        self.order_ids = []

    @task
    def register_user(self):
        with self.client.post(
            "/users",
            json=user_data(),
            catch_response=True,
            name="POST /users",
        ) as resp:
            if resp.status_code == 201:
                self.state.user_id = resp.json()["user_id"]
            else:
                resp.failure(f"Register user failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def create_orders(self):
        for _ in range(3):
            with self.client.post(
                "/orders",
                json=order_data(self.state.user_id, num_details=1),
                catch_response=True,
                name="POST /orders",
            ) as resp:
                if resp.status_code == 201:
                    self.order_ids.append(resp.json()["id"])
                else:
                    resp.failure(f"Create order failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def list_user_orders(self):
        with self.client.get(
            f"/orders/user/{self.state.user_id}",
            catch_response=True,
            name="GET /orders/user/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List user orders failed: {resp.status_code} - {extract_error_detail(resp)}")
            elif len(resp.json()) != len(self.order_ids):
                resp.failure(f"Expected {len(self.order_ids)} orders, got {len(resp.json())}")

    @task
    def list_all_orders(self):
        with self.client.get(
            "/orders",
            catch_response=True,
            name="GET /orders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List orders failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class OrdersUser(HttpUser):
    """Locust user simulating Orders interactions.

    Weighted distribution:
    - 75% Full order lifecycle
    - 25% Order history browsing
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        OrderLifecycleJourney: 3,
        OrderHistoryJourney: 1,
    }
