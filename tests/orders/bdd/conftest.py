"""Shared BDD fixtures and step definitions for the Orders domain."""

import json

import pytest
from orders.account.registration import AddAddress, AddPaymentMethod, RegisterUser
from orders.order.creation import CreateOrder
from orders.order.order import Order
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def account():
    """Identifiers of the user and lookup data registered by Background steps."""
    return {}


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def create_order(account):
    """Create an order for the registered user with the given detail lines."""

    def _create(details):
        return current_domain.process(
            CreateOrder(
                user=json.dumps({"id": account["user_id"]}),
                shipping_address=json.dumps({"id": account.get("address_id")}),
                payment_method=json.dumps({"id": account.get("payment_method_id")}),
                order_details=json.dumps(details),
            ),
            asynchronous=False,
        )

    return _create


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a registered user "{name}" with email "{email}"'))
def _(account, name, email):
    account["user_id"] = current_domain.process(RegisterUser(name=name, email=email), asynchronous=False)


@given(parsers.cfparse('the user has an address in "{city}"'))
def _(account, city):
    account["address_id"] = current_domain.process(
        AddAddress(
            user_id=account["user_id"],
            street="12 Analytical Way",
            city=city,
            postal_code="NW1 6XE",
            country="UK",
        ),
        asynchronous=False,
    )


@given(parsers.cfparse('the user has a "{method_type}" payment method ending in "{last_four}"'))
def _(account, method_type, last_four):
    account["payment_method_id"] = current_domain.process(
        AddPaymentMethod(user_id=account["user_id"], method_type=method_type, last_four=last_four),
        asynchronous=False,
    )


@given(parsers.cfparse('the user created an order for {quantity:d} "{product}"'), target_fixture="order_id")
def _(create_order, quantity, product):
    return create_order([{"product": product, "quantity": quantity}])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def _(order_id, status):
    assert current_domain.repository_for(Order).get(order_id).status == status


@then(parsers.cfparse('the order is rejected with an error on "{field}"'))
def _(error, field):
    assert error["exc"] is not None
    assert field in error["exc"].messages


@then("no orders are stored")
def _():
    assert current_domain.repository_for(Order).find_all() == []
