import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def orders_bed():
    from orders.domain import orders

    bed = DomainFixture(orders)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(orders_bed):
    """Push the domain context for each test and clear all stores afterwards."""
    with orders_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()


# ---------------------------------------------------------------------------
# Lookup data
# ---------------------------------------------------------------------------
@pytest.fixture()
def user_id():
    from orders.account.registration import RegisterUser
    from protean import current_domain

    return current_domain.process(
        RegisterUser(name="Ada Lovelace", email="ada@example.com"),
        asynchronous=False,
    )


@pytest.fixture()
def other_user_id():
    from orders.account.registration import RegisterUser
    from protean import current_domain

    return current_domain.process(
        RegisterUser(name="Grace Hopper", email="grace@example.com"),
        asynchronous=False,
    )


@pytest.fixture()
def address_id(user_id):
    from orders.account.registration import AddAddress
    from protean import current_domain

    return current_domain.process(
        AddAddress(
            user_id=user_id,
            street="12 Analytical Way",
            city="London",
            state="Greater London",
            postal_code="NW1 6XE",
            country="UK",
        ),
        asynchronous=False,
    )


@pytest.fixture()
def second_address_id(user_id):
    from orders.account.registration import AddAddress
    from protean import current_domain

    return current_domain.process(
        AddAddress(
            user_id=user_id,
            street="1 Engine Row",
            city="Manchester",
            postal_code="M1 1AA",
            country="UK",
        ),
        asynchronous=False,
    )


@pytest.fixture()
def payment_method_id(user_id):
    from orders.account.registration import AddPaymentMethod
    from protean import current_domain

    return current_domain.process(
        AddPaymentMethod(
            user_id=user_id,
            method_type="card",
            provider="Visa",
            last_four="4242",
        ),
        asynchronous=False,
    )
