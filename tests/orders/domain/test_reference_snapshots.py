"""Tests for the snapshot value objects embedded in an Order."""

from orders.account.address import Address
from orders.account.payment_method import PaymentMethod
from orders.order.order import PaymentMethodSnapshot, ShippingAddress


class TestShippingAddress:
    def test_from_address_copies_lines_and_id(self):
        address = Address(
            street="12 Analytical Way",
            city="London",
            state="Greater London",
            postal_code="NW1 6XE",
            country="UK",
        )
        snapshot = ShippingAddress.from_address(address)
        assert snapshot.address_id == str(address.id)
        assert snapshot.street == "12 Analytical Way"
        assert snapshot.city == "London"
        assert snapshot.postal_code == "NW1 6XE"
        assert snapshot.country == "UK"

    def test_from_payload_keeps_supplied_values(self):
        snapshot = ShippingAddress.from_payload({"id": "addr-x", "street": "1 Unknown Rd"})
        assert snapshot.address_id == "addr-x"
        assert snapshot.street == "1 Unknown Rd"
        assert snapshot.city is None

    def test_from_payload_stores_numeric_id_as_text(self):
        assert ShippingAddress.from_payload({"id": 42}).address_id == "42"

    def test_from_payload_none(self):
        assert ShippingAddress.from_payload(None) is None


class TestPaymentMethodSnapshot:
    def test_from_payment_method_copies_fields_and_id(self):
        payment_method = PaymentMethod(method_type="card", provider="Visa", last_four="4242")
        snapshot = PaymentMethodSnapshot.from_payment_method(payment_method)
        assert snapshot.payment_method_id == str(payment_method.id)
        assert snapshot.method_type == "card"
        assert snapshot.provider == "Visa"
        assert snapshot.last_four == "4242"

    def test_from_payload_keeps_supplied_values(self):
        snapshot = PaymentMethodSnapshot.from_payload({"id": "pm-x", "provider": "PayPal"})
        assert snapshot.payment_method_id == "pm-x"
        assert snapshot.provider == "PayPal"

    def test_from_payload_stores_numeric_id_as_text(self):
        assert PaymentMethodSnapshot.from_payload({"id": 7}).payment_method_id == "7"

    def test_from_payload_none(self):
        assert PaymentMethodSnapshot.from_payload(None) is None
