"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
and match the field names expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

PAYMENT_METHOD_TYPES = ["card", "paypal", "bank_transfer", "cash_on_delivery"]
ORDER_STATUSES = ["processing", "shipped", "delivered"]

# ---------- Account lookup data ----------


def valid_email() -> str:
    """Generate emails that pass the User email check: exactly one @, no spaces."""
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def user_data() -> dict:
    """Generate RegisterUserRequest payload."""
    return {"name": fake.name()[:150], "email": valid_email()}


def address_data() -> dict:
    """Generate AddAddressRequest payload matching schema field names."""
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "postal_code": fake.zipcode()[:20],
        "country": "US",
    }


def payment_method_data() -> dict:
    """Generate AddPaymentMethodRequest payload."""
    method_type = random.choice(PAYMENT_METHOD_TYPES)
    payload = {"method_type": method_type}
    if method_type == "card":
        payload["provider"] = random.choice(["Visa", "Mastercard", "Amex"])
        payload["last_four"] = fake.numerify("####")
    return payload


# ---------- Orders ----------


def order_detail(product_id: str | None = None) -> dict:
    return {
        "product_id": product_id or f"prod-{uuid.uuid4().hex[:8]}",
        "product": fake.word().capitalize()[:255],
        "quantity": random.randint(1, 5),
        "price": round(random.uniform(5.0, 150.0), 2),
    }


def order_data(
    user_id: str,
    address_id: str | None = None,
    payment_method_id: str | None = None,
    num_details: int = 2,
) -> dict:
    """Generate CreateOrderRequest payload referencing stored lookup data."""
    details = [order_detail() for _ in range(num_details)]
    return {
        "user": {"id": user_id},
        "shipping_address": {"id": address_id} if address_id else None,
        "payment_method": {"id": payment_method_id} if payment_method_id else None,
        "order_details": details,
        "total_amount": round(sum(d["quantity"] * d["price"] for d in details), 2),
    }


def order_update_data(
    status: str | None = None,
    address_id: str | None = None,
    payment_method_id: str | None = None,
    total_amount: float | None = None,
) -> dict:
    """Generate UpdateOrderRequest payload.

    Every mutable field is sent, since omitted fields overwrite the stored
    value with null.
    """
    return {
        "shipping_number": f"SN-{uuid.uuid4().hex[:10].upper()}",
        "delivery_date": fake.future_datetime(end_date="+14d").isoformat(),
        "total_amount": total_amount,
        "status": status or random.choice(ORDER_STATUSES),
        "shipping_address": {"id": address_id} if address_id else None,
        "payment_method": {"id": payment_method_id} if payment_method_id else None,
    }
