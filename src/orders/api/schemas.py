"""Pydantic request/response schemas for the Orders API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Reference stubs
# ---------------------------------------------------------------------------
class ReferenceSchema(BaseModel):
    """A reference to a stored entity. Only ``id`` is used to resolve it."""

    id: str | int | None = None


class UserReference(ReferenceSchema):
    pass


class AddressReference(ReferenceSchema):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class PaymentMethodReference(ReferenceSchema):
    method_type: str | None = None
    provider: str | None = None
    last_four: str | None = None


class OrderDetailSchema(BaseModel):
    product_id: str | None = None
    product: str | None = None
    quantity: int | None = None
    price: float | None = None


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    user: UserReference | None = None
    shipping_address: AddressReference | None = None
    payment_method: PaymentMethodReference | None = None
    order_details: list[OrderDetailSchema] = Field(default_factory=list)
    shipping_number: str | None = None
    delivery_date: datetime | None = None
    total_amount: float | None = None
    status: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user": {"id": "a3f1c2d4-0000-4000-8000-000000000005"},
                    "shipping_address": {"id": "b7e2d3c4-0000-4000-8000-000000000001"},
                    "payment_method": None,
                    "order_details": [{"product": "Desk Lamp", "quantity": 2, "price": 19.5}],
                    "total_amount": 39.0,
                }
            ]
        }
    }


class UpdateOrderRequest(BaseModel):
    """Full replacement of the mutable order fields.

    Omitted fields are sent to the domain as null and overwrite the stored
    value, the same as an explicit null.
    """

    shipping_number: str | None = None
    delivery_date: datetime | None = None
    total_amount: float | None = None
    status: str | None = None
    shipping_address: AddressReference | None = None
    payment_method: PaymentMethodReference | None = None


# ---------------------------------------------------------------------------
# Account Request Schemas
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    name: str
    email: str


class AddAddressRequest(BaseModel):
    street: str
    city: str
    state: str | None = None
    postal_code: str
    country: str


class AddPaymentMethodRequest(BaseModel):
    method_type: str
    provider: str | None = None
    last_four: str | None = Field(default=None, max_length=4)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class BuyerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str | None = None
    email: str | None = None


class ShippingAddressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    address_id: str | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class PaymentMethodResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    payment_method_id: str | None = None
    method_type: str | None = None
    provider: str | None = None
    last_four: str | None = None


class OrderDetailResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    order_id: str | None = None
    product_id: str | None = None
    product: str | None = None
    quantity: int | None = None
    price: float | None = None


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    user: BuyerResponse | None = None
    shipping_address: ShippingAddressResponse | None = None
    payment_method: PaymentMethodResponse | None = None
    order_details: list[OrderDetailResponse] = Field(default_factory=list)
    status: str | None = None
    shipping_number: str | None = None
    delivery_date: datetime | None = None
    total_amount: float | None = None
    order_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserIdResponse(BaseModel):
    user_id: str


class AddressIdResponse(BaseModel):
    address_id: str


class PaymentMethodIdResponse(BaseModel):
    payment_method_id: str
