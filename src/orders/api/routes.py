"""FastAPI routes for the Orders domain: orders and account lookup data.

Thin adapters that translate HTTP requests into domain commands and
repository reads. No business logic lives here.
"""

import json

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from orders.account.registration import AddAddress, AddPaymentMethod, RegisterUser
from orders.api.schemas import (
    AddAddressRequest,
    AddPaymentMethodRequest,
    AddressIdResponse,
    CreateOrderRequest,
    OrderResponse,
    PaymentMethodIdResponse,
    RegisterUserRequest,
    UpdateOrderRequest,
    UserIdResponse,
)
from orders.order.creation import CreateOrder
from orders.order.deletion import DeleteOrder
from orders.order.modification import UpdateOrder
from orders.order.order import Order


def _dump(reference):
    return json.dumps(reference.model_dump()) if reference is not None else None


def _order_response(order_id) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse.model_validate(order)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=list[OrderResponse])
async def list_orders() -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).find_all()
    return [OrderResponse.model_validate(order) for order in orders]


@order_router.get("/user/{user_id}", response_model=list[OrderResponse])
async def list_user_orders(user_id: str) -> list[OrderResponse]:
    orders = current_domain.repository_for(Order).find_by_user(user_id)
    return [OrderResponse.model_validate(order) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    return _order_response(order_id)


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    command = CreateOrder(
        user=_dump(body.user),
        shipping_address=_dump(body.shipping_address),
        payment_method=_dump(body.payment_method),
        order_details=json.dumps([detail.model_dump() for detail in body.order_details]),
        shipping_number=body.shipping_number,
        delivery_date=body.delivery_date,
        total_amount=body.total_amount,
        status=body.status,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


@order_router.put("/{order_id}", response_model=OrderResponse)
async def update_order(order_id: str, body: UpdateOrderRequest) -> OrderResponse:
    # An unknown order is a 404 even when the body would fail validation
    current_domain.repository_for(Order).get(order_id)

    command = UpdateOrder(
        order_id=order_id,
        shipping_number=body.shipping_number,
        delivery_date=body.delivery_date,
        total_amount=body.total_amount,
        status=body.status,
        shipping_address=_dump(body.shipping_address),
        payment_method=_dump(body.payment_method),
    )
    current_domain.process(command, asynchronous=False)
    return _order_response(order_id)


@order_router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: str) -> Response:
    current_domain.process(DeleteOrder(order_id=order_id), asynchronous=False)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Account Router
# ---------------------------------------------------------------------------
account_router = APIRouter(prefix="/users", tags=["users"])


@account_router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(name=body.name, email=body.email)
    user_id = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=user_id)


@account_router.post("/{user_id}/addresses", status_code=201, response_model=AddressIdResponse)
async def add_address(user_id: str, body: AddAddressRequest) -> AddressIdResponse:
    command = AddAddress(
        user_id=user_id,
        street=body.street,
        city=body.city,
        state=body.state,
        postal_code=body.postal_code,
        country=body.country,
    )
    address_id = current_domain.process(command, asynchronous=False)
    return AddressIdResponse(address_id=address_id)


@account_router.post("/{user_id}/payment-methods", status_code=201, response_model=PaymentMethodIdResponse)
async def add_payment_method(user_id: str, body: AddPaymentMethodRequest) -> PaymentMethodIdResponse:
    command = AddPaymentMethod(
        user_id=user_id,
        method_type=body.method_type,
        provider=body.provider,
        last_four=body.last_four,
    )
    payment_method_id = current_domain.process(command, asynchronous=False)
    return PaymentMethodIdResponse(payment_method_id=payment_method_id)
