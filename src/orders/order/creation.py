"""Order creation: command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String, Text
from protean.utils.globals import current_domain

from orders.account.address import Address
from orders.account.payment_method import PaymentMethod
from orders.account.user import User
from orders.domain import orders
from orders.order.order import Order, OrderStatus, PaymentMethodSnapshot, ShippingAddress
from orders.order.references import find, load_payload, resolve_or_keep

logger = structlog.get_logger(__name__)


@orders.command(part_of="Order")
class CreateOrder:
    user = Text()  # JSON: {"id": ...}
    shipping_address = Text()  # JSON: address stub, may be null
    payment_method = Text()  # JSON: payment method stub, may be null
    order_details = Text()  # JSON: list of detail dicts
    shipping_number = String(max_length=100)
    delivery_date = DateTime()
    total_amount = Float()
    status = String(choices=OrderStatus)  # Ignored, orders always start pending


@orders.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        user_stub = load_payload(command.user)
        if not user_stub or user_stub.get("id") is None:
            raise ValidationError({"user": ["An order requires a user with an id"]})

        user = find(User, user_stub["id"])
        if user is None:
            logger.warning("Order refused for unknown user", user_id=str(user_stub["id"]))
            raise ValidationError({"user": [f"User {user_stub['id']} does not exist"]})

        address_stub = load_payload(command.shipping_address)
        shipping_address = resolve_or_keep(
            address_stub,
            Address,
            ShippingAddress.from_address,
            fallback=ShippingAddress.from_payload(address_stub),
        )

        payment_stub = load_payload(command.payment_method)
        payment_method = resolve_or_keep(
            payment_stub,
            PaymentMethod,
            PaymentMethodSnapshot.from_payment_method,
            fallback=PaymentMethodSnapshot.from_payload(payment_stub),
        )

        order = Order.create(
            user=user,
            shipping_address=shipping_address,
            payment_method=payment_method,
            details_data=load_payload(command.order_details) or [],
            shipping_number=command.shipping_number,
            delivery_date=command.delivery_date,
            total_amount=command.total_amount,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order created",
            order_id=str(order.id),
            user_id=str(user.id),
            detail_count=len(order.order_details),
        )
        return str(order.id)
