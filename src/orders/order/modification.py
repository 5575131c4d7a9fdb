"""Order modification: command and handler.

Shipping number, delivery date, total amount and status are always
overwritten, so a client has to resend values it wants to keep. The user
is never touched.

Shipping address and payment method follow their own rule:
- ``null``/absent clears the association,
- a stub with an id that resolves replaces it,
- a stub with an unknown id, or with no id at all, keeps the current value.
"""

import structlog
from protean import handle
from protean.fields import DateTime, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from orders.account.address import Address
from orders.account.payment_method import PaymentMethod
from orders.domain import orders
from orders.order.order import Order, OrderStatus, PaymentMethodSnapshot, ShippingAddress
from orders.order.references import load_payload, resolve_or_keep

logger = structlog.get_logger(__name__)


@orders.command(part_of="Order")
class UpdateOrder:
    order_id = Identifier(required=True)
    shipping_number = String(max_length=100)
    delivery_date = DateTime()
    total_amount = Float()
    status = String(choices=OrderStatus)
    shipping_address = Text()  # JSON: address stub, null clears
    payment_method = Text()  # JSON: payment method stub, null clears


@orders.command_handler(part_of=Order)
class UpdateOrderHandler:
    @handle(UpdateOrder)
    def update_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        shipping_address = resolve_or_keep(
            load_payload(command.shipping_address),
            Address,
            ShippingAddress.from_address,
            fallback=order.shipping_address,
        )
        payment_method = resolve_or_keep(
            load_payload(command.payment_method),
            PaymentMethod,
            PaymentMethodSnapshot.from_payment_method,
            fallback=order.payment_method,
        )

        order.amend(
            shipping_number=command.shipping_number,
            delivery_date=command.delivery_date,
            total_amount=command.total_amount,
            status=command.status,
            shipping_address=shipping_address,
            payment_method=payment_method,
        )
        repo.add(order)

        logger.info("Order updated", order_id=str(order.id), status=order.status)
        return str(order.id)
