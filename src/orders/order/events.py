"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from orders.domain import orders


@orders.event(part_of="Order")
class OrderCreated:
    """A new order was recorded for a user, in pending status."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    status = String(required=True)
    total_amount = Float()
    detail_count = Integer(default=0)
    created_at = DateTime(required=True)


@orders.event(part_of="Order")
class OrderUpdated:
    """Shipping, amount or status fields of an order were overwritten."""

    __version__ = 1

    order_id = Identifier(required=True)
    status = String()
    shipping_number = String()
    total_amount = Float()
    updated_at = DateTime(required=True)
