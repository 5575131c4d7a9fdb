"""Order aggregate with its OrderDetail line entities.

An Order belongs to exactly one user for its whole life. The user, the
shipping address and the payment method are separate aggregates; the order
keeps their identifiers together with a snapshot of the fields that were
current when they were resolved.

Order details are owned by the order: they are stored, loaded and deleted
together with it and are never managed on their own.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from orders.domain import orders
from orders.order.events import OrderCreated, OrderUpdated


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


def _stub_id(data):
    """Client ids may arrive as numbers; snapshots store them as text."""
    identifier = data.get("id")
    return str(identifier) if identifier is not None else None


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@orders.value_object(part_of="Order")
class Buyer:
    """Name and email of the ordering user at the time the order was created."""

    name = String(max_length=150)
    email = String(max_length=254)

    @classmethod
    def from_user(cls, user):
        return cls(name=user.name, email=user.email)


@orders.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships to.

    ``address_id`` points at the stored Address the lines were copied from.
    A snapshot built from a client payload that did not resolve carries
    whatever the client sent.
    """

    address_id = String(max_length=255)
    street = String(max_length=255)
    city = String(max_length=100)
    state = String(max_length=100)
    postal_code = String(max_length=20)
    country = String(max_length=100)

    @classmethod
    def from_address(cls, address):
        return cls(
            address_id=str(address.id),
            street=address.street,
            city=address.city,
            state=address.state,
            postal_code=address.postal_code,
            country=address.country,
        )

    @classmethod
    def from_payload(cls, data):
        if data is None:
            return None
        return cls(
            address_id=_stub_id(data),
            street=data.get("street"),
            city=data.get("city"),
            state=data.get("state"),
            postal_code=data.get("postal_code"),
            country=data.get("country"),
        )


@orders.value_object(part_of="Order")
class PaymentMethodSnapshot:
    """The payment method recorded on an order. No payment is processed."""

    payment_method_id = String(max_length=255)
    method_type = String(max_length=50)
    provider = String(max_length=100)
    last_four = String(max_length=4)

    @classmethod
    def from_payment_method(cls, payment_method):
        return cls(
            payment_method_id=str(payment_method.id),
            method_type=payment_method.method_type,
            provider=payment_method.provider,
            last_four=payment_method.last_four,
        )

    @classmethod
    def from_payload(cls, data):
        if data is None:
            return None
        return cls(
            payment_method_id=_stub_id(data),
            method_type=data.get("method_type"),
            provider=data.get("provider"),
            last_four=data.get("last_four"),
        )


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@orders.entity(part_of="Order")
class OrderDetail:
    """A line of an order. Product, quantity and price are recorded as given."""

    product_id = Identifier()
    product = String(max_length=255)
    quantity = Integer()
    price = Float()

    @classmethod
    def from_payload(cls, data):
        return cls(
            product_id=data.get("product_id"),
            product=data.get("product"),
            quantity=data.get("quantity"),
            price=data.get("price"),
        )


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@orders.aggregate
class Order:
    user_id = Identifier(required=True)
    user = ValueObject(Buyer)
    shipping_address = ValueObject(ShippingAddress)
    payment_method = ValueObject(PaymentMethodSnapshot)
    order_details = HasMany(OrderDetail)
    # No default: create sets pending, update may overwrite with any value.
    status = String(choices=OrderStatus)
    shipping_number = String(max_length=100)
    delivery_date = DateTime()
    total_amount = Float()
    order_date = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(
        cls,
        user,
        shipping_address=None,
        payment_method=None,
        details_data=None,
        shipping_number=None,
        delivery_date=None,
        total_amount=None,
    ):
        """Create a pending order for an already resolved ``user``.

        Args:
            user: The stored User the order belongs to.
            shipping_address: ShippingAddress snapshot, or None.
            payment_method: PaymentMethodSnapshot, or None.
            details_data: List of dicts with product_id, product, quantity, price.
        """
        order = cls(
            user_id=user.id,
            user=Buyer.from_user(user),
            shipping_address=shipping_address,
            payment_method=payment_method,
            shipping_number=shipping_number,
            delivery_date=delivery_date,
            total_amount=total_amount,
            order_date=datetime.now(UTC),
            created_at=datetime.now(UTC),
            updated_at=datetime.now(UTC),
            status=OrderStatus.PENDING.value,
        )

        # Adding through the association links each detail back to this order
        for data in details_data or []:
            order.add_order_details(OrderDetail.from_payload(data))

        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                user_id=str(order.user_id),
                status=order.status,
                total_amount=order.total_amount,
                detail_count=len(order.order_details),
                created_at=order.created_at,
            )
        )
        return order

    def amend(
        self,
        shipping_number,
        delivery_date,
        total_amount,
        status,
        shipping_address,
        payment_method,
    ):
        """Overwrite the mutable fields of the order.

        Every argument replaces the current value, None included. The user
        is never changed.
        """
        self.shipping_number = shipping_number
        self.delivery_date = delivery_date
        self.total_amount = total_amount
        self.status = status
        self.updated_at = datetime.now(UTC)
        self.shipping_address = shipping_address
        self.payment_method = payment_method

        self.raise_(
            OrderUpdated(
                order_id=str(self.id),
                status=self.status,
                shipping_number=self.shipping_number,
                total_amount=self.total_amount,
                updated_at=self.updated_at,
            )
        )
