"""PaymentMethod aggregate: a stored means of payment."""

from enum import Enum

from protean.fields import Identifier, String

from orders.domain import orders


class PaymentMethodType(Enum):
    CARD = "card"
    PAYPAL = "paypal"
    BANK_TRANSFER = "bank_transfer"
    CASH_ON_DELIVERY = "cash_on_delivery"


@orders.aggregate
class PaymentMethod:
    """A payment method on file. Orders only record a reference to it;
    no payment is ever taken here.
    """

    user_id = Identifier()
    method_type = String(required=True, choices=PaymentMethodType)
    provider = String(max_length=100)
    last_four = String(max_length=4)
