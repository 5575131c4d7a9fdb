"""Address aggregate: a stored shipping address."""

from protean.fields import Identifier, String

from orders.domain import orders


@orders.aggregate
class Address:
    """A shipping address kept in its own store.

    Orders resolve addresses by id and copy the address lines into their
    own ShippingAddress snapshot.
    """

    user_id = Identifier()
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
