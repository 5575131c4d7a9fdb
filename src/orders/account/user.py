"""User aggregate: the shopper an order is placed for."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from orders.domain import orders


@orders.aggregate
class User:
    """A registered shopper. Orders reference users by identity and keep a
    snapshot of the name and email that were current when the order was placed.
    """

    name = String(required=True, max_length=150)
    email = String(required=True, max_length=254)
    created_at = DateTime()

    @invariant.post
    def email_must_have_a_single_at_sign(self):
        if self.email and (self.email.count("@") != 1 or " " in self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def register(cls, name, email):
        return cls(name=name, email=email, created_at=datetime.now(UTC))
