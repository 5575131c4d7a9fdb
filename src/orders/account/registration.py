"""Account registration: commands and handlers for users, addresses and payment methods."""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from orders.account.address import Address
from orders.account.payment_method import PaymentMethod, PaymentMethodType
from orders.account.user import User
from orders.domain import orders

logger = structlog.get_logger(__name__)


@orders.command(part_of="User")
class RegisterUser:
    """Register a new shopper."""

    name = String(required=True, max_length=150)
    email = String(required=True, max_length=254)


@orders.command(part_of="Address")
class AddAddress:
    """Store a shipping address for an existing user."""

    user_id = Identifier(required=True)
    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@orders.command(part_of="PaymentMethod")
class AddPaymentMethod:
    """Store a payment method for an existing user."""

    user_id = Identifier(required=True)
    method_type = String(required=True, choices=PaymentMethodType)
    provider = String(max_length=100)
    last_four = String(max_length=4)


@orders.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        user = User.register(name=command.name, email=command.email)
        current_domain.repository_for(User).add(user)
        logger.info("User registered", user_id=str(user.id))
        return str(user.id)


@orders.command_handler(part_of=Address)
class AddAddressHandler:
    @handle(AddAddress)
    def add_address(self, command):
        # Raises ObjectNotFoundError for an unknown user
        current_domain.repository_for(User).get(command.user_id)

        address = Address(
            user_id=command.user_id,
            street=command.street,
            city=command.city,
            state=command.state,
            postal_code=command.postal_code,
            country=command.country,
        )
        current_domain.repository_for(Address).add(address)
        logger.info("Address added", user_id=str(command.user_id), address_id=str(address.id))
        return str(address.id)


@orders.command_handler(part_of=PaymentMethod)
class AddPaymentMethodHandler:
    @handle(AddPaymentMethod)
    def add_payment_method(self, command):
        current_domain.repository_for(User).get(command.user_id)

        payment_method = PaymentMethod(
            user_id=command.user_id,
            method_type=command.method_type,
            provider=command.provider,
            last_four=command.last_four,
        )
        current_domain.repository_for(PaymentMethod).add(payment_method)
        logger.info(
            "Payment method added",
            user_id=str(command.user_id),
            payment_method_id=str(payment_method.id),
        )
        return str(payment_method.id)
