"""Order deletion: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from orders.domain import orders
from orders.order.order import Order

logger = structlog.get_logger(__name__)


@orders.command(part_of="Order")
class DeleteOrder:
    """Remove an order together with its details."""

    order_id = Identifier(required=True)


@orders.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        repo.discard(order)
        logger.info("Order deleted", order_id=str(command.order_id))
