"""Orders bounded context: order management for the storefront backend.

Creates, reads, updates and deletes orders and lists them per user.
Users, shipping addresses and payment methods are looked up from their
own stores and snapshotted onto the order.
"""

from protean.domain import Domain

from orders.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="orders")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
orders = Domain(name="orders")
