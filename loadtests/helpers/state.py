"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, no cross-user sharing.
State tracks entity IDs returned by creation endpoints so follow-up
operations can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class AccountState:
    """Tracks the lookup data registered for a simulated user."""

    user_id: str | None = None
    address_ids: list[str] = field(default_factory=list)
    payment_method_id: str | None = None


@dataclass
class OrderState:
    """Tracks state for a single order lifecycle."""

    order_id: str | None = None
    user_id: str | None = None
    address_id: str | None = None
    payment_method_id: str | None = None
    total_amount: float | None = None
    current_status: str = "pending"
