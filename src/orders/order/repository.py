"""Repository for the Order aggregate."""

from protean.utils.globals import current_domain

from orders.domain import orders
from orders.order.order import Order, OrderDetail

# Providers cap each query; results are read page by page until exhausted.
_PAGE_SIZE = 100


@orders.repository(part_of=Order)
class OrderRepository:
    """Order store.

    ``add`` and ``get`` come from the base repository; ``add`` saves the
    order together with its details.
    """

    def find_all(self) -> list[Order]:
        """All stored orders, unpaginated, in the provider's native order."""
        return self._fetch_all(self._dao.query)

    def find_by_user(self, user_id) -> list[Order]:
        """Orders placed for ``user_id``. Empty when the user has none."""
        return self._fetch_all(self._dao.query.filter(user_id=str(user_id)))

    def discard(self, order: Order) -> None:
        """Delete an order and, with it, every one of its details."""
        detail_dao = current_domain.repository_for(OrderDetail)._dao
        for detail in list(order.order_details):
            detail_dao.delete(detail)

        self._dao.delete(order)

    def _fetch_all(self, queryset) -> list[Order]:
        items = []
        while True:
            page = queryset.offset(len(items)).limit(_PAGE_SIZE).all()
            items.extend(page.items)
            if not page.items or len(items) >= page.total:
                return items
