"""Repository for the Order aggregate."""

from bazaar.domain import bazaar
from bazaar.order.order import Order, OrderStatus, PaymentStatus
from bazaar.utils.query import fetch_all


@bazaar.repository(part_of=Order)
class OrderRepository:
    def placed_by(self, user_email: str) -> list[Order]:
        """A buyer's orders, newest first."""
        return fetch_all(self._dao.query.filter(user_email=user_email).order_by("-order_time"))

    def for_chef(self, chef_id: str) -> list[Order]:
        """Orders addressed to a chef, newest first."""
        return fetch_all(self._dao.query.filter(chef_id=chef_id).order_by("-order_time"))

    def count(self, **filters) -> int:
        queryset = self._dao.query.filter(**filters) if filters else self._dao.query
        return queryset.all().total

    def count_in_status(self, status: OrderStatus) -> int:
        return self.count(order_status=status.value)

    def paid_orders(self) -> list[Order]:
        return fetch_all(self._dao.query.filter(payment_status=PaymentStatus.PAID.value))
