"""Platform statistics for the admin dashboard.

Computed on read from the account and order repositories: user and order
counts, open versus delivered orders, and the revenue collected from paid
orders (price × quantity).
"""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from bazaar.account.account import Account
from bazaar.order.order import Order, OrderStatus


@dataclass(frozen=True)
class PlatformStats:
    total_users: int
    total_orders: int
    pending_orders: int
    delivered_orders: int
    total_payment: float


def platform_stats() -> PlatformStats:
    accounts = current_domain.repository_for(Account)
    orders = current_domain.repository_for(Order)

    total_orders = orders.count()
    delivered = orders.count_in_status(OrderStatus.DELIVERED)
    cancelled = orders.count_in_status(OrderStatus.CANCELLED)

    return PlatformStats(
        total_users=accounts.count(),
        total_orders=total_orders,
        pending_orders=total_orders - delivered - cancelled,
        delivered_orders=delivered,
        total_payment=sum(order.total for order in orders.paid_orders()),
    )
