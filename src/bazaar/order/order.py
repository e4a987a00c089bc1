"""Order aggregate (CQRS): a buyer's purchase of a chef's meal.

An order carries two independent statuses:

* the fulfillment status, moved by chefs and admins to any value of the
  closed set below. No transition table is enforced; delivered and
  cancelled only count as terminal for reporting.
* the payment status, which moves exactly once, Pending → paid, when the
  buyer confirms payment after the payment provider issued a client secret.

The chef reference is weak: nothing checks that the chef exists.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, Integer, String

from bazaar.domain import bazaar
from bazaar.order.events import OrderPaid, OrderPlaced, OrderStatusChanged


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentStatus(Enum):
    PENDING = "Pending"
    PAID = "paid"


# Statuses that no longer count as open work in reports
TERMINAL_ORDER_STATUSES = {OrderStatus.DELIVERED, OrderStatus.CANCELLED}


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@bazaar.aggregate
class Order:
    # Parties
    user_email = String(required=True, max_length=254)
    chef_id = String(max_length=9)

    # What was bought
    meal_id = String(max_length=50)
    meal_name = String(max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    delivery_address = String(max_length=500)

    # Status
    order_status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    payment_status = String(choices=PaymentStatus, default=PaymentStatus.PENDING.value)

    # Timestamps
    order_time = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(
        cls,
        user_email,
        price,
        quantity,
        chef_id=None,
        meal_id=None,
        meal_name=None,
        delivery_address=None,
    ):
        now = datetime.now(UTC)
        order = cls(
            user_email=user_email,
            chef_id=chef_id,
            meal_id=meal_id,
            meal_name=meal_name,
            price=price,
            quantity=quantity,
            delivery_address=delivery_address,
            order_status=OrderStatus.PENDING.value,
            payment_status=PaymentStatus.PENDING.value,
            order_time=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_email=user_email,
                chef_id=chef_id,
                meal_id=meal_id,
                price=price,
                quantity=quantity,
                placed_at=now,
            )
        )
        return order

    @property
    def total(self):
        return self.price * self.quantity

    @property
    def is_paid(self):
        return self.payment_status == PaymentStatus.PAID.value

    @property
    def is_terminal(self):
        return OrderStatus(self.order_status) in TERMINAL_ORDER_STATUSES

    def set_fulfillment_status(self, order_status):
        """Overwrite the fulfillment status with any member of the closed set."""
        previous = self.order_status
        now = datetime.now(UTC)
        self.order_status = order_status
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous,
                new_status=self.order_status,
                changed_at=now,
            )
        )

    def mark_paid(self):
        """Record payment. Returns False, changing nothing, when the order is already paid."""
        if self.is_paid:
            return False

        now = datetime.now(UTC)
        self.payment_status = PaymentStatus.PAID.value
        self.updated_at = now

        self.raise_(
            OrderPaid(
                order_id=str(self.id),
                user_email=self.user_email,
                amount=self.total,
                paid_at=now,
            )
        )
        return True
