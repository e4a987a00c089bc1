"""MarkOrderPaid: record that the buyer completed payment.

The payment provider is not consulted here: the caller is trusted to invoke
this only after the provider confirmed the payment intent it created.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from bazaar.domain import bazaar
from bazaar.order.order import Order

logger = structlog.get_logger(__name__)


@bazaar.command(part_of="Order")
class MarkOrderPaid:
    order_id = Identifier(required=True)


@bazaar.command_handler(part_of=Order)
class MarkOrderPaidHandler:
    @handle(MarkOrderPaid)
    def mark_order_paid(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        if order.mark_paid():
            repo.add(order)
            logger.info("Order paid", order_id=str(order.id), amount=order.total)
        return str(order.id)
