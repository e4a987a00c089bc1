"""UpdateOrderStatus: a chef or admin moves an order through fulfillment."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from bazaar.domain import bazaar
from bazaar.order.order import Order


@bazaar.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    order_status = String(required=True)


@bazaar.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.set_fulfillment_status(command.order_status)
        repo.add(order)
        return str(order.id)
