"""PlaceOrder: a buyer checks out a meal."""

from protean import handle
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from bazaar.domain import bazaar
from bazaar.order.order import Order


@bazaar.command(part_of="Order")
class PlaceOrder:
    user_email = String(required=True, max_length=254)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True, min_value=1)
    chef_id = String(max_length=9)
    meal_id = String(max_length=50)
    meal_name = String(max_length=255)
    delivery_address = String(max_length=500)


@bazaar.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.place(
            user_email=command.user_email,
            price=command.price,
            quantity=command.quantity,
            chef_id=command.chef_id,
            meal_id=command.meal_id,
            meal_name=command.meal_name,
            delivery_address=command.delivery_address,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)
