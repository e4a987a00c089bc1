"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from bazaar.domain import bazaar


@bazaar.event(part_of="Order")
class OrderPlaced:
    """A buyer checked out a meal."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_email = String(required=True)
    chef_id = String()
    meal_id = String()
    price = Float(required=True)
    quantity = Integer(required=True)
    placed_at = DateTime(required=True)


@bazaar.event(part_of="Order")
class OrderStatusChanged:
    """A chef or admin moved the order to another fulfillment status."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)


@bazaar.event(part_of="Order")
class OrderPaid:
    """Payment for the order was confirmed."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_email = String(required=True)
    amount = Float(required=True)
    paid_at = DateTime(required=True)
