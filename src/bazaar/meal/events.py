"""Domain events for the Meal aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from bazaar.domain import bazaar


@bazaar.event(part_of="Meal")
class MealListed:
    """A chef published a new meal."""

    __version__ = 1

    meal_id = Identifier(required=True)
    food_name = String(required=True)
    chef_id = String()
    chef_email = String()
    price = Float(required=True)
    listed_at = DateTime(required=True)


@bazaar.event(part_of="Meal")
class MealDetailsUpdated:
    __version__ = 1

    meal_id = Identifier(required=True)
    food_name = String()
    price = Float()
    updated_at = DateTime(required=True)
