"""Meal aggregate: a dish a chef offers on the marketplace.

Ingredients are kept as a JSON-encoded list so that every provider can
store them in a single text column.
"""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, Float, String, Text

from bazaar.domain import bazaar
from bazaar.meal.events import MealDetailsUpdated, MealListed

# Fields a chef may edit after listing
EDITABLE_FIELDS = (
    "food_name",
    "image",
    "price",
    "ingredients",
    "delivery_area",
    "estimated_delivery_time",
    "chef_experience",
)


@bazaar.aggregate
class Meal:
    food_name = String(required=True, max_length=255)
    image = String(max_length=1000)
    price = Float(required=True, min_value=0.0)
    rating = Float(default=0.0, min_value=0.0, max_value=5.0)
    ingredients = Text()
    delivery_area = String(max_length=255)
    estimated_delivery_time = String(max_length=100)
    chef_experience = String(max_length=500)

    # Owner
    chef_name = String(max_length=200)
    chef_id = String(max_length=9)
    chef_email = String(max_length=254)

    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def list_meal(cls, food_name, price, chef_email, chef_id=None, chef_name=None, ingredients=None, **details):
        now = datetime.now(UTC)
        meal = cls(
            food_name=food_name,
            price=price,
            chef_email=chef_email,
            chef_id=chef_id,
            chef_name=chef_name,
            ingredients=json.dumps(ingredients) if ingredients is not None else None,
            created_at=now,
            updated_at=now,
            **details,
        )
        meal.raise_(
            MealListed(
                meal_id=str(meal.id),
                food_name=food_name,
                chef_id=chef_id,
                chef_email=chef_email,
                price=price,
                listed_at=now,
            )
        )
        return meal

    @property
    def ingredient_list(self):
        return json.loads(self.ingredients) if self.ingredients else []

    def is_owned_by(self, email):
        return self.chef_email == email

    def update_details(self, **changes):
        """Apply the supplied changes; keys outside EDITABLE_FIELDS and None values are ignored."""
        now = datetime.now(UTC)
        for field_name in EDITABLE_FIELDS:
            value = changes.get(field_name)
            if value is None:
                continue
            if field_name == "ingredients":
                value = json.dumps(value)
            setattr(self, field_name, value)
        self.updated_at = now

        self.raise_(
            MealDetailsUpdated(
                meal_id=str(self.id),
                food_name=self.food_name,
                price=self.price,
                updated_at=now,
            )
        )
