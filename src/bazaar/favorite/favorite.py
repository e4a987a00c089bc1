"""Favorite aggregate: a meal a user bookmarked.

A user holds at most one favorite per meal; adding the same meal again
returns the existing bookmark.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, String

from bazaar.domain import bazaar


@bazaar.aggregate
class Favorite:
    user_email = String(required=True, max_length=254)
    meal_id = String(required=True, max_length=50)
    meal_name = String(max_length=255)
    chef_id = String(max_length=9)
    price = Float(min_value=0.0)
    added_at = DateTime()

    @classmethod
    def bookmark(cls, user_email, meal_id, meal_name=None, chef_id=None, price=None):
        return cls(
            user_email=user_email,
            meal_id=meal_id,
            meal_name=meal_name,
            chef_id=chef_id,
            price=price,
            added_at=datetime.now(UTC),
        )
