"""Repository for the Favorite aggregate."""

from bazaar.domain import bazaar
from bazaar.favorite.favorite import Favorite
from bazaar.utils.query import fetch_all


@bazaar.repository(part_of=Favorite)
class FavoriteRepository:
    def saved_by(self, user_email: str) -> list[Favorite]:
        return fetch_all(self._dao.query.filter(user_email=user_email).order_by("added_at"))

    def find_for(self, user_email: str, meal_id: str) -> Favorite | None:
        """The user's bookmark of ``meal_id``, if any."""
        matches = self._dao.query.filter(user_email=user_email, meal_id=meal_id).limit(1).all()
        return matches.first
