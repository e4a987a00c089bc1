"""Repository for the MealReview aggregate."""

from bazaar.domain import bazaar
from bazaar.meal_review.review import MealReview
from bazaar.utils.query import fetch_all


@bazaar.repository(part_of=MealReview)
class MealReviewRepository:
    def for_meal(self, meal_id: str) -> list[MealReview]:
        """Reviews of a meal, newest first."""
        return fetch_all(self._dao.query.filter(meal_id=meal_id).order_by("-reviewed_at"))
