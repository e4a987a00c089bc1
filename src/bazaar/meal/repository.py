"""Repository for the Meal aggregate."""

from dataclasses import dataclass

from bazaar.domain import bazaar
from bazaar.meal.meal import Meal

_SORT_ORDERS = {"asc": "price", "desc": "-price"}


@dataclass(frozen=True)
class MealPage:
    meals: list
    total: int


@bazaar.repository(part_of=Meal)
class MealRepository:
    def search(self, search: str | None = None, sort: str | None = None, page: int = 1, limit: int = 10) -> MealPage:
        """One page of meals whose name contains ``search`` (case-insensitive).

        ``sort`` orders by price, ``asc`` or ``desc``; any other value keeps
        the newest listings first. ``total`` counts every match, not just
        the returned page.
        """
        queryset = self._dao.query
        if search:
            queryset = queryset.filter(food_name__icontains=search)
        queryset = queryset.order_by(_SORT_ORDERS.get(sort, "-created_at"))

        result = queryset.offset((page - 1) * limit).limit(limit).all()
        return MealPage(meals=list(result.items), total=result.total)
