"""Repository for the ElevationRequest aggregate."""

from bazaar.domain import bazaar
from bazaar.elevation.request import ElevationRequest
from bazaar.utils.query import fetch_all


@bazaar.repository(part_of=ElevationRequest)
class ElevationRequestRepository:
    def all_requests(self) -> list[ElevationRequest]:
        """Every request ever submitted, oldest first."""
        return fetch_all(self._dao.query.order_by("request_time"))

    def submitted_by(self, user_email: str) -> list[ElevationRequest]:
        return fetch_all(self._dao.query.filter(user_email=user_email).order_by("request_time"))
