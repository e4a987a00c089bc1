"""ReviewElevationRequest: an admin approves or rejects an elevation request.

Approval is a two-step sequence: the request is recorded as approved first,
then the requester's account is elevated from the request's type and email.
A request that was already approved or rejected is returned unchanged and
no account is touched.
"""

import structlog
from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from bazaar.domain import bazaar
from bazaar.elevation.request import ElevationRequest
from bazaar.elevation.workflow import apply_elevation

logger = structlog.get_logger(__name__)


@bazaar.command(part_of="ElevationRequest")
class ReviewElevationRequest:
    request_id = Identifier(required=True)
    status = String(required=True)  # "approved" or "rejected"
    reviewed_by = String(required=True, max_length=254)


@bazaar.command_handler(part_of=ElevationRequest)
class ReviewElevationRequestHandler:
    @handle(ReviewElevationRequest)
    def review_elevation_request(self, command):
        repo = current_domain.repository_for(ElevationRequest)
        request = repo.get(command.request_id)

        if not request.transition(command.status, reviewed_by=command.reviewed_by):
            logger.info(
                "Elevation request already reviewed, leaving it unchanged",
                request_id=str(request.id),
                request_status=request.request_status,
            )
            return str(request.id)

        repo.add(request)

        if request.is_approved:
            apply_elevation(request)
        return str(request.id)
