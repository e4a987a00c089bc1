"""SubmitElevationRequest: a user asks for the chef or admin role."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from bazaar.domain import bazaar
from bazaar.elevation.request import ElevationRequest


@bazaar.command(part_of="ElevationRequest")
class SubmitElevationRequest:
    user_email = String(required=True, max_length=254)
    request_type = String(required=True)  # "chef" or "admin"
    user_name = String(max_length=200)


@bazaar.command_handler(part_of=ElevationRequest)
class SubmitElevationRequestHandler:
    @handle(SubmitElevationRequest)
    def submit_elevation_request(self, command):
        request = ElevationRequest.submit(
            user_email=command.user_email,
            request_type=command.request_type,
            user_name=command.user_name,
        )
        current_domain.repository_for(ElevationRequest).add(request)
        return str(request.id)
