"""Domain events for the ElevationRequest aggregate."""

from protean.fields import DateTime, Identifier, String

from bazaar.domain import bazaar


@bazaar.event(part_of="ElevationRequest")
class ElevationRequested:
    """A user asked to become a chef or an admin."""

    __version__ = 1

    request_id = Identifier(required=True)
    user_email = String(required=True)
    request_type = String(required=True)
    requested_at = DateTime(required=True)


@bazaar.event(part_of="ElevationRequest")
class ElevationRequestApproved:
    """An admin approved the request; the requester's role change follows."""

    __version__ = 1

    request_id = Identifier(required=True)
    user_email = String(required=True)
    request_type = String(required=True)
    approved_by = String(required=True)
    approved_at = DateTime(required=True)


@bazaar.event(part_of="ElevationRequest")
class ElevationRequestRejected:
    """An admin turned the request down."""

    __version__ = 1

    request_id = Identifier(required=True)
    user_email = String(required=True)
    request_type = String(required=True)
    rejected_by = String(required=True)
    rejected_at = DateTime(required=True)
