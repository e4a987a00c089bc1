"""ElevationRequest aggregate (CQRS): a user's petition for the chef or admin role.

Requests are append-only: they are created pending, moderated exactly once,
and never deleted. Moderating a request that already reached a terminal
state leaves it untouched, so repeated admin clicks are harmless.

State Machine (3 states):
    PENDING → APPROVED | REJECTED
    APPROVED, REJECTED → (terminal)
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from bazaar.domain import bazaar
from bazaar.elevation.events import (
    ElevationRequestApproved,
    ElevationRequested,
    ElevationRequestRejected,
)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class RequestType(Enum):
    CHEF = "chef"
    ADMIN = "admin"


class RequestStatus(Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# ---------------------------------------------------------------------------
# State Machine
# ---------------------------------------------------------------------------
_VALID_TRANSITIONS = {
    RequestStatus.PENDING: {RequestStatus.APPROVED, RequestStatus.REJECTED},
    RequestStatus.APPROVED: set(),  # Terminal
    RequestStatus.REJECTED: set(),  # Terminal
}

_TERMINAL_STATES = {RequestStatus.APPROVED, RequestStatus.REJECTED}


def parse_target_status(value):
    """Translate a moderation target into a RequestStatus, accepting only terminal states."""
    try:
        status = RequestStatus(value)
    except ValueError:
        raise ValidationError({"status": [f"Unknown request status: {value!r}"]}) from None
    if status not in _TERMINAL_STATES:
        raise ValidationError({"status": ["A request can only be moved to approved or rejected"]})
    return status


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@bazaar.aggregate
class ElevationRequest:
    user_email = String(required=True, max_length=254)
    user_name = String(max_length=200)
    request_type = String(choices=RequestType, required=True)
    request_status = String(choices=RequestStatus, default=RequestStatus.PENDING.value)
    request_time = DateTime()
    reviewed_by = String(max_length=254)
    reviewed_at = DateTime()

    @classmethod
    def submit(cls, user_email, request_type, user_name=None):
        now = datetime.now(UTC)
        request = cls(
            user_email=user_email,
            user_name=user_name,
            request_type=request_type,
            request_status=RequestStatus.PENDING.value,
            request_time=now,
        )
        request.raise_(
            ElevationRequested(
                request_id=str(request.id),
                user_email=user_email,
                request_type=request_type,
                requested_at=now,
            )
        )
        return request

    @property
    def is_terminal(self):
        return RequestStatus(self.request_status) in _TERMINAL_STATES

    @property
    def is_approved(self):
        return self.request_status == RequestStatus.APPROVED.value

    def _can_transition(self, target_status):
        current = RequestStatus(self.request_status)
        return target_status in _VALID_TRANSITIONS.get(current, set())

    def transition(self, target_status, reviewed_by):
        """Move a pending request to ``target_status``.

        Returns True when the request changed. A request already in a terminal
        state is left as it is and False is returned.
        """
        target = parse_target_status(target_status)
        if not self._can_transition(target):
            return False

        if target == RequestStatus.APPROVED:
            self.approve(reviewed_by)
        else:
            self.reject(reviewed_by)
        return True

    def approve(self, approved_by):
        if not self._can_transition(RequestStatus.APPROVED):
            raise ValidationError(
                {"request_status": [f"Cannot approve a request that is already {self.request_status}"]}
            )

        now = datetime.now(UTC)
        self.request_status = RequestStatus.APPROVED.value
        self.reviewed_by = approved_by
        self.reviewed_at = now

        self.raise_(
            ElevationRequestApproved(
                request_id=str(self.id),
                user_email=self.user_email,
                request_type=self.request_type,
                approved_by=approved_by,
                approved_at=now,
            )
        )

    def reject(self, rejected_by):
        if not self._can_transition(RequestStatus.REJECTED):
            raise ValidationError(
                {"request_status": [f"Cannot reject a request that is already {self.request_status}"]}
            )

        now = datetime.now(UTC)
        self.request_status = RequestStatus.REJECTED.value
        self.reviewed_by = rejected_by
        self.reviewed_at = now

        self.raise_(
            ElevationRequestRejected(
                request_id=str(self.id),
                user_email=self.user_email,
                request_type=self.request_type,
                rejected_by=rejected_by,
                rejected_at=now,
            )
        )
