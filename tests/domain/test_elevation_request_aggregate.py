"""Tests for the ElevationRequest aggregate and its state machine."""

import pytest
from bazaar.elevation.events import ElevationRequestApproved, ElevationRequested, ElevationRequestRejected
from bazaar.elevation.request import ElevationRequest, RequestStatus, parse_target_status
from protean.exceptions import ValidationError


def _request(request_type="chef"):
    return ElevationRequest.submit(user_email="a@x.com", request_type=request_type, user_name="Asha")


class TestSubmission:
    def test_created_pending(self):
        request = _request()
        assert request.request_status == RequestStatus.PENDING.value
        assert request.request_time is not None
        assert request.reviewed_by is None

    def test_raises_requested_event(self):
        request = _request("admin")
        event = request._events[0]
        assert isinstance(event, ElevationRequested)
        assert event.request_type == "admin"
        assert event.user_email == "a@x.com"

    def test_unknown_request_type_rejected(self):
        with pytest.raises(ValidationError):
            ElevationRequest.submit(user_email="a@x.com", request_type="superuser")


class TestTransitions:
    def test_pending_to_approved(self):
        request = _request()
        assert request.transition("approved", reviewed_by="admin@x.com") is True
        assert request.is_approved
        assert request.reviewed_by == "admin@x.com"
        assert request.reviewed_at is not None
        assert isinstance(request._events[-1], ElevationRequestApproved)

    def test_pending_to_rejected(self):
        request = _request()
        assert request.transition("rejected", reviewed_by="admin@x.com") is True
        assert request.request_status == "rejected"
        assert isinstance(request._events[-1], ElevationRequestRejected)

    @pytest.mark.parametrize("first,second", [("approved", "rejected"), ("rejected", "approved"), ("approved", "approved")])
    def test_terminal_requests_are_unchanged(self, first, second):
        request = _request()
        request.transition(first, reviewed_by="admin@x.com")
        reviewed_at = request.reviewed_at
        event_count = len(request._events)

        assert request.transition(second, reviewed_by="other@x.com") is False
        assert request.request_status == first
        assert request.reviewed_by == "admin@x.com"
        assert request.reviewed_at == reviewed_at
        assert len(request._events) == event_count

    def test_approve_twice_raises(self):
        request = _request()
        request.approve("admin@x.com")
        with pytest.raises(ValidationError):
            request.approve("admin@x.com")

    def test_reject_after_approve_raises(self):
        request = _request()
        request.approve("admin@x.com")
        with pytest.raises(ValidationError):
            request.reject("admin@x.com")


class TestTargetStatus:
    @pytest.mark.parametrize("value", ["approved", "rejected"])
    def test_terminal_targets_accepted(self, value):
        assert parse_target_status(value).value == value

    def test_pending_is_not_a_target(self):
        with pytest.raises(ValidationError):
            parse_target_status("pending")

    def test_unknown_target_rejected(self):
        with pytest.raises(ValidationError) as exc:
            parse_target_status("maybe")
        assert "Unknown request status" in str(exc.value)

    def test_unknown_target_leaves_request_pending(self):
        request = _request()
        with pytest.raises(ValidationError):
            request.transition("maybe", reviewed_by="admin@x.com")
        assert request.request_status == "pending"
