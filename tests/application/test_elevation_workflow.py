"""Application tests for elevation submission, moderation and the resulting role changes."""

import re

import pytest
from bazaar.account.account import Account
from bazaar.account.sync import SyncProfile
from bazaar.elevation.moderation import ReviewElevationRequest
from bazaar.elevation.request import ElevationRequest
from bazaar.elevation.submission import SubmitElevationRequest
from bazaar.elevation.workflow import apply_elevation
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

CHEF_ID = re.compile(r"^chef-\d{4}$")


def _account(email="a@x.com"):
    current_domain.process(SyncProfile(email=email, name="Asha"), asynchronous=False)


def _submit(email="a@x.com", request_type="chef"):
    return current_domain.process(
        SubmitElevationRequest(user_email=email, request_type=request_type),
        asynchronous=False,
    )


def _review(request_id, status, reviewed_by="admin@x.com"):
    return current_domain.process(
        ReviewElevationRequest(request_id=request_id, status=status, reviewed_by=reviewed_by),
        asynchronous=False,
    )


def _get_account(email="a@x.com"):
    return current_domain.repository_for(Account).get(email)


def _get_request(request_id):
    return current_domain.repository_for(ElevationRequest).get(request_id)


class TestSubmission:
    def test_persisted_pending(self):
        request_id = _submit()
        request = _get_request(request_id)
        assert request.request_status == "pending"
        assert request.user_email == "a@x.com"

    def test_invalid_type_rejected(self):
        with pytest.raises(ValidationError):
            _submit(request_type="root")

    def test_listing(self):
        first = _submit()
        second = _submit(email="b@x.com", request_type="admin")
        repo = current_domain.repository_for(ElevationRequest)
        assert [str(r.id) for r in repo.all_requests()] == [first, second]
        assert [str(r.id) for r in repo.submitted_by("b@x.com")] == [second]


class TestChefApproval:
    def test_account_becomes_chef(self):
        _account()
        request_id = _submit()
        _review(request_id, "approved")

        assert _get_request(request_id).request_status == "approved"
        account = _get_account()
        assert account.role == "chef"
        assert CHEF_ID.match(account.chef_id)

    def test_repeat_approval_keeps_chef_id(self):
        _account()
        request_id = _submit()
        _review(request_id, "approved")
        chef_id = _get_account().chef_id

        for _ in range(5):
            _review(request_id, "approved")

        assert _get_account().chef_id == chef_id

    def test_records_reviewer(self):
        _account()
        request_id = _submit()
        _review(request_id, "approved", reviewed_by="moderator@x.com")
        request = _get_request(request_id)
        assert request.reviewed_by == "moderator@x.com"
        assert request.reviewed_at is not None


class TestAdminApproval:
    def test_account_becomes_admin(self):
        _account()
        request_id = _submit(request_type="admin")
        _review(request_id, "approved")
        account = _get_account()
        assert account.role == "admin"
        assert account.chef_id is None

    def test_chef_becoming_admin_drops_chef_id(self):
        _account()
        _review(_submit(), "approved")
        _review(_submit(request_type="admin"), "approved")
        account = _get_account()
        assert account.role == "admin"
        assert account.chef_id is None


class TestRejection:
    def test_account_untouched(self):
        _account()
        request_id = _submit()
        _review(request_id, "rejected")
        assert _get_request(request_id).request_status == "rejected"
        assert _get_account().role == "user"

    def test_rejected_request_cannot_be_approved_later(self):
        _account()
        request_id = _submit()
        _review(request_id, "rejected")
        _review(request_id, "approved")
        assert _get_request(request_id).request_status == "rejected"
        assert _get_account().role == "user"
        assert _get_account().chef_id is None


class TestFailures:
    def test_invalid_target_status(self):
        _account()
        request_id = _submit()
        with pytest.raises(ValidationError):
            _review(request_id, "pending")
        assert _get_request(request_id).request_status == "pending"

    def test_unknown_request(self):
        with pytest.raises(ObjectNotFoundError):
            _review("does-not-exist", "approved")

    def test_missing_account_fails_the_approval(self):
        request_id = _submit(email="ghost@x.com")
        with pytest.raises(ObjectNotFoundError):
            _review(request_id, "approved")


class TestApplyElevation:
    def test_uses_chef_id_factory(self):
        _account()
        request = ElevationRequest.submit(user_email="a@x.com", request_type="chef")
        request.approve("admin@x.com")
        account = apply_elevation(request, chef_id_factory=lambda: "chef-7777")
        assert account.chef_id == "chef-7777"
        assert _get_account().chef_id == "chef-7777"
