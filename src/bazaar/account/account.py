"""Account aggregate (CQRS): the platform's record of a signed-in person.

Accounts are keyed by email. Profile details are refreshed on every sign-in,
while the role and the fraud status change only through dedicated
operations: role changes come from approved elevation requests, the fraud
flag from an admin action.

Roles:
    user → chef (approved chef request, assigns a chef identifier)
    user | chef → admin (approved admin request)
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from bazaar.account.events import (
    AccountElevated,
    AccountMarkedFraud,
    AccountRegistered,
    ProfileSynced,
)
from bazaar.domain import bazaar

CHEF_ID_PATTERN = re.compile(r"^chef-\d{4}$")
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class Role(Enum):
    USER = "user"
    CHEF = "chef"
    ADMIN = "admin"


class AccountStatus(Enum):
    ACTIVE = "active"
    FRAUD = "fraud"


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@bazaar.aggregate
class Account:
    """A buyer, chef, or admin on the marketplace, identified by email."""

    email = String(identifier=True, max_length=254)

    # Profile
    name = String(max_length=200)
    photo_url = String(max_length=1000)
    address = String(max_length=500)

    # Access
    role = String(choices=Role, default=Role.USER.value)
    status = String(choices=AccountStatus, default=AccountStatus.ACTIVE.value)
    chef_id = String(max_length=9)

    # Timestamps
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @invariant.post
    def chef_id_present_only_for_chefs(self):
        if self.role == Role.CHEF.value and not self.chef_id:
            raise ValidationError({"chef_id": ["Chefs must carry a chef identifier"]})
        if self.chef_id and self.role != Role.CHEF.value:
            raise ValidationError({"chef_id": ["Only chefs carry a chef identifier"]})

    @invariant.post
    def chef_id_format(self):
        if self.chef_id and not CHEF_ID_PATTERN.match(self.chef_id):
            raise ValidationError({"chef_id": [f"Malformed chef identifier: {self.chef_id}"]})

    @invariant.post
    def admins_are_never_fraud(self):
        if self.role == Role.ADMIN.value and self.status == AccountStatus.FRAUD.value:
            raise ValidationError({"status": ["Admin accounts cannot be marked as fraud"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, email, name=None, photo_url=None, address=None):
        """Create the account on first sign-in with the default role and status."""
        now = datetime.now(UTC)
        account = cls(
            email=email,
            name=name,
            photo_url=photo_url,
            address=address,
            role=Role.USER.value,
            status=AccountStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        account.raise_(
            AccountRegistered(
                email=email,
                name=name,
                role=account.role,
                status=account.status,
                registered_at=now,
            )
        )
        return account

    # -------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------
    def sync_profile(self, name=None, photo_url=None, address=None):
        """Overwrite the profile fields that were supplied; role and status are untouched."""
        now = datetime.now(UTC)
        with atomic_change(self):
            if name is not None:
                self.name = name
            if photo_url is not None:
                self.photo_url = photo_url
            if address is not None:
                self.address = address
            self.updated_at = now

        self.raise_(
            ProfileSynced(
                email=self.email,
                name=self.name,
                photo_url=self.photo_url,
                address=self.address,
                synced_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Role changes (driven by approved elevation requests)
    # -------------------------------------------------------------------
    def promote_to_chef(self, chef_id):
        previous_role = self.role
        now = datetime.now(UTC)
        with atomic_change(self):
            self.role = Role.CHEF.value
            self.chef_id = chef_id
            self.updated_at = now

        self.raise_(
            AccountElevated(
                email=self.email,
                previous_role=previous_role,
                new_role=Role.CHEF.value,
                chef_id=chef_id,
                elevated_at=now,
            )
        )

    def promote_to_admin(self):
        """Grant the admin role. A former chef's identifier is dropped along with the chef role."""
        previous_role = self.role
        now = datetime.now(UTC)
        with atomic_change(self):
            self.role = Role.ADMIN.value
            self.chef_id = None
            self.updated_at = now

        self.raise_(
            AccountElevated(
                email=self.email,
                previous_role=previous_role,
                new_role=Role.ADMIN.value,
                elevated_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Moderation
    # -------------------------------------------------------------------
    def mark_fraud(self, marked_by):
        """Flag the account as fraudulent.

        Admin accounts are rejected without any change. Returns False when the
        account was already flagged, True when the flag was set now.
        """
        if self.role == Role.ADMIN.value:
            raise ValidationError({"status": ["Admin accounts cannot be marked as fraud"]})

        if self.status == AccountStatus.FRAUD.value:
            return False

        now = datetime.now(UTC)
        self.status = AccountStatus.FRAUD.value
        self.updated_at = now

        self.raise_(
            AccountMarkedFraud(
                email=self.email,
                marked_by=marked_by,
                marked_at=now,
            )
        )
        return True

    @property
    def is_fraud(self):
        return self.status == AccountStatus.FRAUD.value
