"""Authorization gate: decides whether a caller may perform an operation.

Every capability is an ordered pipeline of stages. A stage receives the
caller context and either lets it through (possibly enriched, e.g. with the
caller's account) or denies it with an HTTP status and a message. The first
denial ends the evaluation.

Capabilities:
    NONE       anyone, no identity needed
    VERIFIED   any caller with a valid session
    SELF_ONLY  the caller's email must equal the target email (role is irrelevant)
    ACTIVE     verified and the caller's account is not flagged as fraud
    CHEF       the caller's account has role chef
    ADMIN      the caller's account has role admin
    STAFF      chef or admin

The gate only reads; it never changes an account.
"""

from dataclasses import dataclass, replace
from enum import Enum

import structlog
from protean.utils.globals import current_domain

from bazaar.account.account import Account, Role
from bazaar.auth.errors import Forbidden, Unauthorized

logger = structlog.get_logger(__name__)


class Capability(Enum):
    NONE = "none"
    VERIFIED = "verified"
    SELF_ONLY = "self_only"
    ACTIVE = "active"
    CHEF = "chef"
    ADMIN = "admin"
    STAFF = "staff"


@dataclass(frozen=True)
class CallerContext:
    email: str | None
    target_email: str | None = None
    account: Account | None = None

    @property
    def role(self) -> str:
        # Callers who never synced their profile are plain users
        return self.account.role if self.account is not None else Role.USER.value

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value


@dataclass(frozen=True)
class Proceed:
    context: CallerContext


@dataclass(frozen=True)
class Deny:
    status_code: int
    detail: str


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------
def require_identity(context: CallerContext) -> Proceed | Deny:
    if not context.email:
        return Deny(401, "Authentication required")
    return Proceed(context)


def load_account(context: CallerContext) -> Proceed | Deny:
    account = current_domain.repository_for(Account).find_by_email(context.email)
    return Proceed(replace(context, account=account))


def require_role(*roles: Role):
    allowed = {role.value for role in roles}

    def stage(context: CallerContext) -> Proceed | Deny:
        if context.account is None or context.account.role not in allowed:
            return Deny(403, "Insufficient role")
        return Proceed(context)

    stage.__name__ = f"require_role({', '.join(sorted(allowed))})"
    return stage


def require_self(context: CallerContext) -> Proceed | Deny:
    if context.email != context.target_email:
        return Deny(403, "Access limited to your own records")
    return Proceed(context)


def require_active(context: CallerContext) -> Proceed | Deny:
    if context.account is not None and context.account.is_fraud:
        return Deny(403, "Account is flagged as fraud")
    return Proceed(context)


_PIPELINES = {
    Capability.NONE: (),
    Capability.VERIFIED: (require_identity, load_account),
    Capability.SELF_ONLY: (require_identity, require_self, load_account),
    Capability.ACTIVE: (require_identity, load_account, require_active),
    Capability.CHEF: (require_identity, load_account, require_role(Role.CHEF)),
    Capability.ADMIN: (require_identity, load_account, require_role(Role.ADMIN)),
    Capability.STAFF: (require_identity, load_account, require_role(Role.CHEF, Role.ADMIN)),
}


def evaluate(context: CallerContext, capability: Capability) -> Proceed | Deny:
    """Run the stages of ``capability`` in order, stopping at the first denial."""
    outcome: Proceed | Deny = Proceed(context)
    for stage in _PIPELINES[capability]:
        outcome = stage(outcome.context)
        if isinstance(outcome, Deny):
            logger.info(
                "Authorization denied",
                capability=capability.value,
                stage=stage.__name__,
                caller=context.email,
                status_code=outcome.status_code,
            )
            return outcome
    return outcome


def authorize(email: str | None, capability: Capability, target_email: str | None = None) -> CallerContext:
    """Return the caller context when allowed; raise Unauthorized or Forbidden otherwise."""
    outcome = evaluate(CallerContext(email=email, target_email=target_email), capability)
    if isinstance(outcome, Deny):
        if outcome.status_code == 401:
            raise Unauthorized(outcome.detail)
        raise Forbidden(outcome.detail)
    return outcome.context


def ensure_owner_or_admin(caller: CallerContext, owner_email: str | None) -> None:
    """Allow the record's owner or an admin; anyone else is forbidden."""
    if caller.is_admin or (caller.email is not None and caller.email == owner_email):
        return
    raise Forbidden("Only the owner or an admin may change this record")
