"""Role changes that follow an approved elevation request.

This module is the only place that changes an account's role or chef
identifier. It runs after the request itself has been recorded as approved,
inside the same command, and updates the requester's account unconditionally:
callers must reach it only through a genuine pending → approved transition,
otherwise a chef identifier would be regenerated.

Known gaps:
    * the request write and the account write are two separate persistence
      calls; on providers without a shared transaction a failure in between
      leaves the request approved and the account unchanged;
    * chef identifiers are a random four-digit suffix with no uniqueness
      check against existing accounts.
"""

import random

import structlog
from protean.utils.globals import current_domain

from bazaar.account.account import Account
from bazaar.elevation.request import ElevationRequest, RequestType

logger = structlog.get_logger(__name__)


def generate_chef_id(rng=random) -> str:
    """A chef identifier: ``chef-`` followed by a uniform random integer in [1000, 9999]."""
    return f"chef-{rng.randint(1000, 9999)}"


def apply_elevation(request: ElevationRequest, chef_id_factory=generate_chef_id) -> Account:
    """Grant the role named by an approved request to the requester's account."""
    repo = current_domain.repository_for(Account)
    account = repo.get(request.user_email)

    if RequestType(request.request_type) == RequestType.CHEF:
        account.promote_to_chef(chef_id_factory())
    else:
        account.promote_to_admin()

    repo.add(account)
    logger.info(
        "Account elevated",
        email=account.email,
        role=account.role,
        chef_id=account.chef_id,
        request_id=str(request.id),
    )
    return account
