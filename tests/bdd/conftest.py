"""Shared BDD fixtures and step definitions."""

import re

import pytest
from bazaar.account.account import Account
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('an account "{email}" with role "{role}"'))
def account_with_role(email, role):
    account = Account.register(email=email, name=email.split("@")[0])
    if role == "chef":
        account.promote_to_chef("chef-1234")
    elif role == "admin":
        account.promote_to_admin()
    current_domain.repository_for(Account).add(account)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails(error):
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the account "{email}" has role "{role}"'))
def account_has_role(email, role):
    assert current_domain.repository_for(Account).get(email).role == role


@then(parsers.cfparse('the account "{email}" has status "{status}"'))
def account_has_status(email, status):
    assert current_domain.repository_for(Account).get(email).status == status


@then(parsers.cfparse('the account "{email}" has a chef identifier'))
def account_has_chef_id(email):
    chef_id = current_domain.repository_for(Account).get(email).chef_id
    assert chef_id is not None
    assert re.match(r"^chef-\d{4}$", chef_id)


@then(parsers.cfparse('the account "{email}" has no chef identifier'))
def account_has_no_chef_id(email):
    assert current_domain.repository_for(Account).get(email).chef_id is None
