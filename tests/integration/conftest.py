import pytest
from bazaar.account.account import Account
from bazaar.api import (
    account_router,
    admin_router,
    elevation_router,
    favorite_router,
    meal_router,
    order_router,
    payment_router,
    review_router,
    session_router,
)
from bazaar.api.errors import register_error_handlers
from bazaar.auth import session
from fastapi import FastAPI
from fastapi.testclient import TestClient
from protean.utils.globals import current_domain


@pytest.fixture()
def client():
    app = FastAPI()
    for router in (
        session_router,
        account_router,
        elevation_router,
        order_router,
        payment_router,
        admin_router,
        meal_router,
        review_router,
        favorite_router,
    ):
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def auth():
    """Bearer headers carrying a session token for ``email``."""

    def _headers(email):
        return {"Authorization": f"Bearer {session.issue(email)}"}

    return _headers


@pytest.fixture()
def make_account():
    """Persist an account with the given role, bypassing the elevation workflow."""

    def _make(email, role="user", chef_id="chef-1234", fraud=False, name=None):
        account = Account.register(email=email, name=name or email.split("@")[0])
        if role == "chef":
            account.promote_to_chef(chef_id)
        elif role == "admin":
            account.promote_to_admin()
        if fraud:
            account.mark_fraud(marked_by="admin@x.com")
        current_domain.repository_for(Account).add(account)
        return account

    return _make
