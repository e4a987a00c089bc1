"""FastAPI dependencies that put the authorization gate in front of routes.

Routes declare what they need with ``Depends(require(Capability.X))``; the
session token is read from the ``Authorization: Bearer`` header or, failing
that, from the session cookie.
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bazaar import config
from bazaar.auth import session
from bazaar.auth.gate import CallerContext, Capability, authorize

_bearer = HTTPBearer(auto_error=False)


async def verified_email(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str | None:
    token = credentials.credentials if credentials else request.cookies.get(config.SESSION_COOKIE_NAME)
    if not token:
        return None
    return session.decode(token)


def require(capability: Capability, target: str | None = None):
    """Build a dependency enforcing ``capability``.

    ``target`` names the path parameter holding the email that SELF_ONLY
    compares against the caller.
    """

    async def dependency(request: Request, email: str | None = Depends(verified_email)) -> CallerContext:
        target_email = request.path_params.get(target) if target else None
        return authorize(email, capability, target_email)

    return dependency
