"""Exception handlers for the Chef Bazaar API.

Protean's own exceptions (validation, invalid state, ...) are mapped by
``protean.integrations.fastapi``; this module adds the authorization and
upstream-provider failures, and pins missing records to a 404 with a ``detail`` body.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.integrations.fastapi import register_exception_handlers

from bazaar.auth.errors import AuthorizationError
from bazaar.auth.identity.port import IdentityVerificationError
from bazaar.payments.port import PaymentGatewayError

logger = structlog.get_logger(__name__)


async def _authorization_error(request: Request, exc: AuthorizationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def _not_found(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _identity_verification_error(request: Request, exc: IdentityVerificationError) -> JSONResponse:
    logger.warning("ID token rejected", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=401, content={"detail": str(exc)})


async def _payment_gateway_error(request: Request, exc: PaymentGatewayError) -> JSONResponse:
    logger.error("Payment provider failure", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=502, content={"detail": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(ObjectNotFoundError, _not_found)
    app.add_exception_handler(AuthorizationError, _authorization_error)
    app.add_exception_handler(IdentityVerificationError, _identity_verification_error)
    app.add_exception_handler(PaymentGatewayError, _payment_gateway_error)
