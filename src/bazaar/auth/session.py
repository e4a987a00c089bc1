"""Session tokens exchanged for a verified ID token.

A session token is an HS256 JWT carrying the caller's email and an expiry
``SESSION_TTL_DAYS`` days out. It is handed to the browser both as an
http-only cookie and in the response body.
"""

from datetime import UTC, datetime, timedelta

import structlog
from jose import ExpiredSignatureError, JWTError, jwt

from bazaar import config

logger = structlog.get_logger(__name__)


def issue(email: str, now: datetime | None = None) -> str:
    issued_at = now or datetime.now(UTC)
    claims = {
        "email": email,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=config.SESSION_TTL_DAYS),
    }
    return jwt.encode(claims, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode(token: str) -> str | None:
    """Return the email a session token was issued for, or None if it is invalid or expired."""
    try:
        claims = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except ExpiredSignatureError:
        logger.info("Session token expired")
        return None
    except JWTError as exc:
        logger.warning("Rejected session token", error=str(exc))
        return None
    return claims.get("email")
