"""Authorization failures raised by the gate.

Each error carries the HTTP status it maps to; the API layer turns them
into ``{"detail": ...}`` responses.
"""


class AuthorizationError(Exception):
    status_code = 403

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class Unauthorized(AuthorizationError):
    """No verified identity accompanies the request."""

    status_code = 401


class Forbidden(AuthorizationError):
    """The caller is known but lacks the capability or ownership required."""

    status_code = 403
