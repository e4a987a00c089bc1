"""In-memory identity provider for development and testing.

Tokens are registered up front; any other token is rejected.
"""

from bazaar.auth.identity.port import IdentityProvider, IdentityVerificationError, VerifiedIdentity


class FakeIdentityProvider(IdentityProvider):
    def __init__(self) -> None:
        self._tokens: dict[str, VerifiedIdentity] = {}
        self.calls: list[dict] = []

    def register(self, id_token: str, email: str, uid: str | None = None) -> None:
        self._tokens[id_token] = VerifiedIdentity(email=email, uid=uid or f"uid-{email}")

    def verify_id_token(self, id_token: str) -> VerifiedIdentity:
        self.calls.append({"method": "verify_id_token", "id_token": id_token})

        identity = self._tokens.get(id_token)
        if identity is None:
            raise IdentityVerificationError("Invalid ID token")
        return identity
