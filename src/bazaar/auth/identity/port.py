"""Identity provider port (abstract interface).

The provider vouches for a person's email by validating the opaque ID token
the browser obtained at sign-in. Nothing else about the provider leaks into
the marketplace.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class IdentityVerificationError(Exception):
    """The ID token was rejected by the identity provider."""


@dataclass(frozen=True)
class VerifiedIdentity:
    email: str
    uid: str | None = None


class IdentityProvider(ABC):
    @abstractmethod
    def verify_id_token(self, id_token: str) -> VerifiedIdentity:
        """Validate ``id_token`` and return the identity it was issued for."""
        ...
