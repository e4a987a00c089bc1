"""Repository for the Account aggregate."""

from protean.exceptions import ObjectNotFoundError

from bazaar.account.account import Account
from bazaar.domain import bazaar


@bazaar.repository(part_of=Account)
class AccountRepository:
    def find_by_email(self, email: str) -> Account | None:
        """Return the account for ``email``, or None when nobody has signed in with it yet."""
        try:
            return self.get(email)
        except ObjectNotFoundError:
            return None

    def count(self) -> int:
        return self._dao.query.all().total
