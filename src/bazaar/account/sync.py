"""SyncProfile: create or refresh an account from sign-in data.

The first sync creates the account with role ``user`` and status
``active``; later syncs only touch profile fields.
"""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from bazaar.account.account import Account
from bazaar.domain import bazaar


@bazaar.command(part_of="Account")
class SyncProfile:
    email = String(required=True, max_length=254)
    name = String(max_length=200)
    photo_url = String(max_length=1000)
    address = String(max_length=500)


@bazaar.command_handler(part_of=Account)
class SyncProfileHandler:
    @handle(SyncProfile)
    def sync_profile(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.find_by_email(command.email)

        if account is None:
            account = Account.register(
                email=command.email,
                name=command.name,
                photo_url=command.photo_url,
                address=command.address,
            )
        else:
            account.sync_profile(
                name=command.name,
                photo_url=command.photo_url,
                address=command.address,
            )

        repo.add(account)
        return account.email
