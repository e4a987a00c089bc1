"""Domain events for the Account aggregate."""

from protean.fields import DateTime, String

from bazaar.domain import bazaar


@bazaar.event(part_of="Account")
class AccountRegistered:
    """A person signed in for the first time and their account was created."""

    __version__ = 1

    email = String(required=True)
    name = String()
    role = String(required=True)
    status = String(required=True)
    registered_at = DateTime(required=True)


@bazaar.event(part_of="Account")
class ProfileSynced:
    """Profile details were refreshed from the identity provider's sign-in data."""

    __version__ = 1

    email = String(required=True)
    name = String()
    photo_url = String()
    address = String()
    synced_at = DateTime(required=True)


@bazaar.event(part_of="Account")
class AccountElevated:
    """An approved elevation request changed the account's role."""

    __version__ = 1

    email = String(required=True)
    previous_role = String(required=True)
    new_role = String(required=True)
    chef_id = String()
    elevated_at = DateTime(required=True)


@bazaar.event(part_of="Account")
class AccountMarkedFraud:
    """An admin flagged the account as fraudulent."""

    __version__ = 1

    email = String(required=True)
    marked_by = String(required=True)
    marked_at = DateTime(required=True)
