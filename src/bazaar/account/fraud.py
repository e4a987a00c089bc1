"""MarkAccountFraud: admin action flagging an account as fraudulent."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from bazaar.account.account import Account
from bazaar.domain import bazaar

logger = structlog.get_logger(__name__)


@bazaar.command(part_of="Account")
class MarkAccountFraud:
    email = String(required=True, max_length=254)
    marked_by = String(required=True, max_length=254)


@bazaar.command_handler(part_of=Account)
class MarkAccountFraudHandler:
    @handle(MarkAccountFraud)
    def mark_account_fraud(self, command):
        repo = current_domain.repository_for(Account)
        account = repo.get(command.email)

        if account.mark_fraud(marked_by=command.marked_by):
            logger.info("Account marked as fraud", email=command.email, marked_by=command.marked_by)
            repo.add(account)
        return account.email
