"""BDD tests for fraud marking."""

from bazaar.account.fraud import MarkAccountFraud
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, when

scenarios("features/fraud_marking.feature")


@when(parsers.cfparse('the admin "{admin}" marks "{email}" as fraud'))
def mark_fraud(admin, email, error):
    try:
        current_domain.process(MarkAccountFraud(email=email, marked_by=admin), asynchronous=False)
    except ValidationError as exc:
        error["exc"] = exc
