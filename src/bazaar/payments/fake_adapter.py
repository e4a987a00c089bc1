"""Configurable fake payment provider for development and testing.

Mimics the shape of a real provider's payment intents (``pi_...`` ids with
``..._secret_...`` client secrets) without any network calls, and can be
switched to fail so the upstream-error path can be exercised.
"""

from uuid import uuid4

from bazaar.payments.port import PaymentGateway, PaymentGatewayError, PaymentIntentResult


class FakeGateway(PaymentGateway):
    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Payment provider unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Payment provider unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_payment_intent(self, amount: int, currency: str) -> PaymentIntentResult:
        self.calls.append({"method": "create_payment_intent", "amount": amount, "currency": currency})

        if not self.should_succeed:
            raise PaymentGatewayError(self.failure_reason)

        intent_id = f"pi_fake_{uuid4().hex[:16]}"
        return PaymentIntentResult(
            intent_id=intent_id,
            client_secret=f"{intent_id}_secret_{uuid4().hex[:12]}",
            amount=amount,
            currency=currency,
        )
