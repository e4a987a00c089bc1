"""Payment provider port (abstract interface).

The marketplace never sees card details: it asks the provider for a payment
intent and hands the returned client secret to the buyer's browser, which
completes the payment directly with the provider.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class PaymentGatewayError(Exception):
    """The payment provider could not create the payment intent."""


@dataclass(frozen=True)
class PaymentIntentResult:
    intent_id: str
    client_secret: str
    amount: int
    currency: str


class PaymentGateway(ABC):
    @abstractmethod
    def create_payment_intent(self, amount: int, currency: str) -> PaymentIntentResult:
        """Create a card payment intent for ``amount`` in the currency's smallest unit."""
        ...
