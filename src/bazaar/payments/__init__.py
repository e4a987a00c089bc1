"""Payment provider factory.

get_gateway() / set_gateway() swap the active adapter; FakeGateway is the
default so development and tests run without provider credentials.
"""

from bazaar.payments.fake_adapter import FakeGateway
from bazaar.payments.port import PaymentGateway

_current_gateway: PaymentGateway | None = None


def get_gateway() -> PaymentGateway:
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = FakeGateway()
    return _current_gateway


def set_gateway(gateway: PaymentGateway) -> None:
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    global _current_gateway
    _current_gateway = None
