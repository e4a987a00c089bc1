"""BDD tests for the order lifecycle."""

from bazaar.admin.stats import platform_stats
from bazaar.order.fulfillment import UpdateOrderStatus
from bazaar.order.order import Order
from bazaar.order.payment import MarkOrderPaid
from bazaar.order.placement import PlaceOrder
from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/order_lifecycle.feature")


def _place(email, chef_id, price, quantity):
    return current_domain.process(
        PlaceOrder(user_email=email, chef_id=chef_id, price=price, quantity=quantity),
        asynchronous=False,
    )


def _get(order_id):
    return current_domain.repository_for(Order).get(order_id)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('"{email}" ordered a meal from "{chef_id}" at {price:g} x {quantity:d}'),
    target_fixture="order_id",
)
def existing_order(email, chef_id, price, quantity):
    return _place(email, chef_id, price, quantity)


@given("the order is paid")
def order_already_paid(order_id):
    current_domain.process(MarkOrderPaid(order_id=order_id), asynchronous=False)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(
    parsers.cfparse('"{email}" orders a meal from "{chef_id}" at {price:g} x {quantity:d}'),
    target_fixture="order_id",
)
def place_order(email, chef_id, price, quantity):
    return _place(email, chef_id, price, quantity)


@when("the order is paid")
def pay_order(order_id):
    current_domain.process(MarkOrderPaid(order_id=order_id), asynchronous=False)


@when(parsers.cfparse('the order status is set to "{status}"'))
def set_order_status(order_id, status, error):
    try:
        current_domain.process(UpdateOrderStatus(order_id=order_id, order_status=status), asynchronous=False)
    except ValidationError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order_id, status):
    assert _get(order_id).order_status == status


@then(parsers.cfparse('the payment status is "{status}"'))
def payment_status_is(order_id, status):
    assert _get(order_id).payment_status == status


@then(parsers.cfparse("the platform revenue is {amount:g}"))
def platform_revenue_is(amount):
    assert platform_stats().total_payment == amount
