"""Shared BDD fixtures and step definitions for order processing."""

import pytest
from fulfillment.station.simulated import SimulatedDeliveryStation
from inventory.station.simulated import SimulatedInventoryStation
from ordering.checkout.orchestrator import OrderOrchestrator
from payments.station.simulated import SimulatedPaymentStation
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def order_fields():
    """Request fields collected by Given steps, overridable per scenario."""
    return {
        "product_id": "PROD-002",
        "quantity": 1,
        "amount": 100.0,
        "card_number": "4111111111111111",
        "cvv": "123",
        "expiry_date": "12/29",
        "address": "Av. Paulista, 1000",
        "zip_code": "01310-100",
    }


@pytest.fixture()
def charges():
    """Amounts sent to the payment station for authorization."""
    return []


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the simulated stations", target_fixture="orchestrator")
def _():
    return OrderOrchestrator(
        inventory=SimulatedInventoryStation(),
        payments=SimulatedPaymentStation(latency_seconds=0),
        delivery=SimulatedDeliveryStation(),
    )


@given(parsers.cfparse('a customer orders {quantity:d} unit(s) of "{product_id}" for {amount:f}'))
def _(order_fields, quantity, product_id, amount):
    order_fields.update(product_id=product_id, quantity=quantity, amount=amount)


@given(parsers.cfparse('the order ships to "{zip_code}"'))
def _(order_fields, zip_code):
    order_fields["zip_code"] = zip_code


@given(parsers.cfparse('the customer pays with card "{card_number}" cvv "{cvv}" expiring "{expiry_date}"'))
def _(order_fields, card_number, cvv, expiry_date):
    order_fields.update(card_number=card_number, cvv=cvv, expiry_date=expiry_date)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the order succeeds")
def _(outcome):
    assert outcome.success is True


@then(parsers.cfparse('the order fails with "{message}"'))
def _(outcome, message):
    assert outcome.success is False
    assert outcome.message == message


@then("the order has a payment reference and a tracking token")
def _(outcome):
    assert outcome.payment_reference.startswith("TXN")
    assert outcome.tracking_token.startswith(f"TRACK-{outcome.order_id}-")


@then("the order has no payment reference or tracking token")
def _(outcome):
    assert outcome.order_id is None
    assert outcome.payment_reference is None
    assert outcome.tracking_token is None
