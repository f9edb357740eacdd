"""BDD tests for order processing through the orchestrator."""

from decimal import Decimal
from unittest.mock import patch

from ordering.order.request import OrderRequest
from payments.station.simulated import SimulatedPaymentStation
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/order_processing.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the order is processed", target_fixture="outcome")
def _(orchestrator, order_fields, charges):
    original_authorize = SimulatedPaymentStation.authorize

    def recording_authorize(station, amount, card_number):
        charges.append(amount)
        return original_authorize(station, amount, card_number)

    with patch.object(SimulatedPaymentStation, "authorize", recording_authorize):
        return orchestrator.process_order(OrderRequest(**order_fields))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the customer was charged {total}"))
def _(charges, total):
    assert charges == [Decimal(total)]
