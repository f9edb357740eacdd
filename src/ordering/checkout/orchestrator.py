"""Order Orchestrator — one call that runs the Inventory → Payment → Delivery flow.

The orchestrator hides three stations behind a single operation and turns
their individual answers into one `OrderOutcome`.

Flow (each arrow is a state change; any failed step ends in FAILED):
    START
      → STOCK_CHECKED      inventory.check_stock     "Insufficient stock"
      → RESERVED           inventory.reserve         "Stock reservation failed"
      → PAYMENT_VALIDATED  payments.validate_credentials  "Invalid card data"
      → SHIPPING_QUOTED    delivery.quote_cost, total = amount + shipping
      → AUTHORIZED         payments.authorize(total) "Payment declined"
      → SCHEDULED          delivery.schedule
      → COMMITTED          inventory.commit

Declines are outcomes, not exceptions. Anything unexpected raised along the
way is logged and reported as "Internal processing error"; the caller never
sees the exception. Nothing is compensated: stock reserved before a payment
decline stays reserved.
"""

import time
from enum import Enum
from uuid import uuid4

import structlog

from fulfillment.station import DeliveryStation, get_delivery
from inventory.station import InventoryStation, get_inventory
from ordering.order.request import OrderRequest
from ordering.order.results import (
    AvailabilityResult,
    OrderOutcome,
    OrderStatusReport,
    ShippingQuote,
)
from payments.station import PaymentStation, get_payments

logger = structlog.get_logger(__name__)

INSUFFICIENT_STOCK = "Insufficient stock"
RESERVATION_FAILED = "Stock reservation failed"
INVALID_CARD = "Invalid card data"
PAYMENT_DECLINED = "Payment declined"
INTERNAL_ERROR = "Internal processing error"
ORDER_PROCESSED = "Order processed successfully"


class OrderStage(Enum):
    START = "Start"
    STOCK_CHECKED = "Stock_Checked"
    RESERVED = "Reserved"
    PAYMENT_VALIDATED = "Payment_Validated"
    SHIPPING_QUOTED = "Shipping_Quoted"
    AUTHORIZED = "Authorized"
    SCHEDULED = "Scheduled"
    COMMITTED = "Committed"
    FAILED = "Failed"


_VALID_TRANSITIONS = {
    OrderStage.START: {OrderStage.STOCK_CHECKED, OrderStage.FAILED},
    OrderStage.STOCK_CHECKED: {OrderStage.RESERVED, OrderStage.FAILED},
    OrderStage.RESERVED: {OrderStage.PAYMENT_VALIDATED, OrderStage.FAILED},
    OrderStage.PAYMENT_VALIDATED: {OrderStage.SHIPPING_QUOTED, OrderStage.FAILED},
    OrderStage.SHIPPING_QUOTED: {OrderStage.AUTHORIZED, OrderStage.FAILED},
    OrderStage.AUTHORIZED: {OrderStage.SCHEDULED, OrderStage.FAILED},
    OrderStage.SCHEDULED: {OrderStage.COMMITTED, OrderStage.FAILED},
    OrderStage.COMMITTED: set(),  # Terminal
    OrderStage.FAILED: set(),  # Terminal
}


def new_order_id() -> str:
    return f"ORD-{int(time.time() * 1000)}-{uuid4().hex[:6].upper()}"


class _OrderRun:
    """Stage bookkeeping for a single `process_order` call."""

    def __init__(self) -> None:
        self.stage = OrderStage.START

    def advance(self, target: OrderStage) -> None:
        if target not in _VALID_TRANSITIONS[self.stage]:
            raise RuntimeError(f"Cannot move order from {self.stage.value} to {target.value}")
        logger.debug("order_stage_changed", from_stage=self.stage.value, to_stage=target.value)
        self.stage = target

    def fail(self, message: str) -> OrderOutcome:
        logger.warning("order_declined", stage=self.stage.value, reason=message)
        self.advance(OrderStage.FAILED)
        return OrderOutcome.declined(message)


class OrderOrchestrator:
    """Single entry point over the inventory, payment and delivery stations.

    Stations are injected; when omitted the configured defaults from each
    context's factory are used. The orchestrator keeps no state between
    calls, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        inventory: InventoryStation | None = None,
        payments: PaymentStation | None = None,
        delivery: DeliveryStation | None = None,
    ) -> None:
        self.inventory = inventory if inventory is not None else get_inventory()
        self.payments = payments if payments is not None else get_payments()
        self.delivery = delivery if delivery is not None else get_delivery()

    def process_order(self, request: OrderRequest) -> OrderOutcome:
        try:
            with structlog.contextvars.bound_contextvars(product_id=request.product_id, quantity=request.quantity):
                logger.info("order_processing_started")
                return self._run(request)
        except Exception:
            logger.exception("order_processing_error")
            return OrderOutcome.declined(INTERNAL_ERROR)

    def _run(self, request: OrderRequest) -> OrderOutcome:
        run = _OrderRun()

        if not self.inventory.check_stock(request.product_id, request.quantity):
            return run.fail(INSUFFICIENT_STOCK)
        run.advance(OrderStage.STOCK_CHECKED)

        if not self.inventory.reserve(request.product_id, request.quantity):
            return run.fail(RESERVATION_FAILED)
        run.advance(OrderStage.RESERVED)

        if not self.payments.validate_credentials(request.card_number, request.cvv, request.expiry_date):
            return run.fail(INVALID_CARD)
        run.advance(OrderStage.PAYMENT_VALIDATED)

        shipping_cost = self.delivery.quote_cost(request.zip_code)
        total = request.merchandise_amount() + shipping_cost
        run.advance(OrderStage.SHIPPING_QUOTED)

        payment_reference = self.payments.authorize(total, request.card_number)
        if payment_reference is None:
            return run.fail(PAYMENT_DECLINED)
        run.advance(OrderStage.AUTHORIZED)

        order_id = new_order_id()
        tracking_token = self.delivery.schedule(order_id, request.address, request.zip_code)
        run.advance(OrderStage.SCHEDULED)

        self.inventory.commit(request.product_id, request.quantity)
        run.advance(OrderStage.COMMITTED)

        logger.info(
            "order_processed",
            order_id=order_id,
            total=str(total),
            payment_reference=payment_reference,
            tracking_token=tracking_token,
        )
        return OrderOutcome(
            success=True,
            message=ORDER_PROCESSED,
            order_id=order_id,
            payment_reference=payment_reference,
            tracking_token=tracking_token,
        )

    # -----------------------------------------------------------------------
    # Read-only views, each touching a single station
    # -----------------------------------------------------------------------
    def check_availability(self, product_id: str, quantity: int) -> AvailabilityResult:
        available = self.inventory.check_stock(product_id, quantity)
        return AvailabilityResult(product_id=product_id, requested_quantity=quantity, available=available)

    def shipping_quote(self, zip_code: str) -> ShippingQuote:
        return ShippingQuote(
            zip_code=zip_code,
            cost=self.delivery.quote_cost(zip_code),
            estimated_days=self.delivery.estimate_days(zip_code),
        )

    def order_status(self, order_id: str, payment_reference: str | None, tracking_token: str | None) -> OrderStatusReport:
        return OrderStatusReport(
            order_id=order_id,
            payment_status=self.payments.get_status(payment_reference),
            delivery_status=self.delivery.status(tracking_token),
        )
