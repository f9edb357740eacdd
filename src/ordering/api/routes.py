"""FastAPI routes for the Ordering domain — order processing and read-only views."""

from fastapi import APIRouter, Depends, Query

from ordering.api.schemas import (
    AvailabilityResponse,
    OrderOutcomeResponse,
    OrderStatusResponse,
    ProcessOrderRequest,
    ShippingQuoteResponse,
)
from ordering.checkout.orchestrator import OrderOrchestrator
from ordering.order.request import OrderRequest


def get_orchestrator() -> OrderOrchestrator:
    """Orchestrator wired to the currently configured stations."""
    return OrderOrchestrator()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


# Plain `def`: payment authorization blocks, so this runs in the threadpool.
@order_router.post("", response_model=OrderOutcomeResponse)
def process_order(
    body: ProcessOrderRequest,
    orchestrator: OrderOrchestrator = Depends(get_orchestrator),
) -> OrderOutcomeResponse:
    """Run stock, payment and delivery for one order.

    Business declines come back as 200 with success=false.
    """
    request = OrderRequest(**body.model_dump())
    outcome = orchestrator.process_order(request)
    return OrderOutcomeResponse(**outcome.to_dict())


@order_router.get("/availability", response_model=AvailabilityResponse)
async def check_availability(
    product_id: str = Query(min_length=1),
    quantity: int = Query(ge=1),
    orchestrator: OrderOrchestrator = Depends(get_orchestrator),
) -> AvailabilityResponse:
    result = orchestrator.check_availability(product_id, quantity)
    return AvailabilityResponse(**result.to_dict())


@order_router.get("/shipping-quote", response_model=ShippingQuoteResponse)
async def shipping_quote(
    zip_code: str = Query(min_length=1),
    orchestrator: OrderOrchestrator = Depends(get_orchestrator),
) -> ShippingQuoteResponse:
    quote = orchestrator.shipping_quote(zip_code)
    return ShippingQuoteResponse(**quote.to_dict())


@order_router.get("/{order_id}/status", response_model=OrderStatusResponse)
async def order_status(
    order_id: str,
    payment_reference: str | None = None,
    tracking_token: str | None = None,
    orchestrator: OrderOrchestrator = Depends(get_orchestrator),
) -> OrderStatusResponse:
    report = orchestrator.order_status(order_id, payment_reference, tracking_token)
    return OrderStatusResponse(**report.to_dict(), summary=str(report))
