"""FastAPI routes for the Pricing domain."""

from decimal import Decimal

from fastapi import APIRouter, Query

from pricing.api.schemas import PolicyComparisonResponse, PriceCalculationResponse
from pricing.service import compare_policies, price_with_selector

pricing_router = APIRouter(prefix="/pricing", tags=["pricing"])


@pricing_router.get("/calculate", response_model=PriceCalculationResponse)
async def calculate_price(
    original_price: Decimal = Query(gt=0),
    policy_type: str = Query(min_length=1, description="percentage, fixed or progressive"),
    discount_value: Decimal | None = Query(
        default=None, description="Percentage from 0 to 100, or a fixed amount"
    ),
) -> PriceCalculationResponse:
    """Apply one discount policy to a price.

    Unknown policy types and out-of-range values are rejected with 400 by
    the application's exception handlers.
    """
    breakdown = price_with_selector(original_price, policy_type, discount_value)
    return PriceCalculationResponse(**breakdown.to_dict())


@pricing_router.get("/compare", response_model=PolicyComparisonResponse)
async def compare_all_policies(original_price: Decimal = Query(gt=0)) -> PolicyComparisonResponse:
    return PolicyComparisonResponse(
        originalPrice=float(original_price),
        strategies=compare_policies(original_price),
    )
