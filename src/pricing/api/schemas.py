"""Pydantic response schemas for the Pricing API."""

from pydantic import BaseModel


class PriceCalculationResponse(BaseModel):
    originalPrice: float
    finalPrice: float
    discount: float
    strategy: str
    strategyInfo: str
    details: str


class PolicyComparisonResponse(BaseModel):
    originalPrice: float
    strategies: list[str]
