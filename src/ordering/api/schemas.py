"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from
the internal OrderRequest value object. Malformed requests are rejected
here, before they reach the orchestrator.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class ProcessOrderRequest(BaseModel):
    product_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)
    amount: float = Field(ge=0.01)
    card_number: str = Field(min_length=1)
    cvv: str = Field(min_length=3, max_length=4)
    expiry_date: str = Field(min_length=1)
    address: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "PROD-002",
                    "quantity": 2,
                    "amount": 199.90,
                    "card_number": "4111111111111111",
                    "cvv": "123",
                    "expiry_date": "12/29",
                    "address": "Rua das Flores, 100",
                    "zip_code": "01310-100",
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderOutcomeResponse(BaseModel):
    success: bool
    message: str
    orderId: str | None = None
    transactionId: str | None = None
    trackingCode: str | None = None


class AvailabilityResponse(BaseModel):
    productId: str
    requestedQuantity: int
    available: bool


class ShippingQuoteResponse(BaseModel):
    zipCode: str
    cost: float
    estimatedDays: int


class OrderStatusResponse(BaseModel):
    orderId: str
    paymentStatus: str
    deliveryStatus: str
    summary: str
