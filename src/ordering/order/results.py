"""Result records returned by the order orchestrator.

Each is built once per call and never mutated. `to_dict()` gives the flat
key/value shape the HTTP layer returns.
"""

from dataclasses import dataclass
from decimal import Decimal

from fulfillment.station import DeliveryStatus
from payments.station import TransactionStatus


@dataclass(frozen=True)
class OrderOutcome:
    """Unified result of processing one order.

    Identifiers are only populated on success; on failure `message` says
    which step declined the order.
    """

    success: bool
    message: str
    order_id: str | None = None
    payment_reference: str | None = None
    tracking_token: str | None = None

    @classmethod
    def declined(cls, message: str) -> "OrderOutcome":
        return cls(success=False, message=message)

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "orderId": self.order_id,
            "transactionId": self.payment_reference,
            "trackingCode": self.tracking_token,
        }


@dataclass(frozen=True)
class AvailabilityResult:
    product_id: str
    requested_quantity: int
    available: bool

    def to_dict(self) -> dict:
        return {
            "productId": self.product_id,
            "requestedQuantity": self.requested_quantity,
            "available": self.available,
        }

    def __str__(self) -> str:
        return (
            f"Product {self.product_id}: {self.requested_quantity} unit(s) "
            f"{'available' if self.available else 'unavailable'}"
        )


@dataclass(frozen=True)
class ShippingQuote:
    zip_code: str
    cost: Decimal
    estimated_days: int

    def to_dict(self) -> dict:
        return {
            "zipCode": self.zip_code,
            "cost": float(self.cost),
            "estimatedDays": self.estimated_days,
        }

    def __str__(self) -> str:
        return f"Destination {self.zip_code}: {self.cost:.2f} in {self.estimated_days} day(s)"


@dataclass(frozen=True)
class OrderStatusReport:
    order_id: str
    payment_status: TransactionStatus
    delivery_status: DeliveryStatus

    def to_dict(self) -> dict:
        return {
            "orderId": self.order_id,
            "paymentStatus": self.payment_status.value,
            "deliveryStatus": self.delivery_status.value,
        }

    def __str__(self) -> str:
        return f"Order {self.order_id} | Payment: {self.payment_status.value} | Delivery: {self.delivery_status.value}"
