"""Delivery station port — abstract interface for shipping integrations.

All delivery adapters must implement this interface. The orchestrator
programs against the port; adapters are swapped via configuration.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum


class DeliveryStatus(Enum):
    IN_PREPARATION = "IN_PREPARATION"
    IN_TRANSIT = "IN_TRANSIT"
    DELIVERED = "DELIVERED"
    AWAITING_PICKUP = "AWAITING_PICKUP"
    INVALID_CODE = "INVALID_CODE"


class DeliveryStation(ABC):
    """Abstract interface for delivery adapters."""

    @abstractmethod
    def quote_cost(self, zip_code: str | None) -> Decimal:
        """Shipping cost to the destination code. Never negative."""
        ...

    @abstractmethod
    def estimate_days(self, zip_code: str | None) -> int:
        """Estimated lead time, in whole days, to the destination code."""
        ...

    @abstractmethod
    def schedule(self, order_id: str, address: str, zip_code: str) -> str:
        """Schedule a shipment and return its tracking token. Cannot fail."""
        ...

    @abstractmethod
    def status(self, tracking_token: str | None) -> DeliveryStatus:
        """Current status of a shipment.

        Tokens that do not have the expected shape map to INVALID_CODE.
        """
        ...
