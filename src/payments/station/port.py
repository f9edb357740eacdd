"""Payment station port (abstract interface).

Defines the contract that all payment adapters must implement, so the
orchestrator never depends on a concrete processor. Declines are return
values: `validate_credentials` answers False, `authorize` answers None.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum


class TransactionStatus(Enum):
    APPROVED = "APPROVED"
    NOT_FOUND = "NOT_FOUND"


class PaymentStation(ABC):
    """Abstract payment station interface."""

    @abstractmethod
    def validate_credentials(self, card_number: str | None, cvv: str | None, expiry_date: str | None) -> bool:
        """Check the card data. Gives no field-level diagnostics."""
        ...

    @abstractmethod
    def authorize(self, amount: Decimal, card_number: str) -> str | None:
        """Charge `amount`. Returns a payment reference, or None when declined."""
        ...

    @abstractmethod
    def get_status(self, reference: str | None) -> TransactionStatus:
        """Report the status of a payment reference."""
        ...
