"""Inventory station port (abstract interface).

The orchestrator programs against this contract; adapters decide where the
stock numbers actually come from. Absence of stock is reported only through
the boolean return values, never as an exception.
"""

from abc import ABC, abstractmethod


class InventoryStation(ABC):
    """Abstract inventory station interface."""

    @abstractmethod
    def check_stock(self, product_id: str, quantity: int) -> bool:
        """Return True when `quantity` units of `product_id` are available.

        Must be pure: repeated calls with the same arguments return the same
        answer and change nothing.
        """
        ...

    @abstractmethod
    def reserve(self, product_id: str, quantity: int) -> bool:
        """Reserve `quantity` units for an order in progress."""
        ...

    @abstractmethod
    def commit(self, product_id: str, quantity: int) -> None:
        """Decrement stock for a completed order. Best effort; never fails."""
        ...
