"""Delivery station abstraction — pluggable shipping integration."""

import os

from fulfillment.station.port import DeliveryStation, DeliveryStatus

_delivery_instance: DeliveryStation | None = None


def get_delivery() -> DeliveryStation:
    """Return the configured delivery station (singleton).

    Uses the simulated station by default. In production, configure via
    CARRIER_ADAPTER environment variable.
    """
    global _delivery_instance
    if _delivery_instance is None:
        adapter = os.environ.get("CARRIER_ADAPTER", "simulated")
        if adapter == "simulated":
            from fulfillment.station.simulated import SimulatedDeliveryStation

            _delivery_instance = SimulatedDeliveryStation()
        else:
            raise ValueError(f"Unknown carrier adapter: {adapter}")
    return _delivery_instance


def set_delivery(station: DeliveryStation) -> None:
    """Override the active delivery station (useful for tests)."""
    global _delivery_instance
    _delivery_instance = station


def reset_delivery():
    """Reset the delivery singleton (useful for testing)."""
    global _delivery_instance
    _delivery_instance = None


__all__ = ["DeliveryStation", "DeliveryStatus", "get_delivery", "set_delivery", "reset_delivery"]
