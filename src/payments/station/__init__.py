"""Payment station factory.

Provides get_payments() / set_payments() to swap implementations:
- SimulatedPaymentStation for development and testing (default)

PAYMENT_ADAPTER selects the default adapter; the simulated station's
latency comes from the application config.
"""

import os

from payments.station.port import PaymentStation, TransactionStatus
from shared.config import get_config

_current_payments: PaymentStation | None = None


def get_payments() -> PaymentStation:
    """Return the current payment station. Defaults to the simulated one."""
    global _current_payments
    if _current_payments is None:
        adapter = os.environ.get("PAYMENT_ADAPTER", "simulated")
        if adapter == "simulated":
            from payments.station.simulated import SimulatedPaymentStation

            _current_payments = SimulatedPaymentStation(latency_seconds=get_config().payment_latency_seconds)
        else:
            raise ValueError(f"Unknown payment adapter: {adapter}")
    return _current_payments


def set_payments(station: PaymentStation) -> None:
    """Override the active payment station (useful for tests)."""
    global _current_payments
    _current_payments = station


def reset_payments() -> None:
    """Reset to default payment station."""
    global _current_payments
    _current_payments = None


__all__ = ["PaymentStation", "TransactionStatus", "get_payments", "set_payments", "reset_payments"]
