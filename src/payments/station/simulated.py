"""Simulated payment station.

Stands in for a card processor without any external calls:

- credentials are valid when the number has at least 16 characters, the
  security code exactly 3 and the expiry date looks like MM/YY;
- authorization sleeps for a fixed latency (a stand-in for the network
  round-trip) and approves any amount strictly below AUTHORIZATION_CEILING;
- get_status only inspects the shape of the reference. It does not look up
  any earlier authorization, so a well-formed but unknown reference still
  reports APPROVED.
"""

import re
import time
from decimal import Decimal
from uuid import uuid4

import structlog

from payments.station.port import PaymentStation, TransactionStatus

logger = structlog.get_logger(__name__)

AUTHORIZATION_CEILING = Decimal("1000")
DEFAULT_LATENCY_SECONDS = 0.5
REFERENCE_PREFIX = "TXN"

_EXPIRY_PATTERN = re.compile(r"\d{2}/\d{2}")


class SimulatedPaymentStation(PaymentStation):
    def __init__(self, latency_seconds: float = DEFAULT_LATENCY_SECONDS) -> None:
        self.latency_seconds = latency_seconds

    def validate_credentials(self, card_number: str | None, cvv: str | None, expiry_date: str | None) -> bool:
        valid = (
            card_number is not None
            and len(card_number) >= 16
            and cvv is not None
            and len(cvv) == 3
            and expiry_date is not None
            and _EXPIRY_PATTERN.fullmatch(expiry_date) is not None
        )
        logger.debug("card_validated", valid=valid)
        return valid

    def authorize(self, amount: Decimal, card_number: str) -> str | None:  # noqa: ARG002
        logger.info("payment_authorizing", amount=str(amount))
        if self.latency_seconds > 0:
            time.sleep(self.latency_seconds)

        if amount >= AUTHORIZATION_CEILING:
            logger.warning("payment_declined", amount=str(amount), reason="amount over ceiling")
            return None

        reference = f"{REFERENCE_PREFIX}-{uuid4().hex[:12].upper()}"
        logger.info("payment_approved", amount=str(amount), payment_reference=reference)
        return reference

    def get_status(self, reference: str | None) -> TransactionStatus:
        if reference is not None and reference.startswith(REFERENCE_PREFIX):
            return TransactionStatus.APPROVED
        return TransactionStatus.NOT_FOUND
