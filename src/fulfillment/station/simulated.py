"""Simulated delivery station — deterministic carrier for testing and development.

Shipping zones are picked by the first digit of the destination code:

    "0..."  metropolitan   15.50,  2 days
    "1..."  regional       25.00,  5 days
    other   remote         35.00, 10 days

Tracking status is a pure function of the token: a stable hash modulo 4
picks one of the four shipment states. There is no real tracking behind it.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import uuid4

import structlog

from fulfillment.station.port import DeliveryStation, DeliveryStatus
from shared.hashing import stable_hash

logger = structlog.get_logger(__name__)

TRACKING_PREFIX = "TRACK"


@dataclass(frozen=True)
class ShippingZone:
    name: str
    cost: Decimal
    days: int


METROPOLITAN = ShippingZone(name="metropolitan", cost=Decimal("15.50"), days=2)
REGIONAL = ShippingZone(name="regional", cost=Decimal("25.00"), days=5)
REMOTE = ShippingZone(name="remote", cost=Decimal("35.00"), days=10)

_ZONES_BY_LEADING_DIGIT = {
    "0": METROPOLITAN,
    "1": REGIONAL,
}

_STATUS_BY_BUCKET = (
    DeliveryStatus.IN_PREPARATION,
    DeliveryStatus.IN_TRANSIT,
    DeliveryStatus.DELIVERED,
    DeliveryStatus.AWAITING_PICKUP,
)


def zone_for(zip_code: str | None) -> ShippingZone:
    if not zip_code:
        return REMOTE
    return _ZONES_BY_LEADING_DIGIT.get(zip_code[0], REMOTE)


class SimulatedDeliveryStation(DeliveryStation):
    def quote_cost(self, zip_code: str | None) -> Decimal:
        zone = zone_for(zip_code)
        logger.debug("shipping_quoted", zip_code=zip_code, zone=zone.name, cost=str(zone.cost))
        return zone.cost

    def estimate_days(self, zip_code: str | None) -> int:
        zone = zone_for(zip_code)
        logger.debug("delivery_estimated", zip_code=zip_code, zone=zone.name, days=zone.days)
        return zone.days

    def schedule(self, order_id: str, address: str, zip_code: str) -> str:
        tracking_token = f"{TRACKING_PREFIX}-{order_id}-{uuid4().hex[:6].upper()}"
        logger.info(
            "delivery_scheduled",
            order_id=order_id,
            zip_code=zip_code,
            zone=zone_for(zip_code).name,
            tracking_token=tracking_token,
        )
        return tracking_token

    def status(self, tracking_token: str | None) -> DeliveryStatus:
        if tracking_token is None or not tracking_token.startswith(TRACKING_PREFIX):
            return DeliveryStatus.INVALID_CODE
        return _STATUS_BY_BUCKET[stable_hash(tracking_token) % len(_STATUS_BY_BUCKET)]
