"""Simulated inventory station.

There is no stock table behind this adapter. Availability is a deterministic
function of the product identifier: a product is in stock when the stable
hash of its id is even, up to MAX_UNITS_PER_REQUEST units per call.

Reservation is the same check as availability; nothing is set aside, so two
orders can reserve the same units.
"""

import structlog

from inventory.station.port import InventoryStation
from shared.hashing import stable_hash

logger = structlog.get_logger(__name__)

MAX_UNITS_PER_REQUEST = 10


class SimulatedInventoryStation(InventoryStation):
    def __init__(self, max_units_per_request: int = MAX_UNITS_PER_REQUEST) -> None:
        self.max_units_per_request = max_units_per_request

    def check_stock(self, product_id: str, quantity: int) -> bool:
        in_stock = stable_hash(product_id) % 2 == 0 and quantity <= self.max_units_per_request
        logger.debug("stock_checked", product_id=product_id, quantity=quantity, available=in_stock)
        return in_stock

    def reserve(self, product_id: str, quantity: int) -> bool:
        reserved = self.check_stock(product_id, quantity)
        if reserved:
            logger.info("stock_reserved", product_id=product_id, quantity=quantity)
        else:
            logger.warning("stock_reservation_failed", product_id=product_id, quantity=quantity)
        return reserved

    def commit(self, product_id: str, quantity: int) -> None:
        logger.info("stock_committed", product_id=product_id, quantity=quantity)
