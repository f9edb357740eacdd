"""Inventory station factory.

Provides get_inventory() / set_inventory() to swap implementations. The
INVENTORY_ADAPTER environment variable selects the default adapter.
"""

import os

from inventory.station.port import InventoryStation

_current_inventory: InventoryStation | None = None


def get_inventory() -> InventoryStation:
    """Return the current inventory station. Defaults to the simulated one."""
    global _current_inventory
    if _current_inventory is None:
        adapter = os.environ.get("INVENTORY_ADAPTER", "simulated")
        if adapter == "simulated":
            from inventory.station.simulated import SimulatedInventoryStation

            _current_inventory = SimulatedInventoryStation()
        else:
            raise ValueError(f"Unknown inventory adapter: {adapter}")
    return _current_inventory


def set_inventory(station: InventoryStation) -> None:
    """Override the active inventory station (useful for tests)."""
    global _current_inventory
    _current_inventory = station


def reset_inventory() -> None:
    """Reset to default inventory station."""
    global _current_inventory
    _current_inventory = None
