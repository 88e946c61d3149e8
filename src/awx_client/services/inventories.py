"""Inventory endpoints."""

from typing import Any, TypeAlias

import structlog

from ..types import Inventory, InventoryUpdate, Page
from .base import API_ROOT, Service, validate_params

logger = structlog.get_logger(__name__)

ENDPOINT = f"{API_ROOT}/inventories/"

CREATE_REQUIRED = ("name", "organization")

InventoryUpdates: TypeAlias = list[InventoryUpdate]


class InventoryService(Service):
    """Manage inventories and trigger inventory source syncs."""

    def list(self, params: dict[str, str] | None = None) -> Page[Inventory]:
        """Fetch one page of inventories."""
        return self.transport.get(ENDPOINT, Page[Inventory], params) or Page[Inventory]()

    def get(self, inventory_id: int) -> Inventory | None:
        """Fetch a single inventory by id."""
        return self.transport.get(f"{ENDPOINT}{inventory_id}", Inventory)

    def create(self, data: dict[str, Any]) -> Inventory | None:
        """Create an inventory; name and organization are required."""
        validate_params(data, CREATE_REQUIRED)
        return self.transport.post(ENDPOINT, data, Inventory)

    def update(self, inventory_id: int, data: dict[str, Any]) -> Inventory | None:
        """Partially update an inventory."""
        return self.transport.patch(f"{ENDPOINT}{inventory_id}", data, Inventory)

    def delete(self, inventory_id: int) -> None:
        """Delete an inventory."""
        self.transport.delete(f"{ENDPOINT}{inventory_id}")

    def sync_inventory_sources(self, inventory_id: int) -> InventoryUpdates:
        """Start an update of every source of an inventory.

        Returns:
            One entry per started inventory update; empty if the server
            returned no body.
        """
        endpoint = f"{ENDPOINT}{inventory_id}/update_inventory_sources/"
        updates = self.transport.post(endpoint, None, InventoryUpdates) or []
        logger.info(
            "Started inventory source sync",
            inventory_id=inventory_id,
            updates=len(updates),
        )
        return updates
