"""Warehouse stock manager over electronics and grocery repositories.

Repository errors are reported through the module logger and the operation
returns False; nothing here raises for a missing or duplicate item.
"""

from __future__ import annotations

import logging
from typing import Hashable

from recordbook.exceptions import RecordbookError
from recordbook.models import ElectronicItem, GroceryItem
from recordbook.repository import InventoryRepository, S

logger = logging.getLogger(__name__)


class WarehouseManager:
    """Owns one inventory repository per product line."""

    def __init__(self) -> None:
        self.electronics: InventoryRepository[ElectronicItem] = InventoryRepository()
        self.groceries: InventoryRepository[GroceryItem] = InventoryRepository()

    def add_item(self, repo: InventoryRepository[S], item: S) -> bool:
        try:
            repo.add(item)
        except RecordbookError as e:
            logger.warning("Cannot add item: %s", e)
            return False
        return True

    def increase_stock(self, repo: InventoryRepository[S], item_id: Hashable, amount: int) -> bool:
        """Add amount to an item's quantity.

        Args:
            repo: Repository holding the item.
            item_id: Id of the item to restock.
            amount: Units to add. A negative amount that would take the
                quantity below zero is rejected.

        Returns:
            True if the quantity was updated.
        """
        try:
            item = repo.get_by_id(item_id)
            repo.update_quantity(item_id, item.quantity + amount)
        except RecordbookError as e:
            logger.warning("Cannot increase stock for %s: %s", item_id, e)
            return False
        logger.info("Stock for item %s is now %d", item_id, item.quantity)
        return True

    def remove_item(self, repo: InventoryRepository[S], item_id: Hashable) -> bool:
        try:
            repo.remove(item_id)
        except RecordbookError as e:
            logger.warning("Cannot remove item %s: %s", item_id, e)
            return False
        logger.info("Removed item %s", item_id)
        return True
