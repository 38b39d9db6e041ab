"""
Inventory business logic service

This module holds the only business logic of the shop: answering the two
queries served over HTTP against a fixed, in-memory inventory.

Main features:
- Listing: every item rendered as a ``"<item>: <price>"`` line
- Price lookup: the price of a single item, or ``ItemNotFoundError``

Design principles:
- The inventory is an immutable value injected at construction
- The mapping is never mutated after startup, so concurrent reads from
  request threads need no locking
- Enumeration order is whatever the mapping yields; callers must not rely on it
"""
from types import MappingProxyType
from typing import Iterator, Mapping
import structlog

from shop.core.exceptions import ItemNotFoundError
from shop.schemas.inventory import InventoryEntry, validate_inventory

logger = structlog.get_logger(__name__)


class InventoryService:
    """
    Inventory service class

    Owns the item-to-price mapping exclusively. The seed passed in is
    validated and copied, and only a read-only view is ever exposed, so the
    caller keeping a reference to its own dict cannot change what is served.

    Usage:
    ```python
    service = InventoryService({"shoes": 50, "socks": 5})
    service.get_price("shoes")   # 50
    list(service.iter_lines())   # ["shoes: 50\\n", "socks: 5\\n"]
    ```
    """

    def __init__(self, inventory: Mapping[str, int]):
        """
        Build the service

        Args:
            inventory (Mapping[str, int]): item name to non-negative price

        Raises:
            pydantic.ValidationError: a price is negative or not an integer
        """
        self._inventory = MappingProxyType(validate_inventory(inventory))

    def __len__(self) -> int:
        return len(self._inventory)

    def __contains__(self, item: object) -> bool:
        return item in self._inventory

    def items(self) -> Mapping[str, int]:
        """Read-only view of the inventory"""
        return self._inventory

    def iter_entries(self) -> Iterator[InventoryEntry]:
        for item, price in self._inventory.items():
            yield InventoryEntry(item=item, price=price)

    def iter_lines(self) -> Iterator[str]:
        """
        Listing of the whole inventory

        Lazily yields one ``"<item>: <price>\\n"`` line per entry, ready to
        be streamed into a response body.

        Returns:
            Iterator[str]: listing lines in mapping order
        """
        for entry in self.iter_entries():
            yield entry.render() + "\n"

    def get_price(self, item: str) -> int:
        """
        Price of a single item

        Args:
            item (str): item name as supplied by the client, may be empty

        Returns:
            int: the configured price

        Raises:
            ItemNotFoundError: ``item`` is not in the inventory
        """
        try:
            return self._inventory[item]
        except KeyError:
            logger.debug("Item not found", item=item)
            raise ItemNotFoundError(item) from None
