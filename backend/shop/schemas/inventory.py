"""
Pydantic schemas for inventory entries

An inventory is a fixed mapping of item name to integer price. Each entry
is validated through ``InventoryEntry`` when the service is built, so a
seed with a negative or non-integer price never reaches a handler.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Mapping


class InventoryEntry(BaseModel):
    """
    Single item of the inventory

    Fields:
    - item: item name, the unique key of the inventory
    - price: non-negative integer price
    """
    model_config = ConfigDict(frozen=True, strict=True)

    item: str = Field(..., description="Item name", examples=["shoes"])
    price: int = Field(..., ge=0, description="Price of the item", examples=[50])

    def render(self) -> str:
        """Listing line for this entry, e.g. ``shoes: 50``"""
        return f"{self.item}: {self.price}"


def validate_inventory(seed: Mapping[str, int]) -> Dict[str, int]:
    """Validate every entry of ``seed`` and return a private copy of it."""
    entries: List[InventoryEntry] = [
        InventoryEntry(item=item, price=price) for item, price in seed.items()
    ]
    return {entry.item: entry.price for entry in entries}
