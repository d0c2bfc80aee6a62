"""Item identifiers, weapon tables and the player inventory."""

from enum import Enum
from typing import Optional


class ItemId(str, Enum):
    """Closed set of item identifiers."""

    CANNED_FOOD = "Canned Food"
    AMMO_PACK = "Ammo Pack"
    MEDKIT = "Medkit"
    PISTOL = "Pistol"
    SHOTGUN = "Shotgun"
    MOLOTOV = "Molotov"
    MACHETE = "Machete"
    KNIFE = "Knife"


# Equipment entry that is always available without being owned
ALWAYS_AVAILABLE = ItemId.KNIFE

# Ranged weapons: damage range and ammo cost per shot
RANGED_DAMAGE: dict[ItemId, tuple[int, int]] = {
    ItemId.SHOTGUN: (30, 45),
    ItemId.PISTOL: (16, 26),
}
AMMO_COST: dict[ItemId, int] = {
    ItemId.SHOTGUN: 2,
    ItemId.PISTOL: 1,
}

# Melee damage by equipped weapon; anything not listed fights like a knife
MELEE_DAMAGE: dict[ItemId, tuple[int, int]] = {
    ItemId.SHOTGUN: (20, 30),
    ItemId.PISTOL: (8, 14),
    ItemId.MACHETE: (18, 28),
    ItemId.MOLOTOV: (35, 50),
    ItemId.KNIFE: (8, 15),
}
DEFAULT_MELEE_DAMAGE = MELEE_DAMAGE[ItemId.KNIFE]


def is_ranged(item: ItemId) -> bool:
    """Whether the item can be fired."""
    return item in RANGED_DAMAGE


def melee_damage_range(item: ItemId) -> tuple[int, int]:
    """Melee damage range for an equipped item."""
    return MELEE_DAMAGE.get(item, DEFAULT_MELEE_DAMAGE)


class Inventory:
    """
    Ordered multiset of item identifiers.

    Insertion order is preserved and duplicates are allowed. Callers only
    ever see an immutable view through ``items``.
    """

    def __init__(self, items: Optional[list[ItemId]] = None) -> None:
        self._items: list[ItemId] = list(items or [])

    @property
    def items(self) -> tuple[ItemId, ...]:
        """Snapshot of the inventory in insertion order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def add(self, item: ItemId) -> None:
        """Append an item to the end of the inventory."""
        self._items.append(ItemId(item))

    def remove(self, item: ItemId) -> bool:
        """Remove the first matching item. Returns False if none was owned."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def count(self, item: ItemId) -> int:
        """Number of copies owned."""
        return self._items.count(item)

    def at(self, index: int) -> Optional[ItemId]:
        """Item at a 0-based slot, or None when the slot does not exist."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None
