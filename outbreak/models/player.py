"""Player model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from outbreak.config import PLAYER_MAX_HEALTH, PLAYER_MAX_HUNGER, PLAYER_STARTING_AMMO
from outbreak.models.items import ALWAYS_AVAILABLE, Inventory, ItemId


def _require_non_negative(amount: int) -> int:
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")
    return amount


class Player(BaseModel):
    """
    The survivor: health, hunger, ammo, inventory and equipped weapon.

    Every assignment is validated, so health and hunger stay inside
    [0, 100] and ammo stays non-negative. Inventory and weapon are private
    and change only through the methods below.
    """

    model_config = ConfigDict(validate_assignment=True)

    MAX_HEALTH: ClassVar[int] = PLAYER_MAX_HEALTH
    MAX_HUNGER: ClassVar[int] = PLAYER_MAX_HUNGER

    health: int = Field(default=PLAYER_MAX_HEALTH, description="Health, clamped to [0, 100]")
    hunger: int = Field(default=0, description="Hunger, clamped to [0, 100]; 100 means starving")
    ammo: int = Field(ge=0, default=PLAYER_STARTING_AMMO, description="Rounds of ammo")

    _inventory: Inventory = PrivateAttr(default_factory=Inventory)
    _weapon: ItemId = PrivateAttr(default=ALWAYS_AVAILABLE)

    @field_validator("health")
    @classmethod
    def clamp_health(cls, value: int) -> int:
        return min(max(value, 0), cls.MAX_HEALTH)

    @field_validator("hunger")
    @classmethod
    def clamp_hunger(cls, value: int) -> int:
        return min(max(value, 0), cls.MAX_HUNGER)

    @property
    def weapon(self) -> ItemId:
        """Currently equipped weapon."""
        return self._weapon

    @property
    def items(self) -> tuple[ItemId, ...]:
        """Inventory contents in insertion order."""
        return self._inventory.items

    # Health

    def take_damage(self, amount: int) -> None:
        """Subtract health, never dropping below zero."""
        self.health = self.health - _require_non_negative(amount)

    def heal(self, amount: int) -> None:
        """Add health, capped at the maximum."""
        self.health = self.health + _require_non_negative(amount)

    def is_alive(self) -> bool:
        return self.health > 0

    # Hunger

    def increase_hunger(self, amount: int) -> None:
        self.hunger = self.hunger + _require_non_negative(amount)

    def decrease_hunger(self, amount: int) -> None:
        self.hunger = self.hunger - _require_non_negative(amount)

    def is_starving(self) -> bool:
        return self.hunger >= self.MAX_HUNGER

    # Ammo

    def use_ammo(self, count: int = 1) -> bool:
        """Spend ammo only if enough is available. Returns whether it was spent."""
        if self.ammo >= _require_non_negative(count):
            self.ammo = self.ammo - count
            return True
        return False

    def add_ammo(self, count: int) -> None:
        self.ammo = self.ammo + _require_non_negative(count)

    # Inventory

    def add_item(self, item: ItemId) -> None:
        self._inventory.add(item)

    def remove_item(self, item: ItemId) -> bool:
        """
        Remove the first copy of an item.

        If the last copy of the equipped item is removed, the player falls
        back to the always-available knife.

        Returns:
            True if a copy was found and removed, False otherwise
        """
        removed = self._inventory.remove(item)
        if removed and item == self._weapon and item not in self._inventory:
            self._weapon = ALWAYS_AVAILABLE
        return removed

    def has_item(self, item: ItemId) -> bool:
        return item in self._inventory

    def item_at(self, index: int):
        """Item in a 0-based inventory slot, or None if out of range."""
        return self._inventory.at(index)

    # Equipment

    def set_weapon(self, item: ItemId) -> bool:
        """
        Equip a weapon. Only the knife or an owned item can be equipped;
        anything else leaves the current weapon in place.

        Returns:
            True if the weapon was equipped
        """
        if item == ALWAYS_AVAILABLE or self.has_item(item):
            self._weapon = ItemId(item)
            return True
        return False
