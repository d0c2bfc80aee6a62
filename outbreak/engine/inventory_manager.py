"""Inventory management system."""

import logging
from typing import Optional

from outbreak.engine.history import EventLog
from outbreak.models.events import EventKind
from outbreak.models.items import ItemId
from outbreak.models.player import Player

logger = logging.getLogger(__name__)


class InventoryManager:
    """Handles consumable use, equipping and dropping items."""

    MEDKIT_HEAL = 30
    FOOD_HUNGER_RELIEF = 30

    @staticmethod
    def use_medkit(player: Player, history: EventLog) -> bool:
        """
        Consume a Medkit and heal.

        Returns:
            True if a Medkit was used, False if none was owned
        """
        if not player.remove_item(ItemId.MEDKIT):
            history.record(EventKind.NO_MEDKIT)
            return False
        player.heal(InventoryManager.MEDKIT_HEAL)
        history.record(EventKind.MEDKIT_USED, healed=InventoryManager.MEDKIT_HEAL, health=player.health)
        return True

    @staticmethod
    def eat_food(player: Player, history: EventLog) -> bool:
        """
        Consume Canned Food and reduce hunger.

        Returns:
            True if food was eaten, False if none was owned
        """
        if not player.remove_item(ItemId.CANNED_FOOD):
            history.record(EventKind.NO_FOOD)
            return False
        player.decrease_hunger(InventoryManager.FOOD_HUNGER_RELIEF)
        history.record(EventKind.FOOD_EATEN, relief=InventoryManager.FOOD_HUNGER_RELIEF, hunger=player.hunger)
        return True

    @staticmethod
    def equip_slot(player: Player, slot: Optional[int], history: EventLog) -> bool:
        """
        Equip the item in a 0-based inventory slot.

        Args:
            player: Player whose inventory is used
            slot: Slot index chosen by the player (may be None or out of range)
            history: Event log

        Returns:
            True if the weapon changed hands
        """
        item = player.item_at(slot) if slot is not None else None
        if item is None:
            history.record(EventKind.INVALID_SELECTION, slot=slot, size=len(player.items))
            return False
        player.set_weapon(item)
        logger.debug(f"Equipped {item.value} from slot {slot}")
        history.record(EventKind.WEAPON_EQUIPPED, weapon=player.weapon)
        return True

    @staticmethod
    def drop_slot(player: Player, slot: Optional[int], history: EventLog) -> bool:
        """
        Drop the item in a 0-based inventory slot.

        The first copy of that item is removed, which is the selected slot
        or an earlier duplicate of it.

        Returns:
            True if an item was dropped
        """
        item = player.item_at(slot) if slot is not None else None
        if item is None:
            history.record(EventKind.INVALID_SELECTION, slot=slot, size=len(player.items))
            return False
        player.remove_item(item)
        history.record(EventKind.ITEM_DROPPED, item=item)
        return True
