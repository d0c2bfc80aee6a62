"""Arrival events, searching and travel."""

import logging
from enum import Enum
from typing import Optional

from outbreak.engine.combat import CombatResolver
from outbreak.engine.dice import percent_check, roll_d100
from outbreak.engine.history import EventLog
from outbreak.engine.loot import SEARCH_LOOT, WEAPON_DROPS, draw_from_table
from outbreak.interface import RandomSource
from outbreak.models.actions import CombatOutcome
from outbreak.models.adversary import Adversary
from outbreak.models.events import EventKind
from outbreak.models.items import ItemId
from outbreak.models.player import Player
from outbreak.models.world import Location

logger = logging.getLogger(__name__)


class ArrivalEvent(str, Enum):
    """Random events that can happen when arriving somewhere dangerous."""

    FOOD = "food"
    AMMO = "ammo"
    TRAP = "trap"
    MEDIC = "medic"
    NOTHING = "nothing"
    WEAPON = "weapon"


class SearchResult(str, Enum):
    """How a search ended."""

    LOOT = "loot"
    NOTHING = "nothing"
    FOUGHT = "fought"
    SLIPPED_AWAY = "slipped_away"
    DIED = "died"


class TravelResult(str, Enum):
    """How an attempt to move on ended."""

    MOVED = "moved"
    END_OF_ROAD = "end_of_road"
    DIED = "died"


class EventEngine:
    """Resolves location arrivals, area searches and travel between locations."""

    ARRIVAL_EVENTS = tuple(ArrivalEvent)
    ARRIVAL_AMMO = (1, 4)
    TRAP_DAMAGE = (5, 20)
    EVENT_HUNGER = 5

    SEARCH_LOOT_CHANCE = 45
    SEARCH_ZOMBIE_CHANCE = 75  # rolls above the loot chance and up to this spawn a zombie
    SEARCH_ZOMBIE_HEALTH = (15, 30)
    SEARCH_ZOMBIE_ATTACK = (8, 12)
    AMMO_PACK_ROUNDS = (2, 6)
    SEARCH_HUNGER = 6

    AMBUSH_CHANCE = 20
    AMBUSH_SIZE = (1, 3)
    AMBUSH_ZOMBIE_HEALTH = (10, 25)
    AMBUSH_ZOMBIE_ATTACK = (6, 12)
    TRAVEL_HUNGER = 12

    def __init__(self, player: Player, dice: RandomSource, combat: CombatResolver, history: EventLog) -> None:
        self.player = player
        self.dice = dice
        self.combat = combat
        self.history = history
        self._arrival_handlers = {
            ArrivalEvent.FOOD: self._found_food,
            ArrivalEvent.AMMO: self._found_ammo,
            ArrivalEvent.TRAP: self._trap,
            ArrivalEvent.MEDIC: self._medic,
            ArrivalEvent.NOTHING: self._nothing,
            ArrivalEvent.WEAPON: self._found_weapon,
        }

    # Arrival

    def resolve_arrival(self, location: Location) -> Optional[ArrivalEvent]:
        """
        Roll against the location's danger level.

        Returns:
            The random event that happened, or None for a quiet arrival
        """
        roll = roll_d100(self.dice)
        if roll > location.danger_level:
            self.history.record(EventKind.QUIET_ARRIVAL, location=location.name)
            return None

        event = self.dice.choice(self.ARRIVAL_EVENTS)
        logger.debug(f"Arrival event at {location.name}: {event.value} (roll {roll} <= {location.danger_level})")
        self._arrival_handlers[event]()
        self.player.increase_hunger(self.EVENT_HUNGER)
        return event

    def _found_food(self) -> None:
        self.player.add_item(ItemId.CANNED_FOOD)
        self.history.record(EventKind.FOUND_FOOD, item=ItemId.CANNED_FOOD)

    def _found_ammo(self) -> None:
        gain = self.dice.randint(*self.ARRIVAL_AMMO)
        self.player.add_ammo(gain)
        self.history.record(EventKind.FOUND_AMMO, amount=gain)

    def _trap(self) -> None:
        damage = self.dice.randint(*self.TRAP_DAMAGE)
        self.player.take_damage(damage)
        self.history.record(EventKind.TRAP_TRIGGERED, damage=damage, health=self.player.health)

    def _medic(self) -> None:
        self.player.add_item(ItemId.MEDKIT)
        self.history.record(EventKind.RECEIVED_MEDKIT, item=ItemId.MEDKIT)

    def _nothing(self) -> None:
        self.history.record(EventKind.NOTHING_OF_INTEREST)

    def _found_weapon(self) -> None:
        weapon = draw_from_table(self.dice, WEAPON_DROPS)
        self.player.add_item(weapon)
        self.history.record(EventKind.FOUND_WEAPON, item=weapon)

    # Searching

    def search_area(self, location: Optional[str] = None) -> SearchResult:
        """
        Search the current area for loot.

        A completed search costs hunger. Slipping away from a zombie
        unharmed, or dying, ends the search before that cost is paid.
        """
        self.history.record(EventKind.SEARCH_STARTED, location=location)
        roll = roll_d100(self.dice)

        if roll <= self.SEARCH_LOOT_CHANCE:
            self._loot()
            result = SearchResult.LOOT
        elif roll <= self.SEARCH_ZOMBIE_CHANCE:
            zombie = self._spawn(self.SEARCH_ZOMBIE_HEALTH, self.SEARCH_ZOMBIE_ATTACK)
            health_before = self.player.health
            outcome = self.combat.resolve(zombie, location)
            if outcome.got_away and self.player.health == health_before:
                logger.info(f"Search abandoned after {outcome.value}")
                return SearchResult.SLIPPED_AWAY
            if outcome is CombatOutcome.PLAYER_DIED:
                return SearchResult.DIED
            result = SearchResult.FOUGHT
        else:
            self.history.record(EventKind.NOTHING_FOUND)
            result = SearchResult.NOTHING

        self.player.increase_hunger(self.SEARCH_HUNGER)
        return result

    def _loot(self) -> None:
        item = draw_from_table(self.dice, SEARCH_LOOT)
        self.history.record(EventKind.LOOT_FOUND, item=item)
        if item == ItemId.AMMO_PACK:
            gain = self.dice.randint(*self.AMMO_PACK_ROUNDS)
            self.player.add_ammo(gain)
            self.history.record(EventKind.AMMO_GAINED, amount=gain)
        else:
            self.player.add_item(item)

    # Travel

    def travel(self, at_final: bool, location: Optional[str] = None) -> TravelResult:
        """
        Move toward the next location, surviving a possible ambush first.

        Args:
            at_final: Whether the player already stands at the last location
            location: Current location name, for status snapshots

        Returns:
            MOVED if the caller should advance one position
        """
        if percent_check(self.dice, self.AMBUSH_CHANCE):
            count = self.dice.randint(*self.AMBUSH_SIZE)
            self.history.record(EventKind.AMBUSH, count=count)
            logger.info(f"Ambushed by {count} zombie(s)")
            for _ in range(count):
                zombie = self._spawn(self.AMBUSH_ZOMBIE_HEALTH, self.AMBUSH_ZOMBIE_ATTACK)
                self.combat.resolve(zombie, location)
                if not self.player.is_alive():
                    return TravelResult.DIED

        if at_final:
            self.history.record(EventKind.END_OF_ROAD)
            return TravelResult.END_OF_ROAD

        self.player.increase_hunger(self.TRAVEL_HUNGER)
        return TravelResult.MOVED

    def _spawn(self, health_range: tuple[int, int], attack_range: tuple[int, int]) -> Adversary:
        zombie = Adversary.spawn(self.dice, health_range, attack_range)
        self.history.record(EventKind.ADVERSARY_APPEARED, name=zombie.name, health=zombie.health)
        return zombie
