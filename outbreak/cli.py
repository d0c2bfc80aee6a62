"""Plain-text console front end."""

import logging
import sys
from enum import Enum
from typing import Callable, Optional, Sequence, TypeVar

from outbreak.config import GameConfig, GameConfigManager
from outbreak.engine.action_parser import ActionParser
from outbreak.engine.dice import DiceRoller
from outbreak.engine.game_engine import GameEngine
from outbreak.models.actions import DecisionPoint, Ending
from outbreak.models.events import EventKind, GameEvent
from outbreak.models.items import ItemId
from outbreak.models.state import StatusSnapshot

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# One line of narration per event kind; unknown keys fall back to the kind name
NARRATION: dict[EventKind, str] = {
    EventKind.GAME_STARTED: "WELCOME: THE OUTBREAK SURVIVOR. Objective: reach the military base alive.",
    EventKind.LOCATION_ENTERED: "=== {location} ===\n{description}",
    EventKind.INVALID_CHOICE: "Invalid choice. Time passes...",
    EventKind.QUIET_ARRIVAL: "The area seems quiet... for now.",
    EventKind.FOUND_FOOD: "You find canned food on a shelf.",
    EventKind.FOUND_AMMO: "You discover ammo. Ammo +{amount}",
    EventKind.TRAP_TRIGGERED: "A hidden trap injures you for {damage} damage!",
    EventKind.RECEIVED_MEDKIT: "A friendly survivor gives you a Medkit.",
    EventKind.NOTHING_OF_INTEREST: "Nothing of interest here.",
    EventKind.FOUND_WEAPON: "You find a weapon: {item}",
    EventKind.SEARCH_STARTED: "You search the area carefully...",
    EventKind.LOOT_FOUND: "You found: {item}",
    EventKind.AMMO_GAINED: "Ammo +{amount}",
    EventKind.NOTHING_FOUND: "You find nothing but a cold wind.",
    EventKind.ADVERSARY_APPEARED: "A {name} lunges out! ({health} HP)",
    EventKind.AMBUSH: "Ambush! {count} zombie(s) attack!",
    EventKind.MOVED: "You proceed to {location}.",
    EventKind.END_OF_ROAD: "This is as far as you can go.",
    EventKind.SHOT_FIRED: "You fire your {weapon} and deal {damage} damage.",
    EventKind.NO_RANGED_WEAPON: "You can't shoot with a {weapon}! Equip a gun.",
    EventKind.NOT_ENOUGH_AMMO: "Not enough ammo for the {weapon}.",
    EventKind.MELEE_HIT: "You attack with your {weapon} and deal {damage} damage.",
    EventKind.PUSH_ESCAPED: "You shove the zombie and break free!",
    EventKind.PUSH_FAILED: "Your push fails! The zombie grabs you!",
    EventKind.HIDE_SUCCEEDED: "You hide behind debris... the zombie loses sight of you!",
    EventKind.HIDE_FAILED: "You fail to hide! The zombie spots you!",
    EventKind.HESITATED: "You hesitate and lose time.",
    EventKind.ADVERSARY_STRUCK: "The zombie attacks and deals {damage} damage!",
    EventKind.ADVERSARY_DEFEATED: "{name} defeated!",
    EventKind.AMMO_DROPPED: "The zombie dropped ammo. Ammo +{amount}",
    EventKind.PLAYER_DOWN: "You have been mortally wounded...",
    EventKind.BOSS_APPEARED: "THE {name} APPROACHES! ({health} HP)",
    EventKind.HEADSHOT: "Headshot! The boss takes {damage} damage.",
    EventKind.HEADSHOT_MISSED: "You miss the head!",
    EventKind.LEG_SHOT: "You strike the legs for {damage} damage and slow the boss.",
    EventKind.MOLOTOV_HIT: "Molotov hits! The boss takes {damage} damage.",
    EventKind.NO_MOLOTOV: "No Molotov found!",
    EventKind.BARRICADED: "You barricade. Incoming damage is reduced this turn.",
    EventKind.BOSS_INDECISION: "Indecision costs you.",
    EventKind.BOSS_STRUCK: "The Titan slams you for {damage} damage!",
    EventKind.BOSS_DEFEATED: "The {name} collapses. You've beaten it!",
    EventKind.MEDKIT_USED: "You used a Medkit. Health +{healed}.",
    EventKind.NO_MEDKIT: "No Medkit available.",
    EventKind.FOOD_EATEN: "Ate canned food. Hunger -{relief}.",
    EventKind.NO_FOOD: "No canned food.",
    EventKind.SHORT_REST: "Short rest: Health +{healed}, Hunger +{hunger_gained}",
    EventKind.IDLE_REST: "You do nothing...",
    EventKind.INVENTORY_EMPTY: "Inventory empty.",
    EventKind.WEAPON_EQUIPPED: "Equipped: {weapon}",
    EventKind.ITEM_DROPPED: "Dropped: {item}",
    EventKind.INVALID_SELECTION: "Invalid selection.",
}

USAGE = "usage: outbreak [SEED]"

ENDINGS: dict[Ending, str] = {
    Ending.STARVED: "YOU STARVED. Your journey ends here.",
    Ending.KILLED: "YOU WERE KILLED BY THE UNDEAD. Game Over.",
    Ending.RESCUED: "RESCUE! You reached the Military Base and are airlifted to safety.",
}


def _plain(value):
    return value.value if isinstance(value, Enum) else value


class ConsoleInterface:
    """Line-based input and output on the terminal."""

    def __init__(
        self,
        parser: Optional[ActionParser] = None,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.parser = parser or ActionParser()
        self._read = read or input
        self._write = write or print

    def choose_action(self, point: DecisionPoint, options: Sequence[E]) -> Optional[E]:
        self._write(self.parser.prompt_for(point))
        for option in options:
            label = option.value.replace("_", " ").capitalize()
            self._write(f"{self.parser.shortcut(option)}) {label}")
        return self.parser.parse_action(self._read("> "), options)

    def choose_slot(self, point: DecisionPoint, items: Sequence[ItemId]) -> Optional[int]:
        for number, item in enumerate(items, start=1):
            self._write(f"{number}) {item.value}")
        return self.parser.parse_slot(self._read(f"{self.parser.prompt_for(point)}: "))

    def render(self, snapshot: StatusSnapshot) -> None:
        self._write(
            f"Health: {snapshot.health:3d}  Hunger: {snapshot.hunger:3d}  "
            f"Ammo: {snapshot.ammo:3d}  Weapon: {snapshot.weapon.value}"
        )
        self._write("Inventory: " + (", ".join(item.value for item in snapshot.inventory) or "-"))
        if snapshot.adversary_health is not None:
            self._write(f"{snapshot.adversary_name} HP: {snapshot.adversary_health}/{snapshot.adversary_max_health}")

    def notify(self, event: GameEvent) -> None:
        if event.kind is EventKind.GAME_OVER:
            self._write(ENDINGS[event.data["ending"]])
            return
        template = NARRATION.get(event.kind, event.kind.value)
        data = {key: _plain(value) for key, value in event.data.items()}
        try:
            self._write(template.format(**data))
        except KeyError:
            logger.warning(f"Missing narration data for {event.kind.value}: {event.data}")
            self._write(event.kind.value)


def configure_logging(config: GameConfig) -> None:
    logging.basicConfig(level=config.log_level, format=config.log_format)


def main(argv: Optional[list[str]] = None) -> int:
    """Console entry point. An optional first argument overrides the seed."""
    args = sys.argv[1:] if argv is None else argv
    try:
        manager = GameConfigManager()
        if args:
            manager.update_config(GameConfig.model_validate({**manager.config.model_dump(), "seed": args[0]}))
    except ValueError as e:
        logger.debug(f"Rejected configuration: {e}")
        print(f"{USAGE}\nerror: seed must be an integer", file=sys.stderr)
        return 2
    config = manager.config
    configure_logging(config)

    interface = ConsoleInterface()
    engine = GameEngine(interface=interface, dice=DiceRoller(config.seed))
    try:
        ending = engine.run()
    except (KeyboardInterrupt, EOFError):
        logger.info("Game interrupted")
        return 130

    if config.show_log:
        for event in engine.history.list_events():
            print(f"{event.sequence_number:4d} {event.kind.value} {event.data}")
    return 0 if ending is Ending.RESCUED else 1


if __name__ == "__main__":
    sys.exit(main())
