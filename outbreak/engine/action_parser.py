"""Parsing of typed player input into enumerated actions."""

import re
import unicodedata
from enum import Enum
from typing import Optional, Sequence, TypeVar

from outbreak.models.actions import (
    BossAction,
    CombatAction,
    DecisionPoint,
    InventoryAction,
    MenuAction,
    RestAction,
)

E = TypeVar("E", bound=Enum)


class ActionParser:
    """Turns raw console input into actions, or None when it is not recognized."""

    # Shortcut keys and word aliases, grouped by action enum since
    # CombatAction.USE_MEDKIT and RestAction.USE_MEDKIT compare equal
    ALIASES: dict[type, dict[Enum, tuple[str, ...]]] = {
        MenuAction: {
            MenuAction.SEARCH: ("a", "search"),
            MenuAction.MOVE: ("b", "move", "forward"),
            MenuAction.REST: ("c", "rest", "use item"),
            MenuAction.MANAGE_INVENTORY: ("d", "inventory", "equip"),
        },
        CombatAction: {
            CombatAction.SHOOT: ("a", "shoot"),
            CombatAction.MELEE: ("b", "melee"),
            CombatAction.PUSH: ("c", "push", "escape"),
            CombatAction.HIDE: ("d", "hide"),
            CombatAction.USE_MEDKIT: ("e", "medkit"),
        },
        BossAction: {
            BossAction.HEAD_SHOT: ("1", "head"),
            BossAction.LEG_SHOT: ("2", "legs", "leg"),
            BossAction.MOLOTOV: ("3", "molotov"),
            BossAction.BARRICADE: ("4", "barricade"),
        },
        RestAction: {
            RestAction.USE_MEDKIT: ("1", "medkit"),
            RestAction.EAT_FOOD: ("2", "eat", "food"),
            RestAction.SHORT_REST: ("3", "short rest", "rest"),
        },
        InventoryAction: {
            InventoryAction.EQUIP: ("e", "equip"),
            InventoryAction.DROP: ("d", "drop"),
            InventoryAction.BACK: ("b", "back"),
        },
    }

    # Maximum input length (characters)
    MAX_INPUT_LENGTH = 64

    def __init__(self, max_length: int = MAX_INPUT_LENGTH) -> None:
        """Initialize parser with configurable limits."""
        self.max_length = max_length

    def sanitize(self, input_text: str) -> str:
        """
        Normalize input text by:
        1. Normalizing unicode
        2. Removing control characters
        3. Truncating to max length
        4. Stripping whitespace and lowercasing
        """
        if not isinstance(input_text, str):
            raise TypeError(f"Input must be a string, got {type(input_text)}")

        normalized = unicodedata.normalize("NFKC", input_text)
        cleaned = re.sub(r"[\x00-\x1F\x7F]", "", normalized)
        if len(cleaned) > self.max_length:
            cleaned = cleaned[: self.max_length]
        return " ".join(cleaned.split()).lower()

    def parse_action(self, input_text: str, options: Sequence[E]) -> Optional[E]:
        """
        Match input against the options offered at a decision point.

        Accepts the option's shortcut key, a word alias, or its value
        (e.g. "use_medkit").

        Returns:
            The matching option, or None if nothing matches
        """
        text = self.sanitize(input_text)
        if not text:
            return None
        for option in options:
            if text == option.value or text in self._aliases(option):
                return option
        return None

    def parse_slot(self, input_text: str) -> Optional[int]:
        """
        Parse a 1-based slot number as typed by the player.

        Returns:
            0-based slot index (not range-checked), or None if not a number
        """
        text = self.sanitize(input_text)
        if not re.fullmatch(r"-?\d+", text):
            return None
        return int(text) - 1

    def shortcut(self, option: Enum) -> str:
        """Shortcut key shown next to an option."""
        aliases = self._aliases(option)
        return aliases[0].upper() if aliases else option.value

    def _aliases(self, option: Enum) -> tuple[str, ...]:
        return self.ALIASES.get(type(option), {}).get(option, ())

    @staticmethod
    def prompt_for(point: DecisionPoint) -> str:
        return {
            DecisionPoint.MAIN_MENU: "What do you do next?",
            DecisionPoint.COMBAT: "Action",
            DecisionPoint.BOSS: "Choice",
            DecisionPoint.REST: "Resting options",
            DecisionPoint.INVENTORY: "Choice",
            DecisionPoint.EQUIP_SLOT: "Enter item number to equip (weapon)",
            DecisionPoint.DROP_SLOT: "Select item number to drop",
        }[point]
