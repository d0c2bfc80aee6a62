"""Decision points, player actions, combat outcomes and endings."""

from enum import Enum


class DecisionPoint(str, Enum):
    """Places where the game waits for the player."""

    MAIN_MENU = "main_menu"
    COMBAT = "combat"
    BOSS = "boss"
    REST = "rest"
    INVENTORY = "inventory"
    EQUIP_SLOT = "equip_slot"
    DROP_SLOT = "drop_slot"


class MenuAction(str, Enum):
    """Choices offered at every location."""

    SEARCH = "search"
    MOVE = "move"
    REST = "rest"
    MANAGE_INVENTORY = "manage_inventory"


class CombatAction(str, Enum):
    """Choices during a zombie encounter."""

    SHOOT = "shoot"
    MELEE = "melee"
    PUSH = "push"
    HIDE = "hide"
    USE_MEDKIT = "use_medkit"


class BossAction(str, Enum):
    """Choices during the Titan fight."""

    HEAD_SHOT = "head_shot"
    LEG_SHOT = "leg_shot"
    MOLOTOV = "molotov"
    BARRICADE = "barricade"


class RestAction(str, Enum):
    """Resting options."""

    USE_MEDKIT = "use_medkit"
    EAT_FOOD = "eat_food"
    SHORT_REST = "short_rest"


class InventoryAction(str, Enum):
    """Inventory management options."""

    EQUIP = "equip"
    DROP = "drop"
    BACK = "back"


# Options presented at each enumerated decision point
DECISION_OPTIONS: dict[DecisionPoint, tuple[Enum, ...]] = {
    DecisionPoint.MAIN_MENU: tuple(MenuAction),
    DecisionPoint.COMBAT: tuple(CombatAction),
    DecisionPoint.BOSS: tuple(BossAction),
    DecisionPoint.REST: tuple(RestAction),
    DecisionPoint.INVENTORY: tuple(InventoryAction),
}


class CombatOutcome(str, Enum):
    """State of an encounter."""

    IN_PROGRESS = "in_progress"
    ESCAPED = "escaped"
    AVOIDED = "avoided"
    VICTORY = "victory"
    PLAYER_DIED = "player_died"

    @property
    def is_terminal(self) -> bool:
        return self is not CombatOutcome.IN_PROGRESS

    @property
    def got_away(self) -> bool:
        """Encounter ended with the adversary left behind."""
        return self in (CombatOutcome.ESCAPED, CombatOutcome.AVOIDED)


class Ending(str, Enum):
    """Terminal game states."""

    STARVED = "starved"
    KILLED = "killed"
    RESCUED = "rescued"
