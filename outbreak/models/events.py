"""Outcome events emitted to the presentation layer."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EventKind(str, Enum):
    """Narration-worthy facts produced by the simulation."""

    # Progression
    GAME_STARTED = "game_started"
    LOCATION_ENTERED = "location_entered"
    INVALID_CHOICE = "invalid_choice"
    GAME_OVER = "game_over"

    # Arrival events
    QUIET_ARRIVAL = "quiet_arrival"
    FOUND_FOOD = "found_food"
    FOUND_AMMO = "found_ammo"
    TRAP_TRIGGERED = "trap_triggered"
    RECEIVED_MEDKIT = "received_medkit"
    NOTHING_OF_INTEREST = "nothing_of_interest"
    FOUND_WEAPON = "found_weapon"

    # Searching and travel
    SEARCH_STARTED = "search_started"
    LOOT_FOUND = "loot_found"
    AMMO_GAINED = "ammo_gained"
    NOTHING_FOUND = "nothing_found"
    ADVERSARY_APPEARED = "adversary_appeared"
    AMBUSH = "ambush"
    MOVED = "moved"
    END_OF_ROAD = "end_of_road"

    # Combat
    SHOT_FIRED = "shot_fired"
    NO_RANGED_WEAPON = "no_ranged_weapon"
    NOT_ENOUGH_AMMO = "not_enough_ammo"
    MELEE_HIT = "melee_hit"
    PUSH_ESCAPED = "push_escaped"
    PUSH_FAILED = "push_failed"
    HIDE_SUCCEEDED = "hide_succeeded"
    HIDE_FAILED = "hide_failed"
    HESITATED = "hesitated"
    ADVERSARY_STRUCK = "adversary_struck"
    ADVERSARY_DEFEATED = "adversary_defeated"
    AMMO_DROPPED = "ammo_dropped"
    PLAYER_DOWN = "player_down"

    # Boss fight
    BOSS_APPEARED = "boss_appeared"
    HEADSHOT = "headshot"
    HEADSHOT_MISSED = "headshot_missed"
    LEG_SHOT = "leg_shot"
    MOLOTOV_HIT = "molotov_hit"
    NO_MOLOTOV = "no_molotov"
    BARRICADED = "barricaded"
    BOSS_INDECISION = "boss_indecision"
    BOSS_STRUCK = "boss_struck"
    BOSS_DEFEATED = "boss_defeated"

    # Items and resting
    MEDKIT_USED = "medkit_used"
    NO_MEDKIT = "no_medkit"
    FOOD_EATEN = "food_eaten"
    NO_FOOD = "no_food"
    SHORT_REST = "short_rest"
    IDLE_REST = "idle_rest"
    INVENTORY_EMPTY = "inventory_empty"
    WEAPON_EQUIPPED = "weapon_equipped"
    ITEM_DROPPED = "item_dropped"
    INVALID_SELECTION = "invalid_selection"


# Events describing a rejected or unavailable action
NO_OP_EVENTS = frozenset(
    {
        EventKind.INVALID_CHOICE,
        EventKind.NO_RANGED_WEAPON,
        EventKind.NOT_ENOUGH_AMMO,
        EventKind.HESITATED,
        EventKind.NO_MOLOTOV,
        EventKind.BOSS_INDECISION,
        EventKind.NO_MEDKIT,
        EventKind.NO_FOOD,
        EventKind.IDLE_REST,
        EventKind.INVENTORY_EMPTY,
        EventKind.INVALID_SELECTION,
    }
)


class GameEvent(BaseModel):
    """Single entry in the event log."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    sequence_number: int = Field(ge=0, description="Order of events")
    kind: EventKind = Field(description="What happened")
    data: dict[str, Any] = Field(
        default_factory=dict, description="Facts about the event (damage dealt, item found, etc.)"
    )

    @property
    def is_no_op(self) -> bool:
        """Whether the event reports an action that had no effect."""
        return self.kind in NO_OP_EVENTS
