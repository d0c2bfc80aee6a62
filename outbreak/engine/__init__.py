"""Game engine package."""

from outbreak.engine.action_parser import ActionParser
from outbreak.engine.combat import BossFight, CombatResolver
from outbreak.engine.dice import DiceRoller
from outbreak.engine.event_engine import EventEngine
from outbreak.engine.game_engine import GameEngine
from outbreak.engine.history import EventLog
from outbreak.engine.inventory_manager import InventoryManager
from outbreak.engine.loot import weighted_choice

__all__ = [
    "ActionParser",
    "BossFight",
    "CombatResolver",
    "DiceRoller",
    "EventEngine",
    "GameEngine",
    "EventLog",
    "InventoryManager",
    "weighted_choice",
]
