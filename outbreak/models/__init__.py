"""Data models module for Outbreak Survivor."""

# Items and Inventory
from outbreak.models.items import ALWAYS_AVAILABLE, Inventory, ItemId

# Entities
from outbreak.models.player import Player
from outbreak.models.adversary import Adversary, BossAdversary

# World
from outbreak.models.world import Location, Route, build_default_route

# Actions and Outcomes
from outbreak.models.actions import (
    BossAction,
    CombatAction,
    CombatOutcome,
    DecisionPoint,
    Ending,
    InventoryAction,
    MenuAction,
    RestAction,
)

# Events
from outbreak.models.events import EventKind, GameEvent

# State
from outbreak.models.state import StatusSnapshot

__all__ = [
    # Items and Inventory
    "ItemId",
    "Inventory",
    "ALWAYS_AVAILABLE",
    # Entities
    "Player",
    "Adversary",
    "BossAdversary",
    # World
    "Location",
    "Route",
    "build_default_route",
    # Actions and Outcomes
    "DecisionPoint",
    "MenuAction",
    "CombatAction",
    "BossAction",
    "RestAction",
    "InventoryAction",
    "CombatOutcome",
    "Ending",
    # Events
    "EventKind",
    "GameEvent",
    # State
    "StatusSnapshot",
]
