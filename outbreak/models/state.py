"""Status snapshot handed to the presentation layer."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from outbreak.models.adversary import Adversary
from outbreak.models.items import ItemId
from outbreak.models.player import Player


class StatusSnapshot(BaseModel):
    """Read-only view of the player (and current adversary, if fighting)."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    health: int = Field(ge=0, le=100, description="Player health")
    hunger: int = Field(ge=0, le=100, description="Player hunger")
    ammo: int = Field(ge=0, description="Rounds of ammo")
    weapon: ItemId = Field(description="Equipped weapon")
    inventory: list[ItemId] = Field(default_factory=list, description="Inventory in insertion order")
    location: Optional[str] = Field(default=None, description="Current location name")
    adversary_name: Optional[str] = Field(default=None, description="Adversary being fought")
    adversary_health: Optional[int] = Field(default=None, description="Adversary health if in combat")
    adversary_max_health: Optional[int] = Field(default=None, description="Adversary maximum health if in combat")

    @classmethod
    def capture(
        cls,
        player: Player,
        location: Optional[str] = None,
        adversary: Optional[Adversary] = None,
    ) -> "StatusSnapshot":
        """Build a snapshot from live entities."""
        return cls(
            health=player.health,
            hunger=player.hunger,
            ammo=player.ammo,
            weapon=player.weapon,
            inventory=list(player.items),
            location=location,
            adversary_name=adversary.name if adversary else None,
            adversary_health=adversary.health if adversary else None,
            adversary_max_health=adversary.max_health if adversary else None,
        )
