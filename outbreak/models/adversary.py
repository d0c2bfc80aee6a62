"""Zombie and boss models."""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, Field, PrivateAttr

if TYPE_CHECKING:
    from outbreak.interface import RandomSource


class Adversary(BaseModel):
    """A standard zombie, created fresh for every encounter."""

    # Strike variance around attack power
    STRIKE_VARIANCE: ClassVar[tuple[int, int]] = (-3, 5)

    health: int = Field(gt=0, description="Current health; dead at zero or below")
    attack_power: int = Field(default=10, description="Base damage per strike")
    name: str = Field(default="Zombie", description="Display name")

    _max_health: int = PrivateAttr(default=0)

    def model_post_init(self, __context: Any) -> None:
        self._max_health = self.health

    @classmethod
    def spawn(
        cls,
        dice: "RandomSource",
        health_range: tuple[int, int],
        attack_range: tuple[int, int],
    ) -> "Adversary":
        """Create a zombie with random stats (health is drawn first)."""
        health = dice.randint(*health_range)
        attack_power = dice.randint(*attack_range)
        return cls(health=health, attack_power=attack_power)

    @property
    def max_health(self) -> int:
        return self._max_health

    def take_damage(self, amount: int) -> None:
        self.health -= amount

    def is_dead(self) -> bool:
        return self.health <= 0

    def strike(self, dice: "RandomSource") -> int:
        """Damage dealt by one attack; every successful attack deals at least 1."""
        low, high = self.STRIKE_VARIANCE
        return max(1, self.attack_power + dice.randint(low, high))


class BossAdversary(Adversary):
    """The Titan guarding the final location."""

    STRIKE_SPREAD: ClassVar[tuple[int, int]] = (-6, 8)

    health: int = Field(default=180, gt=0, description="Current health; dead at zero or below")
    attack_power: int = Field(default=20, description="Base damage per strike")
    name: str = Field(default="Titan", description="Display name")

    _reduce_next_strike: bool = PrivateAttr(default=False)

    @property
    def strike_reduced(self) -> bool:
        """Whether the next strike will be halved."""
        return self._reduce_next_strike

    def reduce_next_strike(self) -> None:
        """Halve the next strike only; the flag is cleared when the boss strikes."""
        self._reduce_next_strike = True

    def strike(self, dice: "RandomSource") -> int:
        low, high = self.STRIKE_SPREAD
        damage = dice.randint(self.attack_power + low, self.attack_power + high)
        if self._reduce_next_strike:
            damage //= 2
        self._reduce_next_strike = False
        return damage
