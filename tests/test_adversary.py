"""Tests for zombies and the boss."""

import pytest

from outbreak.models.adversary import Adversary, BossAdversary
from tests.helpers import ScriptedDice


class TestAdversary:
    """Test suite for Adversary."""

    def test_spawn_draws_health_then_attack(self):
        """Test spawn draws health before attack power."""
        dice = ScriptedDice([22, 9])
        zombie = Adversary.spawn(dice, (15, 30), (8, 12))
        assert zombie.health == 22
        assert zombie.max_health == 22
        assert zombie.attack_power == 9

    def test_non_positive_health_rejected(self):
        """Test an adversary cannot start dead."""
        with pytest.raises(ValueError):
            Adversary(health=0)

    def test_max_health_kept_after_damage(self):
        """Test maximum health is fixed at creation."""
        zombie = Adversary(health=25)
        zombie.take_damage(10)
        assert zombie.health == 15
        assert zombie.max_health == 25

    def test_dead_at_zero_or_below(self):
        """Test death at zero and negative health."""
        zombie = Adversary(health=10)
        zombie.take_damage(10)
        assert zombie.is_dead()
        zombie.take_damage(5)
        assert zombie.health == -5
        assert zombie.is_dead()

    def test_strike_at_least_one(self):
        """Test a weak strike still deals one damage."""
        zombie = Adversary(health=10, attack_power=1)
        assert zombie.strike(ScriptedDice([-3])) == 1

    def test_strike_adds_variance(self):
        """Test strike is attack power plus the variance draw."""
        zombie = Adversary(health=10, attack_power=10)
        assert zombie.strike(ScriptedDice([4])) == 14


class TestBossAdversary:
    """Test suite for BossAdversary."""

    def test_defaults(self):
        """Test the Titan's fixed stats."""
        boss = BossAdversary()
        assert boss.name == "Titan"
        assert boss.health == 180
        assert boss.attack_power == 20
        assert boss.max_health == 180

    def test_strike_range(self):
        """Test strike draws from attack power -6 to +8."""
        dice = ScriptedDice([28])
        assert BossAdversary().strike(dice) == 28
        assert dice.calls == [("randint", 14, 28, 28)]

    def test_reduced_strike_is_halved_once(self):
        """Test the reduction applies to one strike and then clears."""
        boss = BossAdversary()
        boss.reduce_next_strike()
        assert boss.strike_reduced
        assert boss.strike(ScriptedDice([27])) == 13
        assert not boss.strike_reduced
        assert boss.strike(ScriptedDice([27])) == 27
