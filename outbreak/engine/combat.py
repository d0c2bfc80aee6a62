"""Turn-based combat resolution."""

import logging
from typing import Callable, Optional

from outbreak.engine.dice import percent_check
from outbreak.engine.history import EventLog
from outbreak.engine.inventory_manager import InventoryManager
from outbreak.interface import GameInterface, RandomSource
from outbreak.models.actions import BossAction, CombatAction, CombatOutcome, DecisionPoint
from outbreak.models.adversary import Adversary, BossAdversary
from outbreak.models.events import EventKind
from outbreak.models.items import AMMO_COST, RANGED_DAMAGE, ItemId, is_ranged, melee_damage_range
from outbreak.models.player import Player
from outbreak.models.state import StatusSnapshot

logger = logging.getLogger(__name__)


class EncounterResolver:
    """
    Round loop shared by zombie encounters and the boss fight.

    Subclasses provide the decision point, the action handlers and the
    adversary's response in ``_finish_round``.
    """

    DECISION_POINT: DecisionPoint
    ACTIONS: tuple = ()

    def __init__(
        self,
        player: Player,
        dice: RandomSource,
        interface: GameInterface,
        history: EventLog,
    ) -> None:
        self.player = player
        self.dice = dice
        self.interface = interface
        self.history = history
        self._handlers: dict = {}

    def check(self, adversary: Adversary) -> CombatOutcome:
        """Terminal state of the encounter as it stands."""
        if adversary.is_dead():
            return CombatOutcome.VICTORY
        if not self.player.is_alive():
            return CombatOutcome.PLAYER_DIED
        return CombatOutcome.IN_PROGRESS

    def resolve(self, adversary: Adversary, location: Optional[str] = None) -> CombatOutcome:
        """
        Run rounds until the encounter reaches a terminal state.

        Args:
            adversary: Adversary to fight (mutated in place)
            location: Current location name, for status snapshots

        Returns:
            Terminal CombatOutcome
        """
        logger.info(f"{type(self).__name__} started against {adversary!r}")
        rounds = 0
        outcome = self.check(adversary)
        while not outcome.is_terminal:
            self.interface.render(StatusSnapshot.capture(self.player, location, adversary))
            action = self.interface.choose_action(self.DECISION_POINT, self.ACTIONS)
            outcome = self.play_round(adversary, action)
            rounds += 1
        logger.info(f"{type(self).__name__} ended after {rounds} round(s): {outcome.value}")
        return outcome

    def play_round(self, adversary: Adversary, action) -> CombatOutcome:
        """
        Apply one player action and the adversary's response.

        Args:
            adversary: Adversary being fought
            action: Chosen action, or None when the input was not recognized

        Returns:
            Outcome after the round
        """
        handler: Optional[Callable[[Adversary], CombatOutcome]] = self._handlers.get(action)
        if handler is None:
            self._idle(adversary)
            outcome = CombatOutcome.IN_PROGRESS
        else:
            outcome = handler(adversary)
        if outcome.is_terminal:
            return outcome
        return self._finish_round(adversary)

    def _idle(self, adversary: Adversary) -> None:
        raise NotImplementedError

    def _finish_round(self, adversary: Adversary) -> CombatOutcome:
        raise NotImplementedError

    def _player_down_check(self) -> Optional[CombatOutcome]:
        if not self.player.is_alive():
            self.history.record(EventKind.PLAYER_DOWN)
            return CombatOutcome.PLAYER_DIED
        return None


class CombatResolver(EncounterResolver):
    """Handles a single zombie encounter."""

    DECISION_POINT = DecisionPoint.COMBAT
    ACTIONS = tuple(CombatAction)

    PUSH_ESCAPE_CHANCE = 50
    HIDE_CHANCE = 40
    AMMO_DROP_CHANCE = 35
    HUNGER_PER_ROUND = 5

    def __init__(self, player: Player, dice: RandomSource, interface: GameInterface, history: EventLog) -> None:
        super().__init__(player, dice, interface, history)
        self._handlers = {
            CombatAction.SHOOT: self._shoot,
            CombatAction.MELEE: self._melee,
            CombatAction.PUSH: self._push,
            CombatAction.HIDE: self._hide,
            CombatAction.USE_MEDKIT: self._use_medkit,
        }

    def _shoot(self, adversary: Adversary) -> CombatOutcome:
        weapon = self.player.weapon
        if not is_ranged(weapon):
            self.history.record(EventKind.NO_RANGED_WEAPON, weapon=weapon)
            return CombatOutcome.IN_PROGRESS

        cost = AMMO_COST[weapon]
        if not self.player.use_ammo(cost):
            self.history.record(EventKind.NOT_ENOUGH_AMMO, weapon=weapon, cost=cost, ammo=self.player.ammo)
            return CombatOutcome.IN_PROGRESS

        damage = self.dice.randint(*RANGED_DAMAGE[weapon])
        adversary.take_damage(damage)
        self.history.record(EventKind.SHOT_FIRED, weapon=weapon, damage=damage, ammo=self.player.ammo)
        return CombatOutcome.IN_PROGRESS

    def _melee(self, adversary: Adversary) -> CombatOutcome:
        weapon = self.player.weapon
        low, high = melee_damage_range(weapon)
        # A thrown Molotov is gone
        consumed = weapon == ItemId.MOLOTOV and self.player.remove_item(ItemId.MOLOTOV)
        damage = self.dice.randint(low, high)
        adversary.take_damage(damage)
        self.history.record(EventKind.MELEE_HIT, weapon=weapon, damage=damage, consumed=consumed)
        return CombatOutcome.IN_PROGRESS

    def _push(self, adversary: Adversary) -> CombatOutcome:
        if percent_check(self.dice, self.PUSH_ESCAPE_CHANCE):
            self.history.record(EventKind.PUSH_ESCAPED)
            return CombatOutcome.ESCAPED
        self.history.record(EventKind.PUSH_FAILED)
        return CombatOutcome.IN_PROGRESS

    def _hide(self, adversary: Adversary) -> CombatOutcome:
        if percent_check(self.dice, self.HIDE_CHANCE):
            self.history.record(EventKind.HIDE_SUCCEEDED)
            return CombatOutcome.AVOIDED
        self.history.record(EventKind.HIDE_FAILED)
        return CombatOutcome.IN_PROGRESS

    def _use_medkit(self, adversary: Adversary) -> CombatOutcome:
        InventoryManager.use_medkit(self.player, self.history)
        return CombatOutcome.IN_PROGRESS

    def _idle(self, adversary: Adversary) -> None:
        self.history.record(EventKind.HESITATED)

    def _finish_round(self, adversary: Adversary) -> CombatOutcome:
        if not adversary.is_dead():
            damage = adversary.strike(self.dice)
            self.player.take_damage(damage)
            self.history.record(EventKind.ADVERSARY_STRUCK, damage=damage, health=self.player.health)
        else:
            self.history.record(EventKind.ADVERSARY_DEFEATED, name=adversary.name)
            if percent_check(self.dice, self.AMMO_DROP_CHANCE):
                self.player.add_ammo(1)
                self.history.record(EventKind.AMMO_DROPPED, amount=1)

        self.player.increase_hunger(self.HUNGER_PER_ROUND)

        died = self._player_down_check()
        if died is not None:
            return died
        return CombatOutcome.VICTORY if adversary.is_dead() else CombatOutcome.IN_PROGRESS


class BossFight(EncounterResolver):
    """Scripted fight against the Titan at the final location."""

    DECISION_POINT = DecisionPoint.BOSS
    ACTIONS = tuple(BossAction)

    HEAD_SHOT_CHANCE = 45
    HEAD_SHOT_DAMAGE = (28, 50)
    LEG_SHOT_DAMAGE = (14, 26)
    MOLOTOV_DAMAGE = (40, 60)
    HUNGER_PER_ROUND = 8

    def __init__(self, player: Player, dice: RandomSource, interface: GameInterface, history: EventLog) -> None:
        super().__init__(player, dice, interface, history)
        self._handlers = {
            BossAction.HEAD_SHOT: self._head_shot,
            BossAction.LEG_SHOT: self._leg_shot,
            BossAction.MOLOTOV: self._molotov,
            BossAction.BARRICADE: self._barricade,
        }

    def resolve(self, adversary: Optional[BossAdversary] = None, location: Optional[str] = None) -> CombatOutcome:
        """Fight the Titan (a fresh one unless given). Returns VICTORY or PLAYER_DIED."""
        boss = adversary if adversary is not None else BossAdversary()
        self.history.record(EventKind.BOSS_APPEARED, name=boss.name, health=boss.health)
        return super().resolve(boss, location)

    def _head_shot(self, boss: BossAdversary) -> CombatOutcome:
        if percent_check(self.dice, self.HEAD_SHOT_CHANCE):
            damage = self.dice.randint(*self.HEAD_SHOT_DAMAGE)
            boss.take_damage(damage)
            self.history.record(EventKind.HEADSHOT, damage=damage)
        else:
            self.history.record(EventKind.HEADSHOT_MISSED)
        return CombatOutcome.IN_PROGRESS

    def _leg_shot(self, boss: BossAdversary) -> CombatOutcome:
        damage = self.dice.randint(*self.LEG_SHOT_DAMAGE)
        boss.take_damage(damage)
        boss.reduce_next_strike()
        self.history.record(EventKind.LEG_SHOT, damage=damage)
        return CombatOutcome.IN_PROGRESS

    def _molotov(self, boss: BossAdversary) -> CombatOutcome:
        if not self.player.remove_item(ItemId.MOLOTOV):
            self.history.record(EventKind.NO_MOLOTOV)
            return CombatOutcome.IN_PROGRESS
        damage = self.dice.randint(*self.MOLOTOV_DAMAGE)
        boss.take_damage(damage)
        self.history.record(EventKind.MOLOTOV_HIT, damage=damage)
        return CombatOutcome.IN_PROGRESS

    def _barricade(self, boss: BossAdversary) -> CombatOutcome:
        boss.reduce_next_strike()
        self.history.record(EventKind.BARRICADED)
        return CombatOutcome.IN_PROGRESS

    def _idle(self, boss: BossAdversary) -> None:
        self.history.record(EventKind.BOSS_INDECISION)

    def _finish_round(self, boss: BossAdversary) -> CombatOutcome:
        if boss.is_dead():
            self.history.record(EventKind.BOSS_DEFEATED, name=boss.name)
            return CombatOutcome.VICTORY

        reduced = boss.strike_reduced
        damage = boss.strike(self.dice)
        self.player.take_damage(damage)
        self.history.record(EventKind.BOSS_STRUCK, damage=damage, reduced=reduced, health=self.player.health)

        self.player.increase_hunger(self.HUNGER_PER_ROUND)

        died = self._player_down_check()
        if died is not None:
            return died
        return CombatOutcome.IN_PROGRESS
