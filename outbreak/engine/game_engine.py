"""Main game engine: the journey from the first camp to the boss."""

import logging
from typing import Optional

from outbreak.engine.combat import BossFight, CombatResolver
from outbreak.engine.dice import DiceRoller
from outbreak.engine.event_engine import EventEngine, TravelResult
from outbreak.engine.history import EventLog
from outbreak.engine.inventory_manager import InventoryManager
from outbreak.helpers.debug import log_call
from outbreak.interface import GameInterface, RandomSource
from outbreak.models.actions import (
    DECISION_OPTIONS,
    CombatOutcome,
    DecisionPoint,
    Ending,
    InventoryAction,
    MenuAction,
    RestAction,
)
from outbreak.models.events import EventKind
from outbreak.models.player import Player
from outbreak.models.state import StatusSnapshot
from outbreak.models.world import Location, Route, build_default_route

logger = logging.getLogger(__name__)


class GameEngine:
    """Main state machine for game progression and endings."""

    SHORT_REST_HEAL = 10
    SHORT_REST_HUNGER = 15

    def __init__(
        self,
        interface: GameInterface,
        dice: Optional[RandomSource] = None,
        route: Optional[Route] = None,
        player: Optional[Player] = None,
        history: Optional[EventLog] = None,
    ) -> None:
        """
        Initialize game engine.

        Args:
            interface: Presentation and input collaborator
            dice: Random source (an unseeded DiceRoller if omitted)
            route: Locations to travel (the default eight-stop route if omitted)
            player: Starting player (a fresh one if omitted)
            history: Event log (a new one forwarding to the interface if omitted)
        """
        self.interface = interface
        self.dice = dice if dice is not None else DiceRoller()
        self.route = route if route is not None else build_default_route()
        self.player = player if player is not None else Player()
        self.history = history if history is not None else EventLog(listener=interface.notify)

        self.combat = CombatResolver(self.player, self.dice, self.interface, self.history)
        self.boss_fight = BossFight(self.player, self.dice, self.interface, self.history)
        self.events = EventEngine(self.player, self.dice, self.combat, self.history)

        self._position = 0
        self._ending: Optional[Ending] = None
        self._menu_handlers = {
            MenuAction.SEARCH: self.search_area,
            MenuAction.MOVE: self.move_forward,
            MenuAction.REST: self.rest,
            MenuAction.MANAGE_INVENTORY: self.manage_inventory,
        }

    @property
    def position(self) -> int:
        """Index of the current location on the route."""
        return self._position

    @property
    def current_location(self) -> Location:
        return self.route.get(self._position)

    @property
    def ending(self) -> Optional[Ending]:
        """Ending reached, or None while the game is running."""
        return self._ending

    @property
    def is_running(self) -> bool:
        return self._ending is None

    def snapshot(self) -> StatusSnapshot:
        """Current status for display."""
        return StatusSnapshot.capture(self.player, self.current_location.name)

    def run(self) -> Ending:
        """
        Play the game until it ends.

        Returns:
            The ending reached. A finished game is never resumed; calling
            run() again returns the same ending.
        """
        if self._ending is not None:
            logger.warning(f"Game already ended ({self._ending.value}); not resuming")
            return self._ending

        self.history.record(EventKind.GAME_STARTED, locations=len(self.route))
        while self._ending is None:
            self.play_turn()
        return self._ending

    def play_turn(self) -> Optional[Ending]:
        """
        Play one turn at the current location: arrival event, one menu
        choice, then the ending checks.

        Returns:
            The ending if the turn finished the game, None otherwise
        """
        if self._ending is not None:
            return self._ending

        location = self.current_location
        self.interface.render(self.snapshot())
        self.history.record(
            EventKind.LOCATION_ENTERED,
            location=location.name,
            description=location.description,
            position=self._position,
        )
        self.events.resolve_arrival(location)

        if self.player.is_alive():
            choice = self.interface.choose_action(DecisionPoint.MAIN_MENU, DECISION_OPTIONS[DecisionPoint.MAIN_MENU])
            handler = self._menu_handlers.get(choice)
            if handler is None:
                self.history.record(EventKind.INVALID_CHOICE)
            else:
                handler()

        return self._check_endings()

    def _check_endings(self) -> Optional[Ending]:
        if self.player.is_starving():
            return self._finish(Ending.STARVED)
        if not self.player.is_alive():
            return self._finish(Ending.KILLED)
        if self.route.is_final(self._position):
            outcome = self.boss_fight.resolve(location=self.current_location.name)
            return self._finish(Ending.RESCUED if outcome is CombatOutcome.VICTORY else Ending.KILLED)
        return None

    def _finish(self, ending: Ending) -> Ending:
        self._ending = ending
        logger.info(f"Game over at {self.current_location.name}: {ending.value}")
        self.history.record(EventKind.GAME_OVER, ending=ending, location=self.current_location.name)
        return ending

    # Menu actions

    @log_call
    def search_area(self) -> None:
        self.events.search_area(self.current_location.name)

    @log_call
    def move_forward(self) -> None:
        result = self.events.travel(self.route.is_final(self._position), self.current_location.name)
        if result is TravelResult.MOVED:
            self._position += 1
            logger.info(f"Moved to {self.current_location.name}")
            self.history.record(EventKind.MOVED, location=self.current_location.name, position=self._position)

    @log_call
    def rest(self) -> None:
        choice = self.interface.choose_action(DecisionPoint.REST, DECISION_OPTIONS[DecisionPoint.REST])
        if choice is RestAction.USE_MEDKIT:
            InventoryManager.use_medkit(self.player, self.history)
        elif choice is RestAction.EAT_FOOD:
            InventoryManager.eat_food(self.player, self.history)
        elif choice is RestAction.SHORT_REST:
            self.player.heal(self.SHORT_REST_HEAL)
            self.player.increase_hunger(self.SHORT_REST_HUNGER)
            self.history.record(
                EventKind.SHORT_REST,
                healed=self.SHORT_REST_HEAL,
                hunger_gained=self.SHORT_REST_HUNGER,
            )
        else:
            self.history.record(EventKind.IDLE_REST)

    @log_call
    def manage_inventory(self) -> None:
        items = self.player.items
        if not items:
            self.history.record(EventKind.INVENTORY_EMPTY)
            return

        choice = self.interface.choose_action(DecisionPoint.INVENTORY, DECISION_OPTIONS[DecisionPoint.INVENTORY])
        if choice is InventoryAction.EQUIP:
            slot = self.interface.choose_slot(DecisionPoint.EQUIP_SLOT, items)
            InventoryManager.equip_slot(self.player, slot, self.history)
        elif choice is InventoryAction.DROP:
            slot = self.interface.choose_slot(DecisionPoint.DROP_SLOT, items)
            InventoryManager.drop_slot(self.player, slot, self.history)
        elif choice is None:
            self.history.record(EventKind.INVALID_CHOICE)
