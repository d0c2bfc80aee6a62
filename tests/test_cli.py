"""Tests for the console front end."""

from outbreak.cli import ENDINGS, NARRATION, ConsoleInterface, main
from outbreak.engine.history import EventLog
from outbreak.models.actions import DECISION_OPTIONS, DecisionPoint, Ending, MenuAction
from outbreak.models.events import EventKind
from outbreak.models.items import ItemId
from outbreak.models.player import Player
from outbreak.models.state import StatusSnapshot


def make_console(*answers):
    replies = list(answers)
    lines = []
    console = ConsoleInterface(read=lambda prompt: replies.pop(0), write=lines.append)
    return console, lines


class TestConsoleInterface:
    """Test suite for ConsoleInterface."""

    def test_choose_action_lists_options(self):
        """Test the menu is printed and the reply parsed."""
        console, lines = make_console("b")
        choice = console.choose_action(DecisionPoint.MAIN_MENU, DECISION_OPTIONS[DecisionPoint.MAIN_MENU])
        assert choice is MenuAction.MOVE
        assert lines[0] == "What do you do next?"
        assert "A) Search" in lines
        assert "D) Manage inventory" in lines

    def test_choose_action_unrecognized(self):
        """Test unknown input comes back as None."""
        console, _ = make_console("x")
        assert console.choose_action(DecisionPoint.MAIN_MENU, DECISION_OPTIONS[DecisionPoint.MAIN_MENU]) is None

    def test_choose_slot(self):
        """Test slots are listed from 1 and returned 0-based."""
        console, lines = make_console("2")
        assert console.choose_slot(DecisionPoint.EQUIP_SLOT, (ItemId.MEDKIT, ItemId.PISTOL)) == 1
        assert lines[:2] == ["1) Medkit", "2) Pistol"]

    def test_render(self):
        """Test the status line."""
        console, lines = make_console()
        console.render(StatusSnapshot.capture(Player()))
        assert "Health: 100" in lines[0]
        assert "Weapon: Knife" in lines[0]
        assert lines[1] == "Inventory: -"

    def test_notify_narrates(self):
        """Test events are narrated with their data."""
        console, lines = make_console()
        log = EventLog(listener=console.notify)
        log.record(EventKind.MOVED, location="Dark Forest", position=2)
        log.record(EventKind.LOOT_FOUND, item=ItemId.MACHETE)
        assert lines == ["You proceed to Dark Forest.", "You found: Machete"]

    def test_notify_ending(self):
        """Test the game over event prints the ending."""
        console, lines = make_console()
        EventLog(listener=console.notify).record(EventKind.GAME_OVER, ending=Ending.STARVED, location="Camp")
        assert lines == [ENDINGS[Ending.STARVED]]

    def test_notify_missing_data(self):
        """Test an event without its data falls back to the kind name."""
        console, lines = make_console()
        EventLog(listener=console.notify).record(EventKind.SHOT_FIRED)
        assert lines == ["shot_fired"]

    def test_every_event_is_narrated(self):
        """Test every event kind has narration or an ending message."""
        missing = [kind for kind in EventKind if kind not in NARRATION and kind is not EventKind.GAME_OVER]
        assert missing == []


class TestMain:
    """Test suite for the entry point."""

    def test_interrupted_game(self, monkeypatch, capsys):
        """Test end of input stops the game cleanly."""

        def closed_input(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", closed_input)
        assert main(["5"]) == 130
        assert "Start Camp" in capsys.readouterr().out

    def test_non_numeric_seed(self, capsys):
        """Test a bad seed argument prints usage instead of a traceback."""
        assert main(["abc"]) == 2
        err = capsys.readouterr().err
        assert "usage: outbreak" in err
        assert "seed must be an integer" in err
