"""Pytest configuration and fixtures."""

import pytest

from outbreak.engine.history import EventLog
from outbreak.models.player import Player
from tests.helpers import ScriptedDice, ScriptedInterface


@pytest.fixture
def dice():
    """Random source with an empty script; tests push the draws they expect."""
    return ScriptedDice()


@pytest.fixture
def ui():
    """Scripted player interface."""
    return ScriptedInterface()


@pytest.fixture
def history(ui):
    """Event log forwarding to the scripted interface."""
    return EventLog(listener=ui.notify)


@pytest.fixture
def player():
    """Fresh player with starting stats."""
    return Player()
