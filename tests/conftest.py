import pytest

from bitfour.core.bus import EventBus, reset_event_bus
from bitfour.core.config import reset_settings
from bitfour.game.lobby import create_game, create_lobby

from .helpers import ALICE, BOB


@pytest.fixture(autouse=True)
def isolated_singletons():
    reset_settings()
    reset_event_bus()
    yield
    reset_event_bus()
    reset_settings()


@pytest.fixture
def lobby():
    return create_lobby()


@pytest.fixture
def game(lobby):
    return create_game(lobby, ALICE, BOB)


@pytest.fixture
def bus():
    bus = EventBus()
    yield bus
    bus.stop()
