"""Core infrastructure for the bitfour rules engine."""

from .bus import EventBus, get_event_bus, reset_event_bus
from .config import (
    DisplaySettings,
    EventSettings,
    LoggingSettings,
    Settings,
    get_settings,
    reset_settings,
)
from .errors import (
    ColumnAlreadyFull,
    GameAlreadyFinished,
    GameError,
    GameNotFound,
    InvalidColumnInput,
    LayoutError,
    NotPlayerTurn,
    SamePlayers,
)
from .events import Event, EventType
from .layout import (
    GAME_RECORD_SIZE,
    LOBBY_RECORD_SIZE,
    decode_game,
    decode_lobby,
    encode_game,
    encode_lobby,
)
from .types import Game, GameResult, GameStatus, Lobby, StatusKind


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "LoggingSettings",
    "EventSettings",
    "DisplaySettings",
    # Types
    "Lobby",
    "Game",
    "GameStatus",
    "GameResult",
    "StatusKind",
    # Errors
    "GameError",
    "SamePlayers",
    "NotPlayerTurn",
    "GameAlreadyFinished",
    "InvalidColumnInput",
    "ColumnAlreadyFull",
    "GameNotFound",
    "LayoutError",
    # Events
    "Event",
    "EventType",
    "EventBus",
    "get_event_bus",
    "reset_event_bus",
    # Layout
    "encode_lobby",
    "decode_lobby",
    "encode_game",
    "decode_game",
    "LOBBY_RECORD_SIZE",
    "GAME_RECORD_SIZE",
]
