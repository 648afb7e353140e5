"""
Event definitions for the bitfour engine.

Events let observers (CLI, storage adapters, loggers) follow the game
lifecycle without the engine knowing who consumes them.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    """Types of events in the system."""

    # Lobby events
    GAME_CREATED = auto()

    # Game events
    MOVE_MADE = auto()
    INVALID_MOVE = auto()
    TURN_CHANGED = auto()
    GAME_WON = auto()
    GAME_DRAW = auto()
    GAME_RESET = auto()


@dataclass
class Event:
    """
    Base event structure.

    Attributes:
        type: The type of event
        data: Event-specific payload
        timestamp: When the event was created
        source: Which module created the event
    """

    type: EventType
    data: Any = None
    timestamp: float = field(default_factory=time.time)
    source: str = "unknown"

    def __str__(self) -> str:
        return f"[{self.source}] {self.type.name}: {self.data}"
