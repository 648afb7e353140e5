"""Game logic for bitfour."""

from .bitboard import (
    COLUMNS,
    INITIAL_COLUMN_POINTERS,
    MAX_MOVES,
    OVERFLOW_MASK,
    ROWS,
    apply_move,
    decode,
    encode,
    has_overflowed,
)
from .engine import GameEngine, make_move
from .lobby import create_game, create_lobby
from .rules import DIRECTIONS, Connect4Rules, has_won


__all__ = [
    "COLUMNS",
    "ROWS",
    "MAX_MOVES",
    "OVERFLOW_MASK",
    "INITIAL_COLUMN_POINTERS",
    "DIRECTIONS",
    "apply_move",
    "has_overflowed",
    "decode",
    "encode",
    "has_won",
    "Connect4Rules",
    "create_lobby",
    "create_game",
    "make_move",
    "GameEngine",
]
