"""Lobby sequencing: game ids and the geometry every game starts from."""

import logging

from ..core.errors import SamePlayers
from ..core.types import Game, GameStatus, Lobby
from .bitboard import INITIAL_COLUMN_POINTERS, OVERFLOW_MASK


logger = logging.getLogger(__name__)


def create_lobby() -> Lobby:
    """Create a lobby with no games and the standard 7x6 geometry."""
    return Lobby(
        game_count=0,
        overflow_mask=OVERFLOW_MASK,
        initial_column_pointers=INITIAL_COLUMN_POINTERS,
    )


def create_game(lobby: Lobby, player_a: str, player_b: str) -> Game:
    """Allocate the next game id and build a fresh game.

    Player A moves first. The lobby counter is only advanced once the
    players have been accepted.

    Raises:
        SamePlayers: If both sides are the same identity
    """
    if player_a == player_b:
        raise SamePlayers()

    game = Game(
        id=lobby.game_count,
        player_a=player_a,
        player_b=player_b,
        column_pointers=list(lobby.initial_column_pointers),
        boards=[0, 0],
        move_count=0,
        status=GameStatus.ongoing(),
    )
    lobby.game_count += 1

    logger.info("Created game %d: %s vs %s", game.id, player_a, player_b)
    return game
