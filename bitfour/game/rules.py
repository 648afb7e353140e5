"""Connect Four rules over bit-packed boards."""

import logging

from ..core.errors import (
    ColumnAlreadyFull,
    GameAlreadyFinished,
    GameError,
    InvalidColumnInput,
    NotPlayerTurn,
)
from ..core.types import Game
from .bitboard import COLUMNS, OVERFLOW_MASK, apply_move, has_overflowed, is_column_full


logger = logging.getLogger(__name__)

# Bit distance to the next cell of a line: vertical, horizontal, and the two
# diagonals. Only valid for the 7-bits-per-column packing.
DIRECTIONS = (1, 7, 6, 8)


def has_won(board: int) -> bool:
    """True if ``board`` holds four adjacent discs in any direction.

    ``board & (board >> d)`` marks every cell that starts a pair in
    direction ``d``; ANDing that with itself shifted by ``2 * d`` leaves
    only cells starting four in a row.
    """
    for d in DIRECTIONS:
        pairs = board & (board >> d)
        if pairs & (pairs >> (2 * d)):
            return True
    return False


class Connect4Rules:
    """Move validation for a 7x6 Connect Four board.

    Checks run in a fixed order and stop at the first failure:
    finished game, wrong player, column out of range, full column.
    """

    def __init__(self, overflow_mask: int = OVERFLOW_MASK):
        """Initialize rules.

        Args:
            overflow_mask: Sentinel bits marking a full column (from the lobby)
        """
        self.overflow_mask = overflow_mask

    @staticmethod
    def player_index(game: Game) -> int:
        """0 when player A is to move, 1 for player B."""
        return game.move_count & 1

    def get_legal_moves(self, game: Game) -> list[int]:
        """Get columns that can still take a disc.

        Returns:
            Column indices, empty once the game is finished
        """
        if game.is_finished:
            return []
        return [col for col in range(COLUMNS) if not is_column_full(game.column_pointers, col)]

    def validate_move(self, game: Game, actor: str, column: int) -> tuple[int, list[int]]:
        """Check a move and stage its effect without touching ``game``.

        Args:
            game: Current game
            actor: Identity submitting the move
            column: Raw column index as submitted

        Returns:
            Tuple of (staged mover board, staged column pointers)

        Raises:
            GameAlreadyFinished: The game already has a result
            NotPlayerTurn: ``actor`` is not the player to move
            InvalidColumnInput: ``column`` is not in 0..6
            ColumnAlreadyFull: ``column`` has no free row
        """
        if game.is_finished:
            raise GameAlreadyFinished()

        index = self.player_index(game)
        if actor != game.players[index]:
            raise NotPlayerTurn()

        if isinstance(column, bool) or not 0 <= column < COLUMNS:
            raise InvalidColumnInput()

        pointers = game.column_pointers.copy()
        board = apply_move(game.boards[index], pointers, column)
        if has_overflowed(board, self.overflow_mask):
            raise ColumnAlreadyFull()

        return board, pointers

    def is_valid_move(self, game: Game, actor: str, column: int) -> bool:
        """Check a move without raising."""
        try:
            self.validate_move(game, actor, column)
        except GameError as e:
            logger.debug("Move %s by %s in game %d rejected: %s", column, actor, game.id, e.code)
            return False
        return True
