"""
Shared data types for the bitfour rules engine.

These types are the contracts between modules and the storage boundary.
Boards are plain ints used as 64-bit masks.
"""

from dataclasses import dataclass, field
from enum import Enum


# ─────────────────────────────────────────────────────────────
# GAME STATUS
# ─────────────────────────────────────────────────────────────


class GameResult(Enum):
    """Outcome of a finished game. Values are persisted discriminants."""

    PLAYER_A_WON = 0
    PLAYER_B_WON = 1
    DRAW = 2

    def __str__(self) -> str:
        return self.name.lower()


class StatusKind(Enum):
    """Lifecycle stage of a game. Values are persisted discriminants."""

    IDLE = 0  # Never produced; kept so stored records keep their tags
    ONGOING = 1
    FINISHED = 2


@dataclass(frozen=True)
class GameStatus:
    """Tagged status: ``result`` is set only when ``kind`` is FINISHED."""

    kind: StatusKind
    result: GameResult | None = None

    def __post_init__(self) -> None:
        if (self.kind == StatusKind.FINISHED) != (self.result is not None):
            raise ValueError(f"Inconsistent status: {self.kind.name} with result {self.result}")

    @classmethod
    def ongoing(cls) -> "GameStatus":
        return cls(StatusKind.ONGOING)

    @classmethod
    def finished(cls, result: GameResult) -> "GameStatus":
        return cls(StatusKind.FINISHED, result)

    @property
    def is_finished(self) -> bool:
        return self.kind == StatusKind.FINISHED

    def __str__(self) -> str:
        if self.result is None:
            return self.kind.name.lower()
        return f"finished({self.result})"


# ─────────────────────────────────────────────────────────────
# LOBBY & GAME
# ─────────────────────────────────────────────────────────────


@dataclass
class Lobby:
    """Shared sequencer state.

    Holds the game counter plus the board geometry every new game copies.
    Callers must serialize access; nothing here is synchronized.
    """

    game_count: int
    overflow_mask: int
    initial_column_pointers: tuple[int, ...]


@dataclass
class Game:
    """
    One Connect Four match.

    ``boards[0]`` belongs to player A and ``boards[1]`` to player B.
    ``column_pointers[c]`` is the bit index the next disc in column ``c``
    will occupy.
    """

    id: int
    player_a: str
    player_b: str
    column_pointers: list[int]
    boards: list[int] = field(default_factory=lambda: [0, 0])
    move_count: int = 0
    status: GameStatus = field(default_factory=GameStatus.ongoing)

    @property
    def players(self) -> tuple[str, str]:
        return (self.player_a, self.player_b)

    @property
    def is_finished(self) -> bool:
        return self.status.is_finished

    @property
    def current_player(self) -> str | None:
        """Player whose turn it is, or None once the game is over."""
        if self.is_finished:
            return None
        return self.players[self.move_count & 1]

    @property
    def winner(self) -> str | None:
        """Id of the winning player, None for a draw or unfinished game."""
        if self.status.result == GameResult.PLAYER_A_WON:
            return self.player_a
        if self.status.result == GameResult.PLAYER_B_WON:
            return self.player_b
        return None

    def copy(self) -> "Game":
        """Create an independent copy (lists are not shared)."""
        return Game(
            id=self.id,
            player_a=self.player_a,
            player_b=self.player_b,
            column_pointers=self.column_pointers.copy(),
            boards=self.boards.copy(),
            move_count=self.move_count,
            status=self.status,
        )
