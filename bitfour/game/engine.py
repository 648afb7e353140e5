"""Game state machine and the engine that drives it."""

import logging

from ..core.bus import EventBus, get_event_bus
from ..core.errors import GameError, GameNotFound
from ..core.events import Event, EventType
from ..core.types import Game, GameResult, GameStatus, Lobby
from .bitboard import MAX_MOVES
from .lobby import create_game, create_lobby
from .rules import Connect4Rules, has_won


logger = logging.getLogger(__name__)

_WIN_RESULTS = (GameResult.PLAYER_A_WON, GameResult.PLAYER_B_WON)


def make_move(lobby: Lobby, game: Game, actor: str, column: int) -> Game:
    """Play ``column`` for ``actor`` and advance the game.

    Every check runs against a staged copy of the mover's board and the
    column pointers; ``game`` is written only once the move is accepted, so
    a rejected move leaves it untouched.

    Args:
        lobby: Lobby the game was created from (supplies the overflow mask)
        game: Game to update in place
        actor: Identity submitting the move
        column: Raw column index

    Returns:
        The same ``game``, updated

    Raises:
        GameError: One of the move rejections from :class:`Connect4Rules`
    """
    rules = Connect4Rules(overflow_mask=lobby.overflow_mask)
    index = rules.player_index(game)
    board, pointers = rules.validate_move(game, actor, column)

    won = has_won(board)

    game.boards[index] = board
    game.column_pointers = pointers
    if won:
        game.status = GameStatus.finished(_WIN_RESULTS[index])
    game.move_count += 1
    if not won and game.move_count == MAX_MOVES:
        game.status = GameStatus.finished(GameResult.DRAW)

    return game


class GameEngine:
    """Runs games for one lobby and reports what happens.

    Stateful engine that:
    - Issues games from its lobby
    - Keeps the games it created, keyed by id
    - Applies moves through :func:`make_move`
    - Emits events for state changes
    """

    def __init__(self, lobby: Lobby | None = None, bus: EventBus | None = None):
        """Initialize game engine.

        Args:
            lobby: Lobby to issue games from (a fresh one if None)
            bus: Event bus (uses global if None)
        """
        self.lobby = lobby or create_lobby()
        self.bus = bus or get_event_bus()
        self.rules = Connect4Rules(overflow_mask=self.lobby.overflow_mask)
        self._games: dict[int, Game] = {}

    def new_game(self, player_a: str, player_b: str) -> Game:
        """Create a game between two players; ``player_a`` moves first."""
        game = create_game(self.lobby, player_a, player_b)
        self._games[game.id] = game

        self.bus.publish(Event(
            type=EventType.GAME_CREATED,
            data={"game_id": game.id, "player_a": player_a, "player_b": player_b},
            source="game_engine"
        ))
        return game

    def get_game(self, game_id: int) -> Game:
        try:
            return self._games[game_id]
        except KeyError:
            raise GameNotFound(f"Game {game_id} not found") from None

    @property
    def games(self) -> list[Game]:
        """All games created by this engine, in creation order."""
        return list(self._games.values())

    def make_move(self, game_id: int, actor: str, column: int) -> Game:
        """Make a move in one of this engine's games.

        Raises:
            GameNotFound: If ``game_id`` is unknown
            GameError: If the move is rejected (the game is unchanged)
        """
        game = self.get_game(game_id)

        try:
            make_move(self.lobby, game, actor, column)
        except GameError as e:
            logger.debug("Game %d: rejected column %s from %s (%s)", game_id, column, actor, e.code)
            self.bus.publish(Event(
                type=EventType.INVALID_MOVE,
                data={"game_id": game_id, "player": actor, "column": column, "error": e.code},
                source="game_engine"
            ))
            raise

        self.bus.publish(Event(
            type=EventType.MOVE_MADE,
            data={"game_id": game_id, "player": actor, "column": column, "move_count": game.move_count},
            source="game_engine"
        ))

        match game.status.result:
            case GameResult.PLAYER_A_WON | GameResult.PLAYER_B_WON:
                logger.info("Game %d won by %s after %d moves", game_id, game.winner, game.move_count)
                self.bus.publish(Event(
                    type=EventType.GAME_WON,
                    data={"game_id": game_id, "winner": game.winner, "result": str(game.status.result)},
                    source="game_engine"
                ))
            case GameResult.DRAW:
                logger.info("Game %d drawn", game_id)
                self.bus.publish(Event(
                    type=EventType.GAME_DRAW,
                    data={"game_id": game_id},
                    source="game_engine"
                ))
            case None:
                self.bus.publish(Event(
                    type=EventType.TURN_CHANGED,
                    data={"game_id": game_id, "player": game.current_player, "turn": game.move_count + 1},
                    source="game_engine"
                ))

        return game

    def legal_moves(self, game_id: int) -> list[int]:
        return self.rules.get_legal_moves(self.get_game(game_id))

    def reset(self) -> None:
        """Forget all games. The lobby counter keeps counting."""
        self._games.clear()
        self.bus.publish(Event(
            type=EventType.GAME_RESET,
            source="game_engine"
        ))
