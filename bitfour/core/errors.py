"""Typed rejections raised by the rules engine.

Every error is caller-correctable: the operation is refused and no state
changes. ``code`` mirrors the class name so callers can match on strings
when the exception crosses a process boundary.
"""


class GameError(Exception):
    """Base class for all move and game-creation rejections."""

    message = "Game error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

    @property
    def code(self) -> str:
        return type(self).__name__


class SamePlayers(GameError):
    message = "Same players"


class NotPlayerTurn(GameError):
    message = "Not player's turn"


class GameAlreadyFinished(GameError):
    message = "Game already finished"


class InvalidColumnInput(GameError):
    message = "Invalid column input"


class ColumnAlreadyFull(GameError):
    message = "Column already full"


class GameNotFound(GameError):
    message = "Game not found"


class LayoutError(ValueError):
    """Malformed persisted record or board grid."""
