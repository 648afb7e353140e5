"""
Fixed-size byte layout for Lobby and Game records.

The storage boundary persists records as opaque bytes. All integers are
little-endian; player ids are UTF-8, NUL padded to 32 bytes. The game
status is always two bytes (discriminant, result) so every record has the
same size.
"""

import struct

from .errors import LayoutError
from .types import Game, GameResult, GameStatus, Lobby, StatusKind


PLAYER_ID_SIZE = 32

_LOBBY = struct.Struct("<QQ7Q")
_GAME = struct.Struct(f"<Q{PLAYER_ID_SIZE}s{PLAYER_ID_SIZE}s7Q2QBBB")

LOBBY_RECORD_SIZE = _LOBBY.size  # 72
GAME_RECORD_SIZE = _GAME.size  # 147


def encode_lobby(lobby: Lobby) -> bytes:
    """Pack a lobby into its 72-byte record."""
    if len(lobby.initial_column_pointers) != 7:
        raise LayoutError("Lobby must carry exactly 7 column pointers")
    try:
        return _LOBBY.pack(lobby.game_count, lobby.overflow_mask, *lobby.initial_column_pointers)
    except struct.error as e:
        raise LayoutError(f"Lobby field out of range: {e}") from e


def decode_lobby(data: bytes) -> Lobby:
    """Unpack a lobby record."""
    if len(data) != LOBBY_RECORD_SIZE:
        raise LayoutError(f"Lobby record must be {LOBBY_RECORD_SIZE} bytes, got {len(data)}")
    game_count, overflow_mask, *pointers = _LOBBY.unpack(data)
    return Lobby(
        game_count=game_count,
        overflow_mask=overflow_mask,
        initial_column_pointers=tuple(pointers),
    )


def _pack_player(player: str) -> bytes:
    raw = player.encode("utf-8")
    if b"\x00" in raw:
        raise LayoutError(f"Player id may not contain NUL: {player!r}")
    if len(raw) > PLAYER_ID_SIZE:
        raise LayoutError(f"Player id longer than {PLAYER_ID_SIZE} bytes: {player!r}")
    return raw


def _unpack_player(raw: bytes) -> str:
    try:
        return raw.rstrip(b"\x00").decode("utf-8")
    except UnicodeDecodeError as e:
        raise LayoutError(f"Player id is not valid UTF-8: {raw!r}") from e


def encode_game(game: Game) -> bytes:
    """Pack a game into its fixed-size record."""
    if len(game.column_pointers) != 7 or len(game.boards) != 2:
        raise LayoutError("Game must carry 7 column pointers and 2 boards")

    status = game.status
    result = status.result.value if status.result is not None else 0

    try:
        return _GAME.pack(
            game.id,
            _pack_player(game.player_a),
            _pack_player(game.player_b),
            *game.column_pointers,
            *game.boards,
            game.move_count,
            status.kind.value,
            result,
        )
    except struct.error as e:
        raise LayoutError(f"Game field out of range: {e}") from e


def decode_game(data: bytes) -> Game:
    """Unpack a game record."""
    if len(data) != GAME_RECORD_SIZE:
        raise LayoutError(f"Game record must be {GAME_RECORD_SIZE} bytes, got {len(data)}")

    fields = _GAME.unpack(data)
    game_id, raw_a, raw_b = fields[:3]
    pointers = list(fields[3:10])
    boards = list(fields[10:12])
    move_count, kind_tag, result_tag = fields[12:]

    try:
        kind = StatusKind(kind_tag)
    except ValueError as e:
        raise LayoutError(f"Unknown status discriminant: {kind_tag}") from e

    if kind == StatusKind.FINISHED:
        try:
            status = GameStatus.finished(GameResult(result_tag))
        except ValueError as e:
            raise LayoutError(f"Unknown result discriminant: {result_tag}") from e
    else:
        status = GameStatus(kind)

    return Game(
        id=game_id,
        player_a=_unpack_player(raw_a),
        player_b=_unpack_player(raw_b),
        column_pointers=pointers,
        boards=boards,
        move_count=move_count,
        status=status,
    )
