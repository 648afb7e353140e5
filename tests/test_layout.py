import struct

import pytest

from bitfour.core.errors import LayoutError
from bitfour.core.layout import (
    GAME_RECORD_SIZE,
    LOBBY_RECORD_SIZE,
    decode_game,
    decode_lobby,
    encode_game,
    encode_lobby,
)
from bitfour.core.types import GameResult, GameStatus, StatusKind

from .helpers import ALICE, BOB, VERTICAL_WIN, play


def test_record_sizes():
    assert LOBBY_RECORD_SIZE == 8 + 8 + 7 * 8
    assert GAME_RECORD_SIZE == 8 + 32 + 32 + 7 * 8 + 2 * 8 + 1 + 2


def test_lobby_record(lobby):
    lobby.game_count = 5
    data = encode_lobby(lobby)
    assert len(data) == LOBBY_RECORD_SIZE
    assert struct.unpack_from("<QQ", data) == (5, 283691315109952)
    assert decode_lobby(data) == lobby


def test_ongoing_game_record(lobby, game):
    play(lobby, game, [3, 3])
    data = encode_game(game)
    assert len(data) == GAME_RECORD_SIZE
    assert data[8:8 + len(ALICE)] == ALICE.encode()
    assert data[-3:] == bytes([2, StatusKind.ONGOING.value, 0])
    assert decode_game(data) == game


def test_finished_game_record(lobby, game):
    play(lobby, game, VERTICAL_WIN)
    data = encode_game(game)
    assert data[-2:] == bytes([StatusKind.FINISHED.value, GameResult.PLAYER_A_WON.value])
    restored = decode_game(data)
    assert restored.status == GameStatus.finished(GameResult.PLAYER_A_WON)
    assert restored.players == (ALICE, BOB)


def test_idle_status_is_readable(game):
    data = bytearray(encode_game(game))
    data[-2] = StatusKind.IDLE.value
    assert decode_game(bytes(data)).status.kind == StatusKind.IDLE


@pytest.mark.parametrize("offset,value", [(-2, 7), (-1, 9)])
def test_unknown_discriminants(lobby, game, offset, value):
    play(lobby, game, VERTICAL_WIN)
    data = bytearray(encode_game(game))
    data[offset] = value
    with pytest.raises(LayoutError):
        decode_game(bytes(data))


def test_wrong_lengths(lobby, game):
    with pytest.raises(LayoutError):
        decode_lobby(encode_lobby(lobby)[:-1])
    with pytest.raises(LayoutError):
        decode_game(encode_game(game) + b"\x00")


def test_player_id_limits(game):
    game.player_b = "x" * 33
    with pytest.raises(LayoutError, match="longer than 32"):
        encode_game(game)
    game.player_b = "a\x00b"
    with pytest.raises(LayoutError, match="NUL"):
        encode_game(game)


def test_negative_counter_rejected(lobby):
    lobby.game_count = -1
    with pytest.raises(LayoutError):
        encode_lobby(lobby)


def test_layout_exported_from_core(lobby):
    import bitfour.core as core

    assert core.decode_lobby(core.encode_lobby(lobby)) == lobby
    assert core.LOBBY_RECORD_SIZE == LOBBY_RECORD_SIZE
    assert core.GAME_RECORD_SIZE == GAME_RECORD_SIZE
