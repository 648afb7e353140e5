import numpy as np
import pytest

from bitfour.core.errors import LayoutError
from bitfour.game.bitboard import (
    COLUMNS,
    INITIAL_COLUMN_POINTERS,
    OVERFLOW_MASK,
    ROWS,
    apply_move,
    column_height,
    count_discs,
    decode,
    encode,
    has_overflowed,
    is_column_full,
)


def test_geometry_constants():
    assert OVERFLOW_MASK == 283691315109952
    assert OVERFLOW_MASK == sum(1 << (7 * c + 6) for c in range(7))
    assert INITIAL_COLUMN_POINTERS == (0, 7, 14, 21, 28, 35, 42)
    assert (ROWS, COLUMNS) == (6, 7)


def test_apply_move_sets_bit_and_advances_pointer():
    pointers = list(INITIAL_COLUMN_POINTERS)
    board = apply_move(0, pointers, 3)
    assert board == 1 << 21
    assert pointers[3] == 22
    board = apply_move(board, pointers, 3)
    assert board == (1 << 21) | (1 << 22)
    assert pointers == [0, 7, 14, 23, 28, 35, 42]


def test_seventh_disc_lands_on_sentinel():
    pointers = list(INITIAL_COLUMN_POINTERS)
    board = 0
    for _ in range(6):
        board = apply_move(board, pointers, 6)
        assert not has_overflowed(board)
    assert is_column_full(pointers, 6)
    board = apply_move(board, pointers, 6)
    assert has_overflowed(board)
    assert board & OVERFLOW_MASK == 1 << 48


def test_column_height_and_disc_count():
    pointers = [0, 9, 14, 21, 28, 35, 48]
    assert column_height(pointers, 0) == 0
    assert column_height(pointers, 1) == 2
    assert column_height(pointers, 6) == 6
    assert not is_column_full(pointers, 1)
    assert count_discs(0b1011) == 3


def test_decode_places_rows_top_first():
    grid = decode(1 | (1 << 7), 1 << 1)
    assert grid.shape == (ROWS, COLUMNS)
    assert grid[ROWS - 1, 0] == 1
    assert grid[ROWS - 1, 1] == 1
    assert grid[ROWS - 2, 0] == -1
    assert np.count_nonzero(grid) == 3


def test_encode_inverts_decode():
    board_a = (1 << 0) | (1 << 2) | (1 << 14)
    board_b = (1 << 1) | (1 << 7)
    a, b, pointers = encode(decode(board_a, board_b))
    assert (a, b) == (board_a, board_b)
    assert pointers == [3, 8, 15, 21, 28, 35, 42]


def test_encode_rejects_floating_disc():
    grid = np.zeros((ROWS, COLUMNS), dtype=int)
    grid[0, 2] = 1
    with pytest.raises(LayoutError, match="Column 2"):
        encode(grid)


@pytest.mark.parametrize("grid", [
    np.zeros((7, 7), dtype=int),
    np.full((ROWS, COLUMNS), 2),
])
def test_encode_rejects_bad_grids(grid):
    with pytest.raises(LayoutError):
        encode(grid)
