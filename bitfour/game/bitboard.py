"""
Bit-packed Connect Four board.

Each column owns 7 consecutive bits: 6 playable rows plus one overflow
sentinel on top. Column ``c`` starts at bit ``7 * c`` and its sentinel sits
at ``7 * c + 6``, so the whole board fits in 49 bits of a 64-bit word::

     6 13 20 27 34 41 48   <- sentinels
     5 12 19 26 33 40 47
     4 11 18 25 32 39 46
     3 10 17 24 31 38 45
     2  9 16 23 30 37 44
     1  8 15 22 29 36 43
     0  7 14 21 28 35 42

The sentinel row keeps horizontal and diagonal shifts from wrapping from
the top of one column into the bottom of the next.
"""

import numpy as np

from ..core.errors import LayoutError


COLUMNS = 7
ROWS = 6
COLUMN_HEIGHT = ROWS + 1
MAX_MOVES = ROWS * COLUMNS

OVERFLOW_MASK = sum(1 << (COLUMN_HEIGHT * c + ROWS) for c in range(COLUMNS))
INITIAL_COLUMN_POINTERS = tuple(COLUMN_HEIGHT * c for c in range(COLUMNS))


def apply_move(board: int, column_pointers: list[int], column: int) -> int:
    """Drop a disc into ``column``.

    Sets the bit at ``column_pointers[column]`` and advances that pointer in
    place. Nothing is checked here: a full column spills into its sentinel
    bit, which the caller detects with :func:`has_overflowed`.

    Returns:
        The updated board
    """
    board |= 1 << column_pointers[column]
    column_pointers[column] += 1
    return board


def has_overflowed(board: int, overflow_mask: int = OVERFLOW_MASK) -> bool:
    """True if any column's sentinel bit is set."""
    return board & overflow_mask != 0


def column_height(column_pointers: list[int], column: int) -> int:
    """Number of discs already in ``column``."""
    return column_pointers[column] - COLUMN_HEIGHT * column


def is_column_full(column_pointers: list[int], column: int) -> bool:
    return column_height(column_pointers, column) >= ROWS


def count_discs(board: int) -> int:
    return bin(board).count("1")


def decode(board_a: int, board_b: int) -> np.ndarray:
    """Unpack two player boards into a (ROWS, COLUMNS) grid.

    Row 0 is the top of the board. Player A cells are 1, player B cells are
    -1, empty cells 0.
    """
    grid = np.zeros((ROWS, COLUMNS), dtype=int)
    for col in range(COLUMNS):
        for row in range(ROWS):
            bit = 1 << (COLUMN_HEIGHT * col + row)
            if board_a & bit:
                grid[ROWS - 1 - row, col] = 1
            elif board_b & bit:
                grid[ROWS - 1 - row, col] = -1
    return grid


def encode(grid) -> tuple[int, int, list[int]]:
    """Pack a grid produced by :func:`decode` back into bitboards.

    Args:
        grid: Array-like of shape (ROWS, COLUMNS) holding 1, -1 or 0

    Returns:
        Tuple of (board_a, board_b, column_pointers)

    Raises:
        LayoutError: If the grid has the wrong shape, unknown values, or a
            disc floating above an empty cell
    """
    cells = np.asarray(grid)
    if cells.shape != (ROWS, COLUMNS):
        raise LayoutError(f"Grid must have shape {(ROWS, COLUMNS)}, got {cells.shape}")
    if not np.isin(cells, (-1, 0, 1)).all():
        raise LayoutError("Grid cells must be 1, -1 or 0")

    board_a = 0
    board_b = 0
    pointers = list(INITIAL_COLUMN_POINTERS)

    for col in range(COLUMNS):
        # Walk bottom-up; the first empty cell ends the column.
        stack = cells[::-1, col]
        height = 0
        while height < ROWS and stack[height] != 0:
            bit = 1 << (COLUMN_HEIGHT * col + height)
            if stack[height] == 1:
                board_a |= bit
            else:
                board_b |= bit
            height += 1
        if np.any(stack[height:] != 0):
            raise LayoutError(f"Column {col} has a disc above an empty cell")
        pointers[col] += height

    return board_a, board_b, pointers
