from bitfour.game.engine import make_move


ALICE = "alice"
BOB = "bob"


def _pair(first: int, second: int) -> list[int]:
    # Fills two columns completely; ``first`` takes A,B,A,... and ``second`` B,A,B,...
    return [first, second, second, first] * 3


# Every column alternates colours bottom-up and rows read AABBAAB / BBAABBA,
# so no line of four ever forms.
DRAW_COLUMNS = _pair(0, 2) + _pair(1, 3) + _pair(4, 6) + [5] * 6

VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]


def play(lobby, game, columns):
    """Play ``columns`` in order, always as the player to move."""
    for column in columns:
        make_move(lobby, game, game.current_player, column)
    return game
