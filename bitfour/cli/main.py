"""
CLI for the bitfour rules engine.

Usage:
    bitfour --help
    bitfour play alice bob
    bitfour check 15
    bitfour show 1 2
"""

import logging
from typing import Annotated

import typer

from ..core.config import DisplaySettings, get_settings
from ..core.errors import GameError
from ..core.types import Game
from ..game.bitboard import COLUMNS, decode
from ..game.engine import GameEngine
from ..game.rules import has_won


app = typer.Typer(
    name="bitfour",
    help="Connect Four rules engine on 64-bit bitboards.",
    add_completion=False,
)


def board_to_ascii(board_a: int, board_b: int, display: DisplaySettings | None = None) -> str:
    """Render two bitboards as a text grid, top row first."""
    display = display or get_settings().display
    symbols = {1: display.player_a_symbol, -1: display.player_b_symbol, 0: display.empty_symbol}

    lines = [" " + " ".join(str(col) for col in range(COLUMNS))]
    for row in decode(board_a, board_b):
        lines.append("|" + "|".join(symbols[int(cell)] for cell in row) + "|")
    lines.append("+" + "-+" * COLUMNS)
    return "\n".join(lines)


def print_status(game: Game) -> None:
    """Print board and whose turn it is (or the result)."""
    display = get_settings().display
    typer.echo(board_to_ascii(game.boards[0], game.boards[1], display))
    typer.echo(f"Moves: {game.move_count}")

    if game.is_finished:
        if game.winner is not None:
            typer.echo(f"{game.winner} wins!")
        else:
            typer.echo("It's a draw!")
    else:
        symbol = display.player_a_symbol if game.current_player == game.player_a else display.player_b_symbol
        typer.echo(f"Current player: {game.current_player} ({symbol})")


def parse_board(value: str) -> int:
    """Accept decimal, 0x hex or 0b binary board literals."""
    try:
        board = int(value, 0)
    except ValueError:
        raise typer.BadParameter(f"Not an integer: {value}") from None
    if not 0 <= board < 1 << 64:
        raise typer.BadParameter("Board must fit in 64 unsigned bits")
    return board


@app.callback()
def configure() -> None:
    """Configure logging from settings before any command runs."""
    settings = get_settings().logging
    logging.basicConfig(level=settings.level, format=settings.format)


@app.command()
def play(
    player_a: Annotated[str, typer.Argument(help="Player moving first")],
    player_b: Annotated[str, typer.Argument(help="Player moving second")],
):
    """
    Play a hot-seat game in the terminal.

    Enter a column number on each turn, 'q' to quit.
    """
    engine = GameEngine()
    try:
        game = engine.new_game(player_a, player_b)
    except GameError as e:
        typer.echo(f"Cannot start game: {e}", err=True)
        raise typer.Exit(code=1) from None

    while not game.is_finished:
        print_status(game)
        user_input = typer.prompt(f"{game.current_player}, column (0-{COLUMNS - 1})")
        if user_input.strip().lower() == "q":
            typer.echo("Game quit.")
            return

        try:
            column = int(user_input)
        except ValueError:
            typer.echo(f"Enter a number 0-{COLUMNS - 1}")
            continue

        try:
            engine.make_move(game.id, game.current_player, column)
        except GameError as e:
            typer.echo(f"Invalid move: {e}")

    print_status(game)


@app.command()
def check(
    board: Annotated[str, typer.Argument(help="Bitboard as an integer (0x/0b prefixes allowed)")],
):
    """Report whether a single bitboard contains four in a row."""
    value = parse_board(board)
    if has_won(value):
        typer.echo("four in a row")
    else:
        typer.echo("no four in a row")
        raise typer.Exit(code=1)


@app.command()
def show(
    board_a: Annotated[str, typer.Argument(help="Player A bitboard")],
    board_b: Annotated[str, typer.Argument(help="Player B bitboard")] = "0",
):
    """Render one or two bitboards as a grid."""
    a = parse_board(board_a)
    b = parse_board(board_b)
    if a & b:
        raise typer.BadParameter("Boards overlap")
    typer.echo(board_to_ascii(a, b))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
