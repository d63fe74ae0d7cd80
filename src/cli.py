"""
Text based front-end.

Only presentation lives here: drawing the board, reading input, showing the status.
Every rule is delegated to the service (and from there to the domain layer).
"""

import argparse
import logging
from typing import Callable, Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    GameResponse,
    LegalMovesRequest,
    MoveRequest,
)
from src.core.exceptions import GameError
from src.core.shared_types import Color
from src.db.memory_repository import InMemoryGameRepository
from src.othello.board import Board
from src.othello.cells import Cell
from src.othello.position import BOARD_DIMENSIONS
from src.services.othello_service import OthelloService

logger = logging.getLogger(__name__)

CELL_SYMBOLS: dict[Cell, str] = {
    Cell.EMPTY: ".",
    Cell.BLACK: "X",
    Cell.WHITE: "O",
}

QUIT_COMMANDS = {"q", "quit", "exit"}
NEW_GAME_COMMANDS = {"n", "new"}
HINT_COMMANDS = {"h", "hint"}


def render_board(board_notation: str) -> str:
    """Board with column letters on top and row numbers on the left."""
    board = Board.from_notation(board_notation)
    header = "   " + " ".join(chr(ord("a") + col) for col in range(BOARD_DIMENSIONS[1]))
    lines = [header]
    for row_idx, row in enumerate(board.rows()):
        symbols = " ".join(CELL_SYMBOLS[cell] for cell in row)
        lines.append(f"{row_idx + 1:>2} {symbols}")
    return "\n".join(lines)


def render_status(response: GameResponse) -> str:
    lines = [
        f"Current Player: {response.current_player.value.capitalize()}",
        f"Score: Black - {response.scores[Color.BLACK]}, White - {response.scores[Color.WHITE]}",
    ]
    if response.game_over:
        lines.append("Game Over!")
        if response.winner:
            lines.append(f"Winner: {response.winner.value.capitalize()}")
        else:
            lines.append("It's a Draw!")
    return "\n".join(lines)


def game_loop(
    service: OthelloService,
    read: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> None:
    """Keep prompting until the user quits. Input is a square name (ex. d3), 'hint', 'new' or 'quit'."""
    read = read or input
    write = write or print

    response = service.create_new_game(CreateGameRequest())
    game_id: UUID = response.game_id

    while True:
        write(render_board(response.board))
        write(render_status(response))

        command = read("> ").strip().lower()
        if command in QUIT_COMMANDS:
            return

        if command in NEW_GAME_COMMANDS:
            response = service.create_new_game(CreateGameRequest())
            game_id = response.game_id
            continue

        if command in HINT_COMMANDS:
            hints = service.legal_moves(LegalMovesRequest(game_id=game_id))
            write("Legal moves: " + ", ".join(hints.legal_moves))
            continue

        try:
            response = service.make_move(MoveRequest(game_id=game_id, square=command))
        except GameError as error:
            write(str(error))


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play othello in the terminal.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of the game log (INFO shows forfeited turns and the final result).",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    service = OthelloService(InMemoryGameRepository())
    try:
        game_loop(service)
    except (KeyboardInterrupt, EOFError):
        print()


if __name__ == "__main__":
    main()
