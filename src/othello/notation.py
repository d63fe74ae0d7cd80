"""
Text notation for othello positions. Modelled after FEN in chess.

Board string:
    8 rows separated by slashes, read from the top row (row 0) to the bottom row (row 7).
    * 'b' is a black piece, 'w' a white piece
    * a digit denotes that many consecutive empty cells
    ex. the starting position reads 8/8/8/3wb3/3bw3/8/8/8

Game notation:
    <board string> <player to move>
    where the player to move is either "b" or "w".
"""

from dataclasses import dataclass
from string import ascii_lowercase, digits
from typing import Self

from src.core.exceptions import InvalidNotationError
from src.othello.cells import (
    NOTATION_TO_CELL,
    NOTATION_TO_PLAYER,
    PLAYER_TO_NOTATION,
    Player,
)
from src.othello.position import BOARD_DIMENSIONS

STARTING_BOARD = "8/8/8/3wb3/3bw3/8/8/8"
STARTING_NOTATION = f"{STARTING_BOARD} b"


def is_valid_notation(notation: str) -> bool:
    """Check if given string follows the game notation: board + player to move."""
    parts = notation.split(" ")
    if len(parts) != 2:
        return False

    board, player = parts
    return is_valid_board(board) and is_valid_player_code(player)


def is_valid_board(board: str) -> bool:
    """Only check the part of the notation that encodes the board."""
    num_rows, num_cols = BOARD_DIMENSIONS
    row_strings = board.split("/")
    if len(row_strings) != num_rows:
        return False

    for row_string in row_strings:
        col_count = 0
        for character in row_string:
            if character in digits:
                col_count += int(character)
            elif character in NOTATION_TO_CELL:
                col_count += 1
            else:
                return False

        # every row must describe exactly one full row of cells
        if col_count != num_cols:
            return False
    return True


def is_valid_player_code(player: str) -> bool:
    return player in NOTATION_TO_PLAYER


def is_valid_square(square: str) -> bool:
    """Valid square should be a letter for the column + a number for the row"""
    num_rows, num_cols = BOARD_DIMENSIONS
    if len(square) < 2:
        return False

    col_char, row_chars = square[0].lower(), square[1:]
    if col_char not in ascii_lowercase[:num_cols]:
        return False

    if not all(character in digits for character in row_chars):
        return False

    return 1 <= int(row_chars) <= num_rows


@dataclass
class GameState:
    """
    Data that can be constructed from a game notation string.

    ex) A new game has the notation
    8/8/8/3wb3/3bw3/8/8/8 b
    i.e. the four centre pieces are placed and it is black to move.
    """

    board: str
    player_to_move: Player

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        if not is_valid_notation(notation):
            raise InvalidNotationError(
                f"Cannot interpret supplied string as game notation: {notation!r}"
            )
        board, player_code = notation.split(" ")
        return cls(board, NOTATION_TO_PLAYER[player_code])

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_notation(STARTING_NOTATION)

    def to_notation(self) -> str:
        return f"{self.board} {PLAYER_TO_NOTATION[self.player_to_move]}"
