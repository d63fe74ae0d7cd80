"""
Placement and capturing rules of othello

Key idea: a placement captures along straight lines. We cast a ray from the placed piece in each of the
8 directions and collect opponent pieces until the ray is closed off by one of our own pieces.

All functions in here are pure: they read the board they are given and never modify it.
(Except for `apply_move`, which returns a fresh board.)
"""

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import IllegalMoveError
from src.othello.board import Board
from src.othello.cells import Cell, Player
from src.othello.position import Position, all_positions

Vector = tuple[int, int]

# every compass direction, i.e. all offsets except (0, 0)
DIRECTIONS: list[Vector] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

STARTING_PIECES: dict[Position, Cell] = {
    Position(3, 3): Cell.WHITE,
    Position(4, 4): Cell.WHITE,
    Position(3, 4): Cell.BLACK,
    Position(4, 3): Cell.BLACK,
}


@dataclass(frozen=True)
class Score:
    black: int
    white: int

    def to_dict(self) -> dict[str, int]:
        return {"black": self.black, "white": self.white}


# --- BOARD INITIALIZER ---
def initialize_board() -> Board:
    """Empty board with the four centre pieces placed in the standard opening"""
    board = Board.empty()
    for position, cell in STARTING_PIECES.items():
        board.place(position, cell)
    return board


# --- FLIP RESOLVER ---
def raycasting_flips(
    origin: Position, player: Player, board: Board, direction: Vector
) -> list[Position]:
    """
    Raycasting algorithm
    -----

    Walk away from the origin along the direction, collecting opponent pieces.
    * hit one of your own pieces (the anchor) -> the line is closed, everything collected gets flipped.
    * hit an empty cell or fall off the board first -> nothing in this direction gets flipped.

    NOTE: A ray that hits your own piece straight away collects nothing, so also flips nothing.
    """
    dr, dc = direction
    own_cell = player.cell
    opponent_cell = player.opponent.cell

    captured: list[Position] = []
    target = origin.shifted(dr, dc)
    while target.is_within_bounds():
        cell = board.cell(target)
        if cell == opponent_cell:
            captured.append(target)
        elif cell == own_cell:
            return captured
        else:
            return []
        target = target.shifted(dr, dc)

    # reached the edge without an anchor
    return []


def get_flippable_positions(
    row: int, col: int, player: Player, board: Board
) -> list[Position]:
    """
    Every opponent piece that would be captured if `player` placed a piece on (row, col).

    Does not check if (row, col) itself is empty (that is the validator's job).
    Every direction is resolved independently, so the order of DIRECTIONS does not matter for the result.
    """
    origin = Position(row, col)
    if not origin.is_within_bounds():
        return []

    flippable: list[Position] = []
    for direction in DIRECTIONS:
        flippable.extend(raycasting_flips(origin, player, board, direction))
    return flippable


# --- MOVE VALIDATOR ---
def is_valid_move(row: int, col: int, player: Player, board: Board) -> bool:
    """A placement is legal on an empty cell on the board that captures at least one piece"""
    position = Position(row, col)
    if not position.is_within_bounds():
        return False

    if board.cell(position) != Cell.EMPTY:
        return False

    return len(get_flippable_positions(row, col, player, board)) > 0


# --- AVAILABILITY SCANNER ---
def player_has_any_valid_move(player: Player, board: Board) -> bool:
    """Row-major scan, stops at the first legal placement found"""
    return any(
        is_valid_move(position.row, position.col, player, board)
        for position in all_positions()
    )


def valid_moves(player: Player, board: Board) -> list[Position]:
    """All legal placements for the player, in row-major order"""
    return [
        position
        for position in all_positions()
        if is_valid_move(position.row, position.col, player, board)
    ]


# --- SCORE CALCULATOR ---
def calculate_score(board: Board) -> Score:
    return Score(black=board.count(Cell.BLACK), white=board.count(Cell.WHITE))


def winner_of(score: Score) -> Optional[Player]:
    """Strictly more pieces wins. Equal counts: a draw (no winner)."""
    if score.black > score.white:
        return Player.BLACK
    if score.white > score.black:
        return Player.WHITE
    return None


# --- APPLYING A MOVE / TURN RESOLUTION ---
def apply_move(row: int, col: int, player: Player, board: Board) -> Board:
    """Place the piece and flip every captured piece. Returns a new board, the given one is left untouched."""
    if not is_valid_move(row, col, player, board):
        raise IllegalMoveError(
            f"{player.name.lower()} cannot place a piece on ({row}, {col})."
        )

    new_board = board.copy()
    new_board.place(Position(row, col), player.cell)
    for position in get_flippable_positions(row, col, player, board):
        new_board.place(position, player.cell)
    return new_board


def next_player(mover: Player, board: Board) -> Optional[Player]:
    """
    Who moves after `mover` just played on `board`?
    ----

    1. The opponent, if they have any legal placement.
    2. Otherwise the mover again (the opponent forfeits their turn), if the mover still has a legal placement.
    3. Otherwise nobody: the game is over.
    """
    if player_has_any_valid_move(mover.opponent, board):
        return mover.opponent
    if player_has_any_valid_move(mover, board):
        return mover
    return None
