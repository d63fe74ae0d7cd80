"""Defines what can occupy a cell, and who can play"""

from enum import Enum, auto

from src.core.shared_types import Color


class Cell(Enum):
    EMPTY = auto()
    BLACK = auto()
    WHITE = auto()


class Player(Enum):
    """Unlike a Cell, a Player can never be 'empty'"""

    BLACK = auto()
    WHITE = auto()

    @property
    def opponent(self) -> "Player":
        return Player.WHITE if self == Player.BLACK else Player.BLACK

    @property
    def cell(self) -> Cell:
        """The cell value a piece of this player shows on the board"""
        return PLAYER_TO_CELL[self]

    @classmethod
    def from_color(cls, color: Color) -> "Player":
        return cls[color.name]

    def to_color(self) -> Color:
        return Color[self.name]


PLAYER_TO_CELL: dict[Player, Cell] = {
    Player.BLACK: Cell.BLACK,
    Player.WHITE: Cell.WHITE,
}

NOTATION_TO_CELL: dict[str, Cell] = {
    "b": Cell.BLACK,
    "w": Cell.WHITE,
}

CELL_TO_NOTATION: dict[Cell, str] = {value: key for key, value in NOTATION_TO_CELL.items()}

NOTATION_TO_PLAYER: dict[str, Player] = {
    "b": Player.BLACK,
    "w": Player.WHITE,
}

PLAYER_TO_NOTATION: dict[Player, str] = {
    value: key for key, value in NOTATION_TO_PLAYER.items()
}
