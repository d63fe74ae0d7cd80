"""
A position (cell coordinate) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

# Othello board is always 8x8 (rows, columns). Kept as a constant so nothing else hardcodes the numbers
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, name: str) -> Position:
        """Square names: 'a1' - 'h8' get converted to (0,0) - (7,7). The letter is the column, the number the row (row 1 on top)."""
        col = ord(name[0].lower()) - ord("a")
        row = int(name[1:]) - 1
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{ascii_lowercase[self.col]}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def shifted(self, dr: int, dc: int) -> Position:
        """Neighbouring position along a direction. Might fall off the board, so check bounds before using it."""
        return Position(self.row + dr, self.col + dc)


def all_positions() -> list[Position]:
    """Every position on the board, in row-major order."""
    return [
        Position(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
