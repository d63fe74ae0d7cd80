"""The Game board: which piece (if any) sits on every cell"""

from dataclasses import dataclass
from string import digits
from typing import Self

from src.core.exceptions import InvalidNotationError
from src.othello.cells import CELL_TO_NOTATION, NOTATION_TO_CELL, Cell
from src.othello.notation import is_valid_board
from src.othello.position import BOARD_DIMENSIONS, Position, all_positions


@dataclass
class Board:
    cells: dict[Position, Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls({position: Cell.EMPTY for position in all_positions()})

    @classmethod
    def from_notation(cls, board_str: str) -> Self:
        """Construct a board from the board part of the game notation.

        ex. 8/8/8/3wb3/3bw3/8/8/8 means:
        * rows 1, 2, 3 (top of the board) have 8 consecutive empty cells
        * row 4 has 3 empty cells, a white piece, a black piece and 3 more empty cells
        * row 5 is its mirror image
        * the bottom three rows are empty
        """
        if not is_valid_board(board_str):
            raise InvalidNotationError(f"Cannot interpret {board_str!r} as a board.")

        cells: dict[Position, Cell] = {}
        for row, row_str in enumerate(board_str.split("/")):
            col = 0
            for character in row_str:
                if character in digits:
                    # A number denotes the amount of empty cells after each other
                    for _ in range(int(character)):
                        cells[Position(row, col)] = Cell.EMPTY
                        col += 1
                else:
                    cells[Position(row, col)] = NOTATION_TO_CELL[character]
                    col += 1
        return cls(cells)

    def to_notation(self) -> str:
        """Rows are separated by slashes."""
        return "/".join(self._row_to_notation(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_notation(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            cell = self.cell(Position(row, col))
            if cell == Cell.EMPTY:
                empty_count += 1
                continue

            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(CELL_TO_NOTATION[cell])

        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def cell(self, position: Position) -> Cell:
        return self.cells[position]

    def place(self, position: Position, cell: Cell) -> None:
        """Update a single cell"""
        self.cells[position] = cell

    def copy(self) -> Self:
        """Cells are immutable enum members, so a shallow copy of the mapping is a full snapshot"""
        return type(self)(dict(self.cells))

    def locate(self, cell: Cell) -> list[Position]:
        return [position for position in all_positions() if self.cells[position] == cell]

    def empty_positions(self) -> list[Position]:
        return self.locate(Cell.EMPTY)

    def count(self, cell: Cell) -> int:
        return sum(1 for value in self.cells.values() if value == cell)

    def is_full(self) -> bool:
        return all(cell != Cell.EMPTY for cell in self.cells.values())

    def rows(self) -> list[list[Cell]]:
        """Grid view, top row first. Handy for presentation layers."""
        return [
            [self.cells[Position(row, col)] for col in range(BOARD_DIMENSIONS[1])]
            for row in range(BOARD_DIMENSIONS[0])
        ]
