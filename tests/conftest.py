"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Iterator

import pytest

from src.db.memory_repository import InMemoryGameRepository
from src.othello.board import Board

EMPTY_BOARD = "/".join(["8"] * 8)


@pytest.fixture
def board_from_notation() -> Callable[[str], Board]:
    """Call the inner function with a board string to get a fresh Board"""

    def _create_board(notation: str = EMPTY_BOARD) -> Board:
        return Board.from_notation(notation)

    return _create_board


@pytest.fixture
def memory_repository() -> Iterator[InMemoryGameRepository]:
    """Fresh in-memory repository for every test"""
    repo = InMemoryGameRepository()
    yield repo
