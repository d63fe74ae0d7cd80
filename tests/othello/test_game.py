"""Unit tests for /src/othello/game.py"""

import logging

import pytest

from src.core.exceptions import GameStateError, IllegalMoveError, InvalidNotationError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.othello.cells import Player
from src.othello.game import Game, GameStatus
from src.othello.position import Position
from src.othello.rules import Score

STARTING_NOTATION = "8/8/8/3wb3/3bw3/8/8/8 b"
CHECKERBOARD = "/".join(["bwbwbwbw", "wbwbwbwb"] * 4)
CORNER_LOCKED = "wbbbbbbb/bb6/b1b5/b2b4/b3b3/b4b2/b5b1/b6b"
FORFEIT_SETUP = "bw6/8/8/8/8/8/8/bw6"

# one empty cell left (h8), black fills it and takes the last white piece on the bottom row
LAST_MOVE = "/".join(["bbbbbbbb"] * 7 + ["bbbbbbw1"])


# -- CREATION LOGIC --
def test_new_game() -> None:
    """Standard opening, black to move"""
    game = Game.new_game()
    assert game.board.to_notation() == "8/8/8/3wb3/3bw3/8/8/8"
    assert game.current_player == Player.BLACK
    assert game.status == Status.IN_PROGRESS
    assert game.moves == []
    assert game.passes == 0
    assert game.score == Score(black=2, white=2)
    assert game.winner is None


def test_new_game_from_notation() -> None:
    game = Game.new_game("8/8/8/3wb3/3bw3/8/8/8 w")
    assert game.current_player == Player.WHITE


@pytest.mark.parametrize("notation", ["8/8/8 b", "8/8/8/3wb3/3bw3/8/8/² b"])
def test_new_game_from_invalid_notation(notation: str) -> None:
    with pytest.raises(InvalidNotationError):
        _ = Game.new_game(notation)


def test_new_game_first_player_has_to_pass() -> None:
    """White to move on paper, but white has no capture. Black gets the turn."""
    game = Game.new_game(f"{FORFEIT_SETUP} w")
    assert game.current_player == Player.BLACK
    assert game.passes == 1
    assert game.status == Status.IN_PROGRESS


def test_new_game_first_player_pass_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="src.othello.game"):
        _ = Game.new_game(f"{FORFEIT_SETUP} w")
    assert "Player WHITE has no valid moves in the starting position. Player BLACK moves first." in caplog.text
    assert "plays again" not in caplog.text


def test_new_game_from_finished_position() -> None:
    """Nobody can move in this position, so the game is over straight away"""
    game = Game.new_game(f"{CORNER_LOCKED} b")
    assert game.is_over
    assert game.winner == Player.BLACK
    assert game.legal_moves() == []


def test_game_model_roundtrip() -> None:
    model = GameModel(
        current_notation="8/8/3b4/3bb3/3bw3/8/8/8 w",
        moves=["d3"],
        status="in progress",
        passes=0,
    )
    game = Game.from_model(model)
    assert game.to_model() == model


def test_game_from_model_builds_domain_objects() -> None:
    model = GameModel(
        current_notation="8/8/3b4/3bb3/3bw3/8/8/8 w",
        moves=["d3"],
        status="in progress",
        passes=2,
    )
    game = Game.from_model(model)
    assert game.board.to_notation() == "8/8/3b4/3bb3/3bw3/8/8/8"
    assert game.current_player == Player.WHITE
    assert game.moves == [Position(2, 3)]
    assert game.status == Status.IN_PROGRESS
    assert game.passes == 2


def test_invalid_status_name() -> None:
    model = GameModel(
        current_notation=STARTING_NOTATION,
        moves=[],
        status="not_existing",
    )
    with pytest.raises(GameStateError):
        _ = Game.from_model(model)


# -- PLAYING --
def test_first_move() -> None:
    game = Game.new_game()
    flipped = game.make_move(2, 3)
    assert flipped == [Position(3, 3)]
    assert game.board.to_notation() == "8/8/3b4/3bb3/3bw3/8/8/8"
    assert game.current_player == Player.WHITE
    assert game.moves == [Position(2, 3)]
    assert game.score == Score(black=4, white=1)


def test_players_alternate() -> None:
    game = Game.new_game()
    game.make_move(2, 3)  # black d3
    game.make_move(2, 2)  # white c3
    assert game.current_player == Player.BLACK
    assert game.board.to_notation() == "8/8/2wb4/3wb3/3bw3/8/8/8"
    assert game.moves == [Position(2, 3), Position(2, 2)]


@pytest.mark.parametrize("row, col", [(0, 0), (3, 3), (2, 4), (-1, 3), (3, 8)])
def test_illegal_move_leaves_state_untouched(row: int, col: int) -> None:
    game = Game.new_game()
    before = game.to_model()
    with pytest.raises(IllegalMoveError):
        game.make_move(row, col)
    assert game.to_model() == before


def test_illegal_move_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    game = Game.new_game()
    with caplog.at_level(logging.WARNING, logger="src.othello.game"):
        with pytest.raises(IllegalMoveError):
            game.make_move(0, 0)
    assert "Invalid move for player BLACK" in caplog.text


def test_forfeit_keeps_turn(caplog: pytest.LogCaptureFixture) -> None:
    """After black's c1 white cannot capture anything, so black plays again"""
    game = Game.new_game(f"{FORFEIT_SETUP} b")
    with caplog.at_level(logging.INFO, logger="src.othello.game"):
        game.make_move(0, 2)

    assert game.current_player == Player.BLACK
    assert game.passes == 1
    assert game.status == Status.IN_PROGRESS
    assert "Player WHITE has no valid moves. Player BLACK plays again." in caplog.text


def test_game_ends_when_nobody_can_move() -> None:
    """Board is not full, but after black's second move white has no pieces left"""
    game = Game.new_game(f"{FORFEIT_SETUP} b")
    game.make_move(0, 2)
    game.make_move(7, 2)

    assert game.is_over
    assert not game.board.is_full()
    assert game.score == Score(black=6, white=0)
    assert game.winner == Player.BLACK


def test_game_ends_when_board_is_full() -> None:
    game = Game.new_game(f"{LAST_MOVE} b")
    game.make_move(7, 7)
    assert game.board.is_full()
    assert game.is_over
    assert game.winner == Player.BLACK
    assert game.score == Score(black=64, white=0)


def test_full_checkerboard_is_a_draw() -> None:
    game = Game.new_game(f"{CHECKERBOARD} b")
    assert game.is_over
    assert game.score == Score(black=32, white=32)
    assert game.winner is None


def test_full_board_majority_wins() -> None:
    white_heavy = "/".join(["wwwwwwww"] * 5 + ["bbbbbbbb"] * 3)
    game = Game.new_game(f"{white_heavy} b")
    assert game.is_over
    assert game.winner == Player.WHITE


def test_no_moves_after_game_over() -> None:
    game = Game.new_game(f"{CHECKERBOARD} b")
    with pytest.raises(GameStateError):
        game.make_move(0, 0)


def test_game_over_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="src.othello.game"):
        _ = Game.new_game(f"{CHECKERBOARD} b")
    assert "It's a draw" in caplog.text


def test_legal_moves() -> None:
    game = Game.new_game()
    assert game.legal_moves() == [
        Position(2, 3),
        Position(3, 2),
        Position(4, 5),
        Position(5, 4),
    ]


def test_status_report() -> None:
    game = Game.new_game()
    game.make_move(2, 3)
    assert game.status_report() == GameStatus(
        current_player=Player.WHITE,
        score=Score(black=4, white=1),
        game_over=False,
        winner=None,
    )


def test_status_report_after_game_over() -> None:
    game = Game.new_game(f"{LAST_MOVE} b")
    game.make_move(7, 7)
    report = game.status_report()
    assert report.game_over
    assert report.winner == Player.BLACK
    assert report.score == Score(black=64, white=0)


def test_play_until_the_end() -> None:
    """Always pick the first legal move. The game must finish, with a consistent score."""
    game = Game.new_game()
    for _ in range(64):
        if game.is_over:
            break
        move = game.legal_moves()[0]
        game.make_move(move.row, move.col)

    assert game.is_over
    score = game.score
    assert score.black + score.white + len(game.board.empty_positions()) == 64
    assert len(game.moves) <= 60
