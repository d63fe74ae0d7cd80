"""
The Game class will be the entrypoint into the domain layer for the service layer.
It holds the state of a single session (board + player to move) and runs the turn protocol:
validate the placement, apply the flips, decide who moves next or whether the game is over.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, IllegalMoveError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.othello.board import Board
from src.othello.cells import Player
from src.othello.notation import GameState
from src.othello.position import Position
from src.othello.rules import (
    Score,
    apply_move,
    calculate_score,
    get_flippable_positions,
    is_valid_move,
    next_player,
    valid_moves,
    winner_of,
)

logger = logging.getLogger(__name__)


@dataclass
class GameStatus:
    """What a front-end needs to show the state of the game"""

    current_player: Player
    score: Score
    game_over: bool
    winner: Optional[Player]


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    current_player: Player
    status: Status
    moves: list[Position] = field(default_factory=list)
    passes: int = 0

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )

        state = GameState.from_notation(model.current_notation)
        return cls(
            board=Board.from_notation(state.board),
            current_player=state.player_to_move,
            status=Status(model.status),
            moves=[Position.from_algebraic(name) for name in model.moves],
            passes=model.passes,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        state = GameState(self.board.to_notation(), self.current_player)
        return GameModel(
            current_notation=state.to_notation(),
            moves=[position.to_algebraic() for position in self.moves],
            status=self.status.value,
            passes=self.passes,
        )

    @classmethod
    def new_game(cls, starting_notation: Optional[str] = None) -> Self:
        """Start a new game. Black moves first, unless a starting position says otherwise."""
        state = (
            GameState.from_notation(starting_notation)
            if starting_notation
            else GameState.starting_position()
        )
        game = cls(
            board=Board.from_notation(state.board),
            current_player=state.player_to_move,
            status=Status.IN_PROGRESS,
        )

        # a custom starting position might already be finished, or force the first player to pass
        game._advance_turn(state.player_to_move.opponent, starting_position=True)
        return game

    @property
    def score(self) -> Score:
        return calculate_score(self.board)

    @property
    def is_over(self) -> bool:
        return self.status == Status.GAME_OVER

    @property
    def winner(self) -> Optional[Player]:
        """Only defined once the game is over. None after the game is over means a draw."""
        if not self.is_over:
            return None
        return winner_of(self.score)

    def status_report(self) -> GameStatus:
        return GameStatus(
            current_player=self.current_player,
            score=self.score,
            game_over=self.is_over,
            winner=self.winner,
        )

    def legal_moves(self) -> list[Position]:
        """The placements the player to move can choose from (can be used to show hints)"""
        if self.is_over:
            return []
        return valid_moves(self.current_player, self.board)

    def make_move(self, row: int, col: int) -> list[Position]:
        """
        Attempt a placement for the player to move
        -----

        1. make sure the game is still in progress
        2. make sure the placement is legal
        3. place the piece and flip the captured pieces
        4. record the move
        5. decide who moves next (or end the game)

        Returns the positions that got flipped.
        """
        if self.is_over:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        mover = self.current_player
        if not is_valid_move(row, col, mover, self.board):
            logger.warning("Invalid move for player %s: (%d, %d)", mover.name, row, col)
            raise IllegalMoveError(
                f"Move not allowed for {mover.name.lower()}: ({row}, {col})"
            )

        flipped = get_flippable_positions(row, col, mover, self.board)
        self.board = apply_move(row, col, mover, self.board)
        self.moves.append(Position(row, col))
        self._advance_turn(mover)
        return flipped

    # -- PRIVATE HELPERS ---
    def _advance_turn(self, mover: Player, starting_position: bool = False) -> None:
        """
        Performs the end-of-turn checks after `mover` played, and changes the turn / status accordingly.
        For a starting position nobody has played yet: `mover` is then the opponent of the side to move.
        """
        if self.board.is_full():
            self._end_game()
            return

        upcoming = next_player(mover, self.board)
        if upcoming is None:
            self._end_game()
            return

        if upcoming == mover:
            self.passes += 1
            if starting_position:
                logger.info(
                    "Player %s has no valid moves in the starting position. Player %s moves first.",
                    mover.opponent.name,
                    mover.name,
                )
            else:
                logger.info(
                    "Player %s has no valid moves. Player %s plays again.",
                    mover.opponent.name,
                    mover.name,
                )
        self.current_player = upcoming

    def _end_game(self) -> None:
        self.status = Status.GAME_OVER
        score = self.score
        winner = winner_of(score)
        logger.info(
            "Game over. black %d - white %d. %s",
            score.black,
            score.white,
            f"Winner: {winner.name}" if winner else "It's a draw",
        )
