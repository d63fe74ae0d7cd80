"""Orchestration of communication from a front-end to business logic and session storage (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color
from src.db.repository import GameRepository
from src.othello.game import Game
from src.othello.position import Position

logger = logging.getLogger(__name__)


class OthelloService:
    """Orchestration of layers for an othello game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Front-end request logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Players requested a new game (optionally from a given position)."""

        # Use info in CreateGameRequest to create a new Game, and convert into GameModel
        new_game = Game.new_game(starting_notation=request.starting_notation)
        created_game_data = new_game.to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, Game.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves for the player to move."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return LegalMovesResponse(
            game_id=request.game_id,
            player=game.current_player.to_color(),
            legal_moves=[position.to_algebraic() for position in game.legal_moves()],
        )

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt for the player to move."""

        # Retrieve stored GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Create a new Game instance from the retrieved GameModel
        game = Game.from_model(stored_model)

        # Attempt the move (domain exceptions propagate as they are)
        position = Position.from_algebraic(request.square)
        game.make_move(position.row, position.col)

        # Capture updated state in GameModel and store it
        self.repo.update_game(request.game_id, game.to_model())

        return self._create_game_response(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        game_id = request.game_id
        if self.repo.delete_game(game_id) is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        logger.info("Deleted game %s", game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the Game's status into a GameResponse (for game with given ID.)"""
        report = game.status_report()
        return GameResponse(
            game_id=game_id,
            board=game.board.to_notation(),
            current_player=report.current_player.to_color(),
            scores={
                Color.BLACK: report.score.black,
                Color.WHITE: report.score.white,
            },
            game_over=report.game_over,
            winner=report.winner.to_color() if report.winner else None,
            move_history=[position.to_algebraic() for position in game.moves],
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
