"""Protocol repository (the in-memory version lives in src/db/memory_repository.py)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Storage of othello sessions: one GameModel (position notation, move list, status, passes) per game ID"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """The session as last stored, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Open a new session. Returns the stored session + its newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Replace the session after a move was played. None if there is no such session."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Close a session. Returns the removed session, or None if there was nothing to remove."""
        ...
