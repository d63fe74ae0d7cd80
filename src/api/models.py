"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color
from src.othello.notation import is_valid_notation, is_valid_square

SquareName = str


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_notation: Optional[str] = None

    @field_validator("starting_notation")
    @classmethod
    def validate_starting_notation(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if not is_valid_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret starting_notation: {value!r}. Expected '<board> <b|w>'."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        value = value.strip().lower()
        if not is_valid_square(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: str
    current_player: Color
    scores: dict[Color, int]
    game_over: bool
    winner: Optional[Color]
    move_history: list[SquareName]


class LegalMovesResponse(BaseModel):
    game_id: UUID
    player: Color
    legal_moves: list[SquareName]
