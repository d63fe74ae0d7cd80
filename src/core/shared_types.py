"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GAME_OVER = "game over"


# --- Color DOES NOT contain an option for empty cells. That lives in src/othello/cells.py
# --- NOTE Requests and responses only ever talk about the two sides, so the API layer uses this version


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"
