"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the storage layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass

# Type alias to make GameModel easier to read
SquareName = str


@dataclass
class GameModel:
    """Transport-safe representation of an othello game used between API, Service, storage, and Game layers."""

    current_notation: str
    moves: list[SquareName]
    status: str
    passes: int = 0
