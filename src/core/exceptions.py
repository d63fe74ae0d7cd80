"""
Custom exceptions shared by all layers.

Every exception raised on purpose by this application derives from GameError,
so the outer layers can catch a single type if they do not care about the details.
"""


class GameError(Exception):
    """Base class for anything that went wrong while handling a game."""


class GameStateError(GameError):
    """The game is not in a state that allows the requested action (ex. it is already over)."""


class IllegalMoveError(GameError):
    """The requested placement does not capture anything, is occupied, or is off the board."""


class InvalidNotationError(GameError):
    """A board / game notation string could not be parsed."""


class InvalidRequestError(GameError):
    """Request data failed validation."""


class RepositoryError(GameError):
    """Something went wrong looking up / storing a game record."""
