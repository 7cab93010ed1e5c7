"""
Custom exceptions.

NOTE: None of these derive from ValueError. Pydantic wraps ValueErrors raised in validators into a ValidationError,
while any other exception type propagates as-is. The shell relies on catching these types directly.
"""


class ChessError(Exception):
    """Base class: every expected (non-fatal) failure in the game. The shell displays these and re-prompts."""


# --- Input / notation ---
class InvalidNotationError(ChessError):
    """Text could not be read as a square in algebraic or numeric notation."""


class InvalidPositionError(ChessError):
    """Rank or file index outside of the board."""


class InvalidRequestError(ChessError):
    """Input from the shell that fails validation (move text, player names, promotion choice)."""


# --- Making moves ---
class NoPieceAtOriginError(ChessError):
    """There is no piece to move on the requested starting square."""


class NotYourTurnError(ChessError):
    """The piece on the starting square belongs to the player who is not to move."""


class IllegalMoveError(ChessError):
    """The destination is not among the legal moves of the piece."""


class GameStateError(ChessError):
    """The requested action does not fit the current state of the game (game over, promotion pending, ...)."""


# --- Promotion ---
class PromotionError(ChessError):
    """Misuse of pawn promotion."""


class NoPawnAtPositionError(PromotionError):
    pass


class PromotionNotEligibleError(PromotionError):
    pass


class InvalidPromotionKindError(PromotionError):
    pass
