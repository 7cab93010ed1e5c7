"""
Type definitions used across layers (rules engine and text shell)
"""

from enum import StrEnum


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class GameStatus(StrEnum):
    PLAYING = "playing"
    WHITE_WINS = "white wins"
    BLACK_WINS = "black wins"
    DRAW = "draw"


class MoveStatus(StrEnum):
    """How the Game interprets an accepted move. The shell picks its follow up based on this."""

    SUCCESS = "success"
    PROMOTION = "promotion"
    KING_CAPTURED = "king captured"
    CHECKMATE = "checkmate"


# the side that wins when the other color loses its king / gets mated
WINNING_STATUS: dict[Color, GameStatus] = {
    Color.WHITE: GameStatus.WHITE_WINS,
    Color.BLACK: GameStatus.BLACK_WINS,
}
