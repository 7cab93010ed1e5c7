"""Helpers for implementing Castling rules. Need to be imported by multiple sources"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.chess.position import Position
from src.core.shared_types import Color

HOME_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
KING_FILE = 4


class CastlingDirection(Enum):
    """The four castling directions."""

    WHITE_KING_SIDE = (Color.WHITE, 7)
    WHITE_QUEEN_SIDE = (Color.WHITE, 0)
    BLACK_KING_SIDE = (Color.BLACK, 7)
    BLACK_QUEEN_SIDE = (Color.BLACK, 0)

    @property
    def color(self) -> Color:
        return self.value[0]


@dataclass(frozen=True)
class CastlingSquares:
    """
    Store the squares where king/rook start from/end up in by castling.

    * `between`: must all be empty
    * `king_path`: squares the king passes through or lands on. None of them may be attacked.
    """

    king_from: Position
    king_to: Position
    rook_from: Position
    rook_to: Position
    between: tuple[Position, ...]
    king_path: tuple[Position, ...]

    @classmethod
    def on_rank(cls, rank: int, rook_file: int) -> "CastlingSquares":
        """Convenience method: to make mapping shown below (from CastlingDirection) more readable"""
        step = 1 if rook_file > KING_FILE else -1
        king_to_file = KING_FILE + 2 * step
        between = tuple(
            Position(rank, file) for file in range(KING_FILE + step, rook_file, step)
        )
        king_path = (Position(rank, KING_FILE + step), Position(rank, king_to_file))
        return cls(
            king_from=Position(rank, KING_FILE),
            king_to=Position(rank, king_to_file),
            rook_from=Position(rank, rook_file),
            rook_to=Position(rank, KING_FILE + step),
            between=between,
            king_path=king_path,
        )


# The moves (in classical chess) made when castling
CASTLING_RULES: dict[CastlingDirection, CastlingSquares] = {
    direction: CastlingSquares.on_rank(HOME_RANK[direction.color], direction.value[1])
    for direction in CastlingDirection
}


def castling_options(color: Color) -> list[CastlingDirection]:
    return [direction for direction in CastlingDirection if direction.color == color]


def castling_direction_for(king_from: Position, king_to: Position, color: Color) -> Optional[CastlingDirection]:
    """Find which castling move (if any) a king move from/to these squares represents."""
    for direction in castling_options(color):
        rule = CASTLING_RULES[direction]
        if rule.king_from == king_from and rule.king_to == king_to:
            return direction
    return None
