"""Defines the types of chess pieces"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidPromotionKindError
from src.core.shared_types import Color, PieceType

# Single letter used for display and in move notation
PIECE_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

SYMBOL_TO_PIECE: dict[str, PieceType] = {value: key for key, value in PIECE_SYMBOLS.items()}

PROMOTION_OPTIONS: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# The back rank, from the a-file to the h-file
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(eq=False)
class Piece:
    """
    A piece does not know where it stands: the Board owns the square -> piece mapping.

    NOTE: compared by identity. Two white pawns are different pieces.
    """

    type: PieceType
    color: Color
    has_moved: bool = False

    @classmethod
    def from_symbol(cls, character: str) -> Self:
        """
        Board letter to piece: lower case for Black, upper case for White.
        Used to set up positions in tests, e.g. `Piece.from_symbol("k")` is the black king.
        """
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = SYMBOL_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_symbol(self) -> str:
        symbol = PIECE_SYMBOLS[self.type]
        return symbol.upper() if self.color == Color.WHITE else symbol

    def promoted(self, new_type: PieceType) -> Self:
        """A brand new piece of the same color. The pawn's history is discarded."""
        if new_type not in PROMOTION_OPTIONS:
            raise InvalidPromotionKindError(
                f"Cannot promote to {new_type}. Pick one from {', '.join(PROMOTION_OPTIONS)}."
            )
        return type(self)(new_type, self.color)
