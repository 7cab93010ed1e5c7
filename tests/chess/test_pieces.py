"""Unit tests for /src/chess/pieces.py"""

import pytest

from src.chess.pieces import PIECE_SYMBOLS, PROMOTION_OPTIONS, SYMBOL_TO_PIECE, Piece
from src.core.exceptions import InvalidPromotionKindError
from src.core.shared_types import Color, PieceType


@pytest.mark.parametrize("char", [char.upper() for char in SYMBOL_TO_PIECE.keys()])
def test_creating_white_piece_from_symbol(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_symbol(char)
    assert piece.type == SYMBOL_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE
    assert not piece.has_moved


@pytest.mark.parametrize("char", [char.lower() for char in SYMBOL_TO_PIECE.keys()])
def test_creating_black_piece_from_symbol(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_symbol(char)
    assert piece.type == SYMBOL_TO_PIECE[char]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("piece_type", [piece_type for piece_type in PieceType])
def test_pieces_to_symbol(piece_type: PieceType) -> None:
    assert Piece(piece_type, Color.WHITE).to_symbol() == PIECE_SYMBOLS[piece_type].upper()
    assert Piece(piece_type, Color.BLACK).to_symbol() == PIECE_SYMBOLS[piece_type]


def test_pieces_are_compared_by_identity() -> None:
    """Two white pawns are still two different pieces"""
    assert Piece(PieceType.PAWN, Color.WHITE) != Piece(PieceType.PAWN, Color.WHITE)


@pytest.mark.parametrize("color", [c for c in Color])
@pytest.mark.parametrize("new_type", PROMOTION_OPTIONS)
def test_promotion(color: Color, new_type: PieceType) -> None:
    """Promoting gives a brand new piece. Same color, fresh history."""
    pawn = Piece(PieceType.PAWN, color, has_moved=True)
    promoted = pawn.promoted(new_type)
    assert promoted is not pawn
    assert promoted.type == new_type
    assert promoted.color == color
    assert not promoted.has_moved


@pytest.mark.parametrize("new_type", [PieceType.KING, PieceType.PAWN])
def test_invalid_promotion(new_type: PieceType) -> None:
    pawn = Piece(PieceType.PAWN, Color.WHITE)
    with pytest.raises(InvalidPromotionKindError):
        pawn.promoted(new_type)
