"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.chess.board import Board
from src.chess.pieces import Piece
from src.chess.position import Position

BoardFactory = Callable[[dict[str, str]], Board]


@pytest.fixture
def board_with_pieces() -> BoardFactory:
    """
    Call the inner function with a mapping from square to piece letter, e.g. {"e1": "K", "e8": "k"}.
    Upper case letters are white pieces, lower case letters are black pieces.
    """

    def _create_board(layout: dict[str, str]) -> Board:
        board = Board.empty()
        for square_name, symbol in layout.items():
            board.place_piece(Piece.from_symbol(symbol), Position.from_algebraic(square_name))
        return board

    return _create_board


@pytest.fixture
def kings_only_board(board_with_pieces: BoardFactory) -> Board:
    """
    Create a board with only kings on their canonical starting squares.
    Checkmate detection needs a king of each color on the board.
    """
    return board_with_pieces({"e1": "K", "e8": "k"})
