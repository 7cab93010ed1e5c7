"""The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.castling import CASTLING_RULES, castling_direction_for
from src.chess.moves import ATTACK_RULES, Move, attack_moves, is_legal_move, legal_moves, movement_moves
from src.chess.pieces import BACK_RANK, Piece
from src.chess.position import BOARD_DIMENSIONS, Position
from src.core.exceptions import (
    IllegalMoveError,
    NoPawnAtPositionError,
    PromotionNotEligibleError,
)
from src.core.shared_types import Color, PieceType

# The rank a pawn of the given color promotes on
PROMOTION_RANK: dict[Color, int] = {Color.WHITE: BOARD_DIMENSIONS[0] - 1, Color.BLACK: 0}


def _no_captures() -> dict[Color, list[PieceType]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class Board:
    """
    The board is the sole owner of the pieces: `squares` maps every occupied square to the piece standing on it.
    A piece's location is never stored on the piece itself, so the two can never fall out of sync.

    * en_passant_target: the square a pawn skipped over with a double step in the move just made (only valid for the next move)
    * captured_pieces: types of the captured pieces, keyed by the color of the piece that was captured (so WHITE lists what White lost)
    * captured_king: set once a king is taken. Ends the game.
    """

    squares: dict[Position, Piece] = field(default_factory=dict)
    en_passant_target: Optional[Position] = None
    captured_pieces: dict[Color, list[PieceType]] = field(default_factory=_no_captures)
    captured_king: Optional[Piece] = None

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def new(cls) -> Self:
        """
        Standard starting position:
        * rank 0: white pieces, rank 1: white pawns
        * rank 6: black pawns, rank 7: black pieces
        """
        board = cls()
        for file, piece_type in enumerate(BACK_RANK):
            board.place_piece(Piece(piece_type, Color.WHITE), Position(0, file))
            board.place_piece(Piece(PieceType.PAWN, Color.WHITE), Position(1, file))
            board.place_piece(Piece(PieceType.PAWN, Color.BLACK), Position(6, file))
            board.place_piece(Piece(piece_type, Color.BLACK), Position(7, file))
        return board

    # --- QUERIES ---
    def piece_at(self, square: Position) -> Optional[Piece]:
        return self.squares.get(square)

    def is_empty(self, square: Position) -> bool:
        return square not in self.squares

    def is_enemy(self, square: Position, color: Color) -> bool:
        piece = self.piece_at(square)
        return piece is not None and piece.color != color

    @staticmethod
    def are_coordinates_within_board(rank: int, file: int) -> bool:
        return Position.is_valid(rank, file)

    def locate_color(self, color: Color) -> list[Position]:
        return [square for square, piece in self.squares.items() if piece.color == color]

    def locate_king(self, color: Color) -> Optional[Position]:
        return next(
            (
                square
                for square, piece in self.squares.items()
                if piece.color == color and piece.type == PieceType.KING
            ),
            None,
        )

    def captured_pieces_by_name(self) -> dict[str, list[PieceType]]:
        """Captured piece types keyed by color name, for display."""
        return {color.value: list(kinds) for color, kinds in self.captured_pieces.items()}

    # --- EDITING (set up positions) ---
    def place_piece(self, piece: Piece, square: Position) -> None:
        self.squares[square] = piece

    def remove_piece(self, square: Position) -> Optional[Piece]:
        return self.squares.pop(square, None)

    # --- MOVE SETS ---
    def movement_moves(self, square: Position) -> list[Position]:
        return movement_moves(square, self)

    def attack_moves(self, square: Position) -> list[Position]:
        return attack_moves(square, self)

    def legal_moves(self, square: Position) -> list[Position]:
        return legal_moves(square, self)

    def is_valid_move(self, move: Move) -> bool:
        if self.piece_at(move.from_square) is None:
            return False
        return is_legal_move(move.from_square, move.to_square, self)

    def is_en_passant_move(self, move: Move) -> bool:
        """A pawn moving onto the en passant target. The destination is empty: the captured pawn stands beside it."""
        piece = self.piece_at(move.from_square)
        return (
            piece is not None
            and piece.type == PieceType.PAWN
            and self.en_passant_target is not None
            and move.to_square == self.en_passant_target
            and self.is_empty(move.to_square)
        )

    def is_castling_move(self, move: Move) -> bool:
        piece = self.piece_at(move.from_square)
        if piece is None or piece.type != PieceType.KING:
            return False
        return castling_direction_for(move.from_square, move.to_square, piece.color) is not None

    # --- MAKING MOVES ---
    def move_piece(self, move: Move) -> bool:
        """
        Update the position on the board
        ----

        1. en passant: remove the pawn that got passed (standing beside the moving pawn)
        2. reset the en passant target, and set a new one if a pawn just made a double step
        3. regular capture: register the captured piece (and if it was a king, the game is over)
        4. castling: also move the rook along
        5. move the piece itself
        """
        if not self.is_valid_move(move):
            raise IllegalMoveError(
                f"Move not allowed: {move.from_square.to_algebraic()} to {move.to_square.to_algebraic()}"
            )

        piece = self.squares[move.from_square]

        # NOTE: both checks need the board as it was before anything gets updated
        is_en_passant = self.is_en_passant_move(move)
        is_castling = self.is_castling_move(move)

        if is_en_passant:
            passed_pawn_square = Position(move.from_square.rank, move.to_square.file)
            self._capture(passed_pawn_square)

        self.en_passant_target = self._determine_en_passant_target(move, piece)

        if not self.is_empty(move.to_square):
            self._capture(move.to_square)

        if is_castling:
            self._move_castling_rook(move, piece.color)

        self._relocate(move.from_square, move.to_square)
        return True

    def _relocate(self, from_square: Position, to_square: Position) -> None:
        piece = self.squares.pop(from_square)
        self.squares[to_square] = piece
        piece.has_moved = True

    def _capture(self, square: Position) -> None:
        captured = self.squares.pop(square)
        self.captured_pieces[captured.color].append(captured.type)
        if captured.type == PieceType.KING:
            self.captured_king = captured

    def _determine_en_passant_target(self, move: Move, piece: Piece) -> Optional[Position]:
        """The possible en passant square for the next turn: the square in between when a pawn moved by two."""
        ranks_moved = move.to_square.rank - move.from_square.rank
        if piece.type != PieceType.PAWN or abs(ranks_moved) != 2:
            return None
        return Position(move.from_square.rank + ranks_moved // 2, move.from_square.file)

    def _move_castling_rook(self, king_move: Move, color: Color) -> None:
        direction = castling_direction_for(king_move.from_square, king_move.to_square, color)
        # for the typechecker: only called for castling moves
        assert direction is not None
        rule = CASTLING_RULES[direction]
        self._relocate(rule.rook_from, rule.rook_to)

    # --- ATTACKS, CHECK AND CHECKMATE ---
    def is_square_attacked(self, square: Position, by_color: Color) -> bool:
        """
        Could any piece of `by_color` take on this square (if there was an enemy piece standing on it)?
        A square held by `by_color` itself is never attacked by that color: nobody takes their own piece.
        """
        occupant = self.piece_at(square)
        if occupant is not None and occupant.color == by_color:
            return False
        return any(is_attacked(square, by_color, self) for is_attacked in ATTACK_RULES.values())

    def is_king_in_check(self, color: Color) -> bool:
        king_square = self.locate_king(color)
        if king_square is None:
            return False
        return self.is_square_attacked(king_square, color.opponent)

    def is_checkmate(self, color: Color) -> bool:
        """In check, and no move of any of your pieces gets you out of it."""
        return self.is_king_in_check(color) and not self.has_escape_move(color)

    def has_escape_move(self, color: Color) -> bool:
        """
        Try every move of every piece of this color on a copy of the board,
        and see if afterwards the king is still present and not attacked.
        """
        for from_square in self.locate_color(color):
            for to_square in self.legal_moves(from_square):
                board = deepcopy(self)
                board.move_piece(Move(from_square, to_square))
                if board.locate_king(color) is not None and not board.is_king_in_check(color):
                    return True
        return False

    # --- PROMOTION ---
    def can_be_promoted(self, square: Position) -> bool:
        """A pawn standing on the far end of the board"""
        piece = self.piece_at(square)
        if piece is None or piece.type != PieceType.PAWN:
            return False
        return square.rank == PROMOTION_RANK[piece.color]

    def promote_pawn(self, square: Position, new_type: PieceType) -> None:
        """Swap the pawn for a brand new piece of the chosen type (same color)."""
        piece = self.piece_at(square)
        if piece is None or piece.type != PieceType.PAWN:
            raise NoPawnAtPositionError(f"No pawn on {square.to_algebraic()} to promote.")

        if not self.can_be_promoted(square):
            raise PromotionNotEligibleError(
                f"The pawn on {square.to_algebraic()} has not reached the end of the board."
            )

        self.squares[square] = piece.promoted(new_type)
