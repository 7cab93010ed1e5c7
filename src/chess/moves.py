"""
Geometry/Base movement and capturing/attacking rules

Key idea: Use strategy pattern to define the move sets for each piece type.
Every piece type gets a movement rule (non-capturing moves) and a capture rule (moves onto an enemy piece).
The Board looks these up in the dispatch tables at the bottom of each section.

Attack detection ("is this square under attack by that color?") is done in reverse:
look outward from the square for a piece of the right type and color.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.castling import CASTLING_RULES, castling_options
from src.chess.pieces import PIECE_SYMBOLS, Piece
from src.chess.position import Position
from src.core.shared_types import Color, PieceType


class Board(Protocol):
    """Just the parts the movement strategies need"""

    en_passant_target: Optional[Position]

    def piece_at(self, square: Position) -> Optional[Piece]: ...
    def is_king_in_check(self, color: Color) -> bool: ...
    def is_square_attacked(self, square: Position, by_color: Color) -> bool: ...


# (delta rank, delta file)
Vector = tuple[int, int]

DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
STRAIGHTS: list[Vector] = [(0, 1), (0, -1), (1, 0), (-1, 0)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = STRAIGHTS + DIAGONALS

# White moves UP the board, Black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}


@dataclass
class Move:
    """
    basic definition of a move to be made

    A move request only needs the two squares. The copy stored in the game history also records
    what kind of move it turned out to be.
    """

    from_square: Position
    to_square: Position
    promote_to: Optional[PieceType] = None
    is_castling: bool = False
    is_en_passant: bool = False

    def to_uci(self) -> str:
        """
        Universal Chess Interface notation, e.g. 'e2e4', or 'e7e8q' for a pawn that promotes to a queen.
        """
        piece_char = PIECE_SYMBOLS[self.promote_to] if self.promote_to else ""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}{piece_char}"


def _is_enemy(square: Position, color: Color, board: Board) -> bool:
    piece = board.piece_at(square)
    return piece is not None and piece.color != color


# --- MOVEMENT RULES ---
def raycasting_move(square: Position, board: Board, directions: list[Vector]) -> list[Position]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board. Only the empty squares before that point are movement moves.
    """
    moves: list[Position] = []
    for dr, df in directions:
        target = square.offset(dr, df)
        while target is not None and board.piece_at(target) is None:
            moves.append(target)
            target = target.offset(dr, df)
    return moves


def single_step_move(square: Position, board: Board, deltas: list[Vector]) -> list[Position]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just can move a single step along a direction"""
    moves: list[Position] = []
    for dr, df in deltas:
        target = square.offset(dr, df)
        if target is not None and board.piece_at(target) is None:
            moves.append(target)
    return moves


def pawn_movement_moves(square: Position, board: Board) -> list[Position]:
    """
    A pawn:
    - moves by a single square forward.
    - It can move by two in its first move, as long as it does not jump over a piece
    """
    pawn = board.piece_at(square)
    direction = PAWN_DIRECTION[pawn.color]

    moves: list[Position] = []
    one_step = square.offset(direction, 0)
    if one_step is None or board.piece_at(one_step) is not None:
        return moves
    moves.append(one_step)

    if not pawn.has_moved:
        two_steps = square.offset(2 * direction, 0)
        if two_steps is not None and board.piece_at(two_steps) is None:
            moves.append(two_steps)
    return moves


def knight_movement_moves(square: Position, board: Board) -> list[Position]:
    """Knights always move such that |delta_rank| + |delta_file| = 3. They jump, so no path to check."""
    return single_step_move(square, board, KNIGHT_DELTAS)


def bishop_movement_moves(square: Position, board: Board) -> list[Position]:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    return raycasting_move(square, board, DIAGONALS)


def rook_movement_moves(square: Position, board: Board) -> list[Position]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS)


def queen_movement_moves(square: Position, board: Board) -> list[Position]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return rook_movement_moves(square, board) + bishop_movement_moves(square, board)


def king_movement_moves(square: Position, board: Board) -> list[Position]:
    """
    The king can move by a single square at the time.

    Castling is modelled as a special king move (see `castling_moves()`).
    """
    return single_step_move(square, board, KING_DELTAS) + castling_moves(square, board)


def castling_moves(square: Position, board: Board) -> list[Position]:
    """
    Destination squares of the king for every castling move currently allowed
    ---

    **you are allowed to castle if**

    * Neither the king nor the rook of choice have moved.
    * You are not currently in check (you cannot castle out of check).
    * All squares between the king and the rook are empty.
    * None of the squares the king passes through or lands on is under attack.
    """
    king = board.piece_at(square)
    if king.has_moved or board.is_king_in_check(king.color):
        return []

    opponent_color = king.color.opponent
    moves: list[Position] = []
    for direction in castling_options(king.color):
        rule = CASTLING_RULES[direction]
        if square != rule.king_from:
            continue

        rook = board.piece_at(rule.rook_from)
        if rook is None or rook.type != PieceType.ROOK or rook.color != king.color or rook.has_moved:
            continue

        if any(board.piece_at(between) is not None for between in rule.between):
            continue

        if any(board.is_square_attacked(path, opponent_color) for path in rule.king_path):
            continue

        moves.append(rule.king_to)
    return moves


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovesFn = Callable[[Position, Board], list[Position]]
MOVEMENT_RULES: dict[PieceType, MovesFn] = {
    PieceType.PAWN: pawn_movement_moves,
    PieceType.KNIGHT: knight_movement_moves,
    PieceType.BISHOP: bishop_movement_moves,
    PieceType.ROOK: rook_movement_moves,
    PieceType.QUEEN: queen_movement_moves,
    PieceType.KING: king_movement_moves,
}


# --- CAPTURING RULES ---
def raycasting_capture(square: Position, board: Board, directions: list[Vector]) -> list[Position]:
    """
    Same rays as `raycasting_move()`, but now we are only interested in the first occupied square along each ray.
    It can be captured if it holds an opponent's piece. Your own piece just blocks the ray.
    """
    player_color = board.piece_at(square).color
    moves: list[Position] = []
    for dr, df in directions:
        target = square.offset(dr, df)
        while target is not None and board.piece_at(target) is None:
            target = target.offset(dr, df)
        if target is not None and _is_enemy(target, player_color, board):
            moves.append(target)
    return moves


def single_step_capture(square: Position, board: Board, deltas: list[Vector]) -> list[Position]:
    player_color = board.piece_at(square).color
    moves: list[Position] = []
    for dr, df in deltas:
        target = square.offset(dr, df)
        if target is not None and _is_enemy(target, player_color, board):
            moves.append(target)
    return moves


def pawn_capture_moves(square: Position, board: Board) -> list[Position]:
    """
    Pawns take diagonally (forward).
    ----

    En passant: the square the opponent's pawn just skipped over counts as a capture as well.
    NOTE: The pawn that gets taken is standing next to ours (same rank as our pawn, same file as the target square)
    """
    pawn = board.piece_at(square)
    direction = PAWN_DIRECTION[pawn.color]
    moves: list[Position] = []
    for df in (-1, 1):
        target = square.offset(direction, df)
        if target is None:
            continue

        if _is_enemy(target, pawn.color, board) or _is_en_passant_capture(square, target, board):
            moves.append(target)
    return moves


def _is_en_passant_capture(square: Position, target: Position, board: Board) -> bool:
    if target != board.en_passant_target or board.piece_at(target) is not None:
        return False
    passed_pawn = board.piece_at(Position(square.rank, target.file))
    mover = board.piece_at(square)
    return (
        passed_pawn is not None
        and passed_pawn.type == PieceType.PAWN
        and passed_pawn.color != mover.color
    )


def knight_capture_moves(square: Position, board: Board) -> list[Position]:
    return single_step_capture(square, board, KNIGHT_DELTAS)


def bishop_capture_moves(square: Position, board: Board) -> list[Position]:
    return raycasting_capture(square, board, DIAGONALS)


def rook_capture_moves(square: Position, board: Board) -> list[Position]:
    return raycasting_capture(square, board, STRAIGHTS)


def queen_capture_moves(square: Position, board: Board) -> list[Position]:
    return rook_capture_moves(square, board) + bishop_capture_moves(square, board)


def king_capture_moves(square: Position, board: Board) -> list[Position]:
    return single_step_capture(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: CAPTURE RULES ---
CAPTURE_RULES: dict[PieceType, MovesFn] = {
    PieceType.PAWN: pawn_capture_moves,
    PieceType.KNIGHT: knight_capture_moves,
    PieceType.BISHOP: bishop_capture_moves,
    PieceType.ROOK: rook_capture_moves,
    PieceType.QUEEN: queen_capture_moves,
    PieceType.KING: king_capture_moves,
}


# --- PER PIECE MOVE SETS (what the Board asks for) ---
def movement_moves(square: Position, board: Board) -> list[Position]:
    piece = board.piece_at(square)
    if piece is None:
        return []
    return MOVEMENT_RULES[piece.type](square, board)


def attack_moves(square: Position, board: Board) -> list[Position]:
    piece = board.piece_at(square)
    if piece is None:
        return []
    return CAPTURE_RULES[piece.type](square, board)


def legal_moves(square: Position, board: Board) -> list[Position]:
    """Movement moves first, then the captures. Order does not matter to callers, but it is easier to read in tests."""
    return movement_moves(square, board) + attack_moves(square, board)


def is_legal_move(square: Position, to_square: Position, board: Board) -> bool:
    return to_square in legal_moves(square, board)


# --- ATTACKING RULES ---
def _holds(square: Position, by_color: Color, by_piece_type: PieceType, board: Board) -> bool:
    piece = board.piece_at(square)
    return piece is not None and piece.color == by_color and piece.type == by_piece_type


def raycasting_attack(
    square: Position,
    by_color: Color,
    by_piece_type: PieceType,
    board: Board,
    directions: list[Vector],
) -> bool:
    """
    Raycasting algorithm for attacks.
    ---

    ---
    Similar to raycasting moves.
    However, where `raycasting_move()` determines
    _"What is the line-of-sight of the piece standing on the specified square?"_


    This function determines:
    _"Is the specified square in the line-of-sight of a piece of the specified color and that
    is allowed to move along the given direction?"_

    ---
    Returns TRUE if the first piece encountered along any of the directions is of the specified color and type.
    Works for empty squares as well (needed to check the squares the king crosses when castling).
    """
    for dr, df in directions:
        target = square.offset(dr, df)
        while target is not None and board.piece_at(target) is None:
            target = target.offset(dr, df)
        if target is not None and _holds(target, by_color, by_piece_type, board):
            return True
    return False


def single_step_attack(
    square: Position,
    by_color: Color,
    by_piece_type: PieceType,
    board: Board,
    deltas: list[Vector],
) -> bool:
    """
    Raycasting is for sliding pieces. This is the equivalent for pawns, kings, and knights that just can move a single step along a direction.

    ---
    Returns TRUE if a piece of the specified color and type stands a single step away.
    """
    for dr, df in deltas:
        target = square.offset(dr, df)
        if target is not None and _holds(target, by_color, by_piece_type, board):
            return True
    return False


def is_attacked_by_pawn(square: Position, by_color: Color, board: Board) -> bool:
    """
    Pawns take diagonally
    ----

    NOTE: Pawn moves are not symmetric, so to check IF a white pawn could take on your square -->
    Must look one rank DOWN the board. Hence, vectors are exactly opposite to the ones in `pawn_capture_moves()`
    """
    direction = PAWN_DIRECTION[by_color]
    inverse_pawn_take_deltas: list[Vector] = [(-direction, 1), (-direction, -1)]
    return single_step_attack(square, by_color, PieceType.PAWN, board, inverse_pawn_take_deltas)


def is_attacked_by_knight(square: Position, by_color: Color, board: Board) -> bool:
    return single_step_attack(square, by_color, PieceType.KNIGHT, board, KNIGHT_DELTAS)


def is_attacked_by_bishop(square: Position, by_color: Color, board: Board) -> bool:
    return raycasting_attack(square, by_color, PieceType.BISHOP, board, DIAGONALS)


def is_attacked_by_rook(square: Position, by_color: Color, board: Board) -> bool:
    return raycasting_attack(square, by_color, PieceType.ROOK, board, STRAIGHTS)


def is_attacked_by_queen(square: Position, by_color: Color, board: Board) -> bool:
    return raycasting_attack(square, by_color, PieceType.QUEEN, board, STRAIGHTS + DIAGONALS)


def is_attacked_by_king(square: Position, by_color: Color, board: Board) -> bool:
    return single_step_attack(square, by_color, PieceType.KING, board, KING_DELTAS)


# --- STRATEGY PATTERN: ATTACKING RULES ---
IsAttackedFn = Callable[[Position, Color, Board], bool]
ATTACK_RULES: dict[PieceType, IsAttackedFn] = {
    PieceType.PAWN: is_attacked_by_pawn,
    PieceType.KNIGHT: is_attacked_by_knight,
    PieceType.BISHOP: is_attacked_by_bishop,
    PieceType.ROOK: is_attacked_by_rook,
    PieceType.QUEEN: is_attacked_by_queen,
    PieceType.KING: is_attacked_by_king,
}
