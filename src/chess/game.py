"""
The Game class will be the entrypoint into the domain layer for the text shell.
It is responsible for orchestrating all the business logic required to play a turn of the board game:
whose turn it is, which pieces may be moved, and what the outcome of a move means for the game.
The Board takes care of the rules on the board itself.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.chess.board import Board
from src.chess.moves import Move
from src.chess.position import Position
from src.core.exceptions import (
    GameStateError,
    NoPieceAtOriginError,
    NotYourTurnError,
)
from src.core.shared_types import WINNING_STATUS, Color, GameStatus, MoveStatus, PieceType

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAMES: dict[Color, str] = {Color.WHITE: "White", Color.BLACK: "Black"}


@dataclass(frozen=True)
class Player:
    color: Color
    name: str


def _default_players() -> dict[Color, Player]:
    return {color: Player(color, name) for color, name in DEFAULT_PLAYER_NAMES.items()}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY THE SHELL ---

    board: Board = field(default_factory=Board.new)
    players: dict[Color, Player] = field(default_factory=_default_players)
    current_player: Player = field(init=False)
    status: GameStatus = GameStatus.PLAYING
    history: list[Move] = field(default_factory=list)
    pending_promotion: Optional[Position] = None

    def __post_init__(self) -> None:
        self.current_player = self.players[Color.WHITE]

    @property
    def winner(self) -> Optional[Player]:
        if self.status == GameStatus.WHITE_WINS:
            return self.players[Color.WHITE]
        if self.status == GameStatus.BLACK_WINS:
            return self.players[Color.BLACK]
        return None

    def is_game_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    def set_white_player_name(self, name: str) -> None:
        self._set_player_name(Color.WHITE, name)

    def set_black_player_name(self, name: str) -> None:
        self._set_player_name(Color.BLACK, name)

    def make_move(self, move: Move) -> MoveStatus:
        """
        Attempt to make a move
        -----

        1. make sure the game is still going, and no promotion is waiting to be completed
        2. there must be a piece to move, and it must be yours
        3. update the board (the Board checks the move is legal)
        4. update the history of moves
        5. pawn reached the last rank? --> wait for the promotion before handing the turn over
        6. otherwise check for the end of the game, and hand the turn to the opponent
        """
        self._assert_in_progress()
        if self.pending_promotion is not None:
            raise GameStateError(
                f"Pawn on {self.pending_promotion.to_algebraic()} must be promoted before the next move."
            )

        piece = self.board.piece_at(move.from_square)
        if piece is None:
            raise NoPieceAtOriginError(f"No piece found at {move.from_square.to_algebraic()}.")

        self._assert_your_turn(piece.color)

        accepted_move = self._create_accepted_move(move)
        self.board.move_piece(move)
        self._update_moves(accepted_move)
        logger.debug("%s played %s", self.current_player.color, accepted_move.to_uci())

        if self.board.can_be_promoted(move.to_square):
            self.pending_promotion = move.to_square
            return MoveStatus.PROMOTION

        return self._finish_turn()

    def promote_pawn(self, square: Position, piece_type: PieceType) -> MoveStatus:
        """
        Complete a move that brought a pawn to the last rank.
        ---

        The turn was not handed over yet when the pawn arrived. That happens now.
        """
        self._assert_in_progress()
        if self.pending_promotion != square:
            raise GameStateError(f"No promotion is waiting on {square.to_algebraic()}.")

        self.board.promote_pawn(square, piece_type)
        self.history[-1].promote_to = piece_type
        self.pending_promotion = None
        logger.debug("%s promoted a pawn on %s to %s", self.current_player.color, square, piece_type)
        return self._finish_turn()

    def resign(self) -> None:
        """The player to move gives up."""
        self._assert_in_progress()
        self._change_status(WINNING_STATUS[self.current_player.color.opponent])

    def agree_draw(self) -> None:
        self._assert_in_progress()
        self._change_status(GameStatus.DRAW)

    # -- PRIVATE HELPERS ---
    def _set_player_name(self, color: Color, name: str) -> None:
        """Player records are immutable: swap in a new one. Keep `current_player` pointing at the right record."""
        self.players[color] = Player(color, name)
        if self.current_player.color == color:
            self.current_player = self.players[color]

    def _assert_in_progress(self) -> None:
        if self.is_game_over():
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _assert_your_turn(self, color: Color) -> None:
        """You must wait for your turn before making a move."""
        if color != self.current_player.color:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.current_player.name} ({self.current_player.color}) to make a move first."
            )

    def _create_accepted_move(self, move: Move) -> Move:
        """Snapshot of what kind of move this is, before the board gets updated."""
        return Move(
            from_square=move.from_square,
            to_square=move.to_square,
            is_castling=self.board.is_castling_move(move),
            is_en_passant=self.board.is_en_passant_move(move),
        )

    def _update_moves(self, move: Move) -> None:
        self.history.append(move)

    def _finish_turn(self) -> MoveStatus:
        """
        Checks to see if game has ended and changes status accordingly.
        If it has not, the opponent is up next.
        """
        mover = self.current_player.color
        if self.board.captured_king is not None:
            self._change_status(WINNING_STATUS[mover])
            return MoveStatus.KING_CAPTURED

        self._switch_player()
        if self.board.is_checkmate(self.current_player.color):
            self._change_status(WINNING_STATUS[mover])
            return MoveStatus.CHECKMATE

        return MoveStatus.SUCCESS

    def _switch_player(self) -> None:
        self.current_player = self.players[self.current_player.color.opponent]

    def _change_status(self, new_status: GameStatus) -> None:
        logger.debug("game status changed from %s to %s", self.status, new_status)
        self.status = new_status
