"""Turn the state of the game into text for the terminal"""

import sys
from typing import Optional, TextIO

from src.chess.board import Board
from src.chess.game import Player
from src.chess.moves import Move
from src.chess.pieces import PIECE_SYMBOLS
from src.chess.position import BOARD_DIMENSIONS, FILE_LETTERS, Position
from src.core.shared_types import GameStatus, PieceType

# ANSI color codes
CYAN = "\033[96m"
YELLOW = "\033[93m"
RED = "\033[91m"
GREEN = "\033[92m"
BOLD = "\033[1m"
RESET = "\033[0m"

HELP_TEXT = """How to play:
  Enter moves as: from to (e.g. "e2 e4", "e2,e4" or "5,2 5,4")
  Algebraic format: a1-h8 (e.g. "e2 e4")
  Numeric format: file,rank, both 1-8 (e.g. "5,2 5,4")
Commands:
  help     show this text
  history  list the moves played so far
  status   show the game status
  resign   give up the game
  draw     end the game in a draw (both players agree)
  quit     leave the game (also: exit)"""

GAME_END_MESSAGES: dict[GameStatus, str] = {
    GameStatus.PLAYING: "Game stopped.",
    GameStatus.WHITE_WINS: "White wins!",
    GameStatus.BLACK_WINS: "Black wins!",
    GameStatus.DRAW: "The game ended in a draw.",
}


def render_board(board: Board) -> list[str]:
    """
    White pieces in upper case, black pieces in lower case, '.' for empty squares.
    Rank 8 on top, like looking at the board from White's side.
    """
    files_header = "    " + " ".join(FILE_LETTERS)
    lines = [files_header]
    for rank in range(BOARD_DIMENSIONS[0] - 1, -1, -1):
        row = []
        for file in range(BOARD_DIMENSIONS[1]):
            piece = board.piece_at(Position(rank, file))
            row.append(piece.to_symbol() if piece else ".")
        lines.append(f"{rank + 1} | {' '.join(row)} | {rank + 1}")
    lines.append(files_header)
    return lines


def render_captured(captured: dict[str, list[PieceType]]) -> list[str]:
    lines = []
    for color_name, kinds in captured.items():
        symbols = " ".join(PIECE_SYMBOLS[kind] for kind in kinds) or "-"
        lines.append(f"{color_name.capitalize()} lost: {symbols}")
    return lines


def render_history(history: list[Move]) -> list[str]:
    """One line per full turn: '1. e2e4 e7e5'"""
    if not history:
        return ["No moves played yet."]
    lines = []
    for turn, idx in enumerate(range(0, len(history), 2), start=1):
        pair = " ".join(move.to_uci() for move in history[idx : idx + 2])
        lines.append(f"{turn}. {pair}")
    return lines


class Renderer:
    """Writes to stdout by default. Colors are optional so the output can also be read back in tests / logs."""

    def __init__(self, out: Optional[TextIO] = None, use_color: bool = True) -> None:
        self.out = out if out is not None else sys.stdout
        self.use_color = use_color

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_color else text

    def _write(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.out)

    def show_welcome(self) -> None:
        self._write(self._paint("Welcome to Console Chess!", BOLD), "", HELP_TEXT, "")

    def show_help(self) -> None:
        self._write(HELP_TEXT)

    def show_board(self, board: Board) -> None:
        self._write("", *render_board(board), "")

    def show_game_info(self, player: Player, board: Board) -> None:
        self._write(*render_captured(board.captured_pieces_by_name()))
        if board.is_king_in_check(player.color):
            self._write(self._paint(f"{player.name} ({player.color}) is in check!", YELLOW))

    def show_history(self, history: list[Move]) -> None:
        self._write(*render_history(history))

    def show_status(self, status: GameStatus, player: Player) -> None:
        self._write(f"Status: {status}. {player.name} ({player.color}) to move.")

    def show_success_move(self, player: Player, move: Move) -> None:
        self._write(
            self._paint(
                f"{player.name} moved {move.from_square.to_algebraic()} to {move.to_square.to_algebraic()}.",
                GREEN,
            )
        )

    def show_error(self, message: str) -> None:
        self._write(self._paint(f"Error: {message}", RED))

    def show_game_end(self, status: GameStatus, winner: Player | None) -> None:
        message = GAME_END_MESSAGES[status]
        if winner is not None:
            message = f"{message} Congratulations, {winner.name}."
        self._write("", self._paint(message, CYAN))
