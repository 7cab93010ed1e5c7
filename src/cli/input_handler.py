"""Prompting the players. All typed text is validated by the request models before it reaches the Game."""

from typing import Callable

from src.chess.game import Player
from src.cli.models import MoveRequest, PlayerNameRequest, PromotionRequest
from src.core.shared_types import Color, PieceType

InputFn = Callable[[str], str]

GAME_COMMANDS = ("help", "history", "status", "resign", "draw", "quit", "exit")


class InputHandler:
    """`input_fn` defaults to the builtin `input()`. Tests pass in a scripted replacement."""

    def __init__(self, input_fn: InputFn = input) -> None:
        self.input_fn = input_fn

    def prompt_for_player_name(self, color: Color) -> str:
        """Pressing enter without typing a name gives the default '<Color> Player'"""
        value = self.input_fn(f"Enter name for {color} player: ").strip()
        if not value:
            value = f"{color.capitalize()} Player"
        return PlayerNameRequest(name=value).name

    def prompt_for_player_input(self, player: Player) -> str:
        return self.input_fn(f"{player.name} ({player.color}), enter your move: ").strip()

    def prompt_for_promotion(self) -> PieceType:
        value = self.input_fn("Promote your pawn to (q)ueen, (r)ook, (b)ishop or k(n)ight: ")
        return PromotionRequest(piece_type=value).piece_type


def is_game_command(text: str) -> bool:
    return text.lower() in GAME_COMMANDS


def parse_move(text: str) -> MoveRequest:
    return MoveRequest.from_text(text)
