"""Orchestration of the text shell: prompts -> Game -> renderer (and back to the prompt)."""

import logging
from typing import Sequence

from src.chess.game import Game
from src.chess.moves import Move
from src.cli.input_handler import InputHandler, is_game_command, parse_move
from src.cli.renderer import Renderer
from src.core.exceptions import ChessError
from src.core.shared_types import Color, MoveStatus

logger = logging.getLogger(__name__)


class CliController:
    """Runs one game from the welcome screen to the final result."""

    def __init__(
        self,
        game: Game | None = None,
        renderer: Renderer | None = None,
        input_handler: InputHandler | None = None,
    ) -> None:
        self.game = game if game is not None else Game()
        self.renderer = renderer if renderer is not None else Renderer()
        self.input_handler = input_handler if input_handler is not None else InputHandler()
        self.stopped = False

    def start(self, ask_names_for: Sequence[Color] = (Color.WHITE, Color.BLACK)) -> None:
        self.renderer.show_welcome()
        self.fill_player_names(ask_names_for)
        self.run_game_loop()
        self.end_game()

    def fill_player_names(self, colors: Sequence[Color]) -> None:
        """Keep asking until a valid name is given for each of the colors."""
        for color in colors:
            while True:
                try:
                    name = self.input_handler.prompt_for_player_name(color)
                    break
                except ChessError as error:
                    self.renderer.show_error(str(error))
            if color == Color.WHITE:
                self.game.set_white_player_name(name)
            else:
                self.game.set_black_player_name(name)

    def run_game_loop(self) -> None:
        while not self.game.is_game_over() and not self.stopped:
            try:
                self.play_turn()
            except ChessError as error:
                # expected errors: show them and ask again
                logger.info("rejected input: %s", error)
                self.renderer.show_error(str(error))
            except EOFError:
                logger.info("input closed, stopping the game")
                self.stopped = True

    def play_turn(self) -> None:
        self.renderer.show_board(self.game.board)
        self.renderer.show_game_info(self.game.current_player, self.game.board)
        text = self.input_handler.prompt_for_player_input(self.game.current_player)
        if is_game_command(text):
            self.handle_command(text.lower())
            return
        self.process_move(parse_move(text).to_move())

    def handle_command(self, command: str) -> None:
        match command:
            case "help":
                self.renderer.show_help()
            case "history":
                self.renderer.show_history(self.game.history)
            case "status":
                self.renderer.show_status(self.game.status, self.game.current_player)
            case "resign":
                self.game.resign()
            case "draw":
                self.game.agree_draw()
            case "quit" | "exit":
                self.stopped = True

    def process_move(self, move: Move) -> None:
        mover = self.game.current_player
        status = self.game.make_move(move)
        if status == MoveStatus.PROMOTION:
            status = self.handle_promotion(move)

        if status == MoveStatus.SUCCESS:
            self.renderer.show_success_move(mover, move)

    def handle_promotion(self, move: Move) -> MoveStatus:
        """The move is already on the board. Only a valid choice of piece can complete it."""
        while True:
            try:
                piece_type = self.input_handler.prompt_for_promotion()
                return self.game.promote_pawn(move.to_square, piece_type)
            except ChessError as error:
                self.renderer.show_error(str(error))

    def end_game(self) -> None:
        self.renderer.show_board(self.game.board)
        self.renderer.show_game_end(self.game.status, self.game.winner)
