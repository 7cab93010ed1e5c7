"""
Terminal-based chess for two players sharing one keyboard.

usage: console-chess [--white NAME] [--black NAME] [--log-level LEVEL] [--log-file PATH] [--no-color]
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from src.chess.game import Game
from src.cli.config import ShellConfig
from src.cli.controller import CliController
from src.cli.input_handler import InputHandler
from src.cli.models import PlayerNameRequest
from src.cli.renderer import Renderer
from src.core.exceptions import ChessError
from src.core.shared_types import Color

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Console Chess: two players, one terminal")
    parser.add_argument("--white", type=str, help="Name of the white player (skips the prompt)")
    parser.add_argument("--black", type=str, help="Name of the black player (skips the prompt)")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    parser.add_argument("--log-file", type=str, default=None, help="Write logs to this file instead of stderr")
    parser.add_argument("--no-color", action="store_true", help="Plain text output")
    return parser


def build_config(argv: Optional[Sequence[str]] = None) -> ShellConfig:
    args = build_parser().parse_args(argv)
    return ShellConfig(
        white_name=args.white,
        black_name=args.black,
        log_level=args.log_level,
        log_file=args.log_file,
        use_color=not args.no_color,
    )


def build_controller(config: ShellConfig) -> CliController:
    game = Game()
    if config.white_name:
        game.set_white_player_name(PlayerNameRequest(name=config.white_name).name)
    if config.black_name:
        game.set_black_player_name(PlayerNameRequest(name=config.black_name).name)
    return CliController(
        game=game,
        renderer=Renderer(use_color=config.use_color),
        input_handler=InputHandler(),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        config = build_config(argv)
    except ChessError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 2
    config.configure_logging()

    try:
        controller = build_controller(config)
        ask_names_for = [
            color
            for color, name in ((Color.WHITE, config.white_name), (Color.BLACK, config.black_name))
            if not name
        ]
        controller.start(ask_names_for=ask_names_for)
    except ChessError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 2
    except EOFError:
        logger.info("input closed before the game started")
        return 0
    except KeyboardInterrupt:
        logger.info("interrupted by the user")
        return 130
    except Exception:
        # anything else is a bug: log it and abort the session
        logger.exception("Fatal error, aborting the game")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
