"""Unit tests for /src/cli/main.py"""

from unittest.mock import patch

import pytest

from src.cli.controller import CliController
from src.cli.main import build_config, build_controller, main
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color


def test_build_config() -> None:
    config = build_config(["--white", "Alice", "--log-level", "debug", "--no-color"])
    assert config.white_name == "Alice"
    assert config.black_name is None
    assert config.log_level == "DEBUG"
    assert not config.use_color


def test_build_controller_uses_given_names() -> None:
    controller = build_controller(build_config(["--white", "Alice", "--black", "Bob"]))
    assert controller.game.players[Color.WHITE].name == "Alice"
    assert controller.game.players[Color.BLACK].name == "Bob"
    assert controller.game.current_player.name == "Alice"


def test_build_controller_rejects_long_names() -> None:
    with pytest.raises(InvalidRequestError):
        build_controller(build_config(["--white", "x" * 30]))


def test_bad_log_level_exits_with_2(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "LOUD"]) == 2
    assert "Unknown log level" in capsys.readouterr().err


def test_only_missing_names_are_asked() -> None:
    with patch.object(CliController, "start") as mock_start:
        assert main(["--white", "Alice", "--no-color"]) == 0
    mock_start.assert_called_once_with(ask_names_for=[Color.BLACK])


@pytest.mark.parametrize(
    "error, exit_code",
    [
        (EOFError(), 0),
        (KeyboardInterrupt(), 130),
        (InvalidRequestError("bad input"), 2),
        (RuntimeError("bug"), 1),
    ],
)
def test_exit_codes(error: BaseException, exit_code: int) -> None:
    with patch.object(CliController, "start", side_effect=error):
        assert main(["--no-color"]) == exit_code
