"""Unit tests for /src/cli/config.py"""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from src.cli.config import ShellConfig
from src.core.exceptions import InvalidRequestError


def test_defaults() -> None:
    config = ShellConfig()
    assert config.white_name is None
    assert config.black_name is None
    assert config.log_level == "WARNING"
    assert config.log_file is None
    assert config.use_color


@pytest.mark.parametrize("level, expected", [("debug", "DEBUG"), (" Info ", "INFO"), ("ERROR", "ERROR")])
def test_log_level_is_normalized(level: str, expected: str) -> None:
    assert ShellConfig(log_level=level).log_level == expected


def test_unknown_log_level() -> None:
    with pytest.raises(InvalidRequestError):
        ShellConfig(log_level="LOUD")


def test_log_file_becomes_a_path() -> None:
    assert ShellConfig(log_file="chess.log").log_file == Path("chess.log")


def test_configure_logging() -> None:
    config = ShellConfig(log_level="debug", log_file="chess.log")
    with patch("src.cli.config.logging.basicConfig") as mock_basic_config:
        config.configure_logging()
    mock_basic_config.assert_called_once()
    kwargs = mock_basic_config.call_args.kwargs
    assert kwargs["level"] == logging.DEBUG
    assert kwargs["filename"] == Path("chess.log")
