"""Fixtures for driving the text shell without a terminal."""

from io import StringIO
from typing import Callable

import pytest

from src.cli.renderer import Renderer

ScriptedInput = Callable[..., Callable[[str], str]]


@pytest.fixture
def scripted_input() -> ScriptedInput:
    """
    Call the inner function with the lines the players would type, in order.
    Once the script runs out, the fake `input()` raises EOFError, like a closed stdin would.
    """

    def _create_input(*answers: str) -> Callable[[str], str]:
        remaining = iter(answers)

        def _input(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return _input

    return _create_input


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def plain_renderer(output: StringIO) -> Renderer:
    """Renderer without ANSI colors, writing into `output`"""
    return Renderer(out=output, use_color=False)
