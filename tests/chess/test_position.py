"""Unit tests for /src/chess/position.py"""

from string import ascii_lowercase

import pytest

from src.chess.position import BOARD_DIMENSIONS, Position
from src.core.exceptions import InvalidNotationError, InvalidPositionError


@pytest.mark.parametrize(
    "rank, file, notation",
    [
        (rank, file, f"{ascii_lowercase[file]}{rank + 1}")
        for file in range(8)
        for rank in range(8)
    ],
)
def test_creating_from_algebraic(rank: int, file: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to rank 0, file 0, etc."""
    position = Position.from_algebraic(notation)
    assert position.rank == rank
    assert position.file == file


@pytest.mark.parametrize(
    "rank, file",
    [(rank, file) for file in range(8) for rank in range(8)],
)
def test_algebraic_roundtrip(rank: int, file: int) -> None:
    """Parsing what `to_algebraic()` writes should give back the same square"""
    position = Position(rank, file)
    assert Position.parse(position.to_algebraic()) == position


def test_algebraic_is_case_insensitive() -> None:
    assert Position.parse("E4") == Position(3, 4)


@pytest.mark.parametrize(
    "notation, expected",
    [
        ("5,2", Position(1, 4)),  # e2
        ("5,4", Position(3, 4)),  # e4
        ("1 1", Position(0, 0)),  # any non-digit separator works
        ("8-8", Position(7, 7)),
    ],
)
def test_parsing_numeric_notation(notation: str, expected: Position) -> None:
    """Numeric notation is <file><separator><rank>, both 1-based"""
    assert Position.parse(notation) == expected


def test_numeric_notation_roundtrip() -> None:
    position = Position(6, 2)
    assert position.to_numeric() == "3,7"
    assert Position.parse(position.to_numeric()) == position


@pytest.mark.parametrize(
    "notation",
    [
        "",
        "e",
        "e44",
        "i1",  # file beyond h
        "a9",  # rank beyond 8
        "a0",
        "44",  # first character is a digit, but the text is not 3 long
        "9,1",  # file beyond 8
        "1,0",
        "123",  # separator must not be a digit
        "a,b",
        "nonsense",
        "e²",  # only the ASCII digits 1-8 are ranks
        "²,3",
        "5,٣",
    ],
)
def test_invalid_notation(notation: str) -> None:
    with pytest.raises(InvalidNotationError):
        Position.parse(notation)


def test_surrounding_whitespace_is_ignored() -> None:
    assert Position.parse("  e4 ") == Position(3, 4)


@pytest.mark.parametrize("rank, file", [(-1, 0), (0, -1), (8, 0), (0, 8), (42, 23)])
def test_position_out_of_bounds(rank: int, file: int) -> None:
    """Positions can only be created on the board"""
    with pytest.raises(InvalidPositionError):
        Position(rank, file)


def test_all_squares_within_bounds() -> None:
    for rank in range(BOARD_DIMENSIONS[0]):
        for file in range(BOARD_DIMENSIONS[1]):
            assert Position.is_valid(rank, file)


def test_structural_equality() -> None:
    """Two separately created positions on the same square are equal (and hash the same, so can be used as dict keys)"""
    assert Position(3, 4) == Position(3, 4)
    assert Position(3, 4) != Position(4, 3)
    assert len({Position(3, 4), Position(3, 4)}) == 1


def test_offset() -> None:
    e4 = Position.from_algebraic("e4")
    assert e4.offset(1, 1) == Position.from_algebraic("f5")
    assert e4.offset(-3, -4) == Position.from_algebraic("a1")
    assert e4.offset(5, 0) is None
