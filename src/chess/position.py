"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import digits
from typing import Optional

from src.core.exceptions import InvalidNotationError, InvalidPositionError

# Chess board is always 8x8 (ranks, files). Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)

FILE_LETTERS = "abcdefgh"


@dataclass(frozen=True)
class Position:
    """Zero-based coordinates: rank 0 is White's back rank, file 0 is the a-file."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not Position.is_valid(self.rank, self.file):
            raise InvalidPositionError(
                f"Invalid position ({self.rank}, {self.file}): rank and file indices must be between 0 and 7."
            )

    @staticmethod
    def is_valid(rank: int, file: int) -> bool:
        return (0 <= rank < BOARD_DIMENSIONS[0]) and (0 <= file < BOARD_DIMENSIONS[1])

    @classmethod
    def parse(cls, text: str) -> Position:
        """
        Read a square typed by a player.
        ----

        Two notations are accepted:
        * algebraic: 'e4' (file letter a-h, rank 1-8)
        * numeric: '5,4' (1-based file, any single non-digit separator, 1-based rank)

        A leading digit means numeric notation.
        """
        text = text.strip()
        if text and text[0] in digits:
            return cls.from_numeric(text)
        return cls.from_algebraic(text)

    @classmethod
    def from_algebraic(cls, sq: str) -> Position:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        if len(sq) != 2:
            raise InvalidNotationError(f"Cannot read {sq!r} as a square (expected e.g. 'e4').")

        file_char, rank_char = sq[0].lower(), sq[1]
        if file_char not in FILE_LETTERS or rank_char not in digits:
            raise InvalidNotationError(f"Cannot read {sq!r} as a square (expected e.g. 'e4').")

        return cls._checked(int(rank_char) - 1, FILE_LETTERS.index(file_char), sq)

    @classmethod
    def from_numeric(cls, sq: str) -> Position:
        """Numeric notation: '<file><separator><rank>', both 1-based. So '5,4' is e4."""
        if len(sq) != 3:
            raise InvalidNotationError(f"Cannot read {sq!r} as a square (expected e.g. '5,4').")

        file_char, separator, rank_char = sq
        if file_char not in digits or rank_char not in digits or separator in digits:
            raise InvalidNotationError(f"Cannot read {sq!r} as a square (expected e.g. '5,4').")

        return cls._checked(int(rank_char) - 1, int(file_char) - 1, sq)

    @classmethod
    def _checked(cls, rank: int, file: int, notation: str) -> Position:
        """Out of range coordinates in typed text are a notation problem, not a programming error."""
        if not cls.is_valid(rank, file):
            raise InvalidNotationError(f"Square {notation!r} is not on the board.")
        return cls(rank, file)

    def to_algebraic(self) -> str:
        return f"{FILE_LETTERS[self.file]}{self.rank + 1}"

    def to_numeric(self, separator: str = ",") -> str:
        """The inverse of `from_numeric()`. Used to build numeric input in tests."""
        return f"{self.file + 1}{separator}{self.rank + 1}"

    def offset(self, d_rank: int, d_file: int) -> Optional[Position]:
        """The square shifted by the given amounts, or None when that falls off the board."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if not Position.is_valid(rank, file):
            return None
        return Position(rank, file)

    def __str__(self) -> str:
        return self.to_algebraic()
