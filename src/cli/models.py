"""Requests the shell builds from typed input before handing them to the Game"""

from pydantic import BaseModel, InstanceOf, field_validator

from src.chess.moves import Move
from src.chess.pieces import PROMOTION_OPTIONS, SYMBOL_TO_PIECE
from src.chess.position import Position
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PieceType

MAX_PLAYER_NAME_LENGTH = 20


class MoveRequest(BaseModel):
    """Two squares, each in algebraic ('e2') or numeric ('5,2') notation."""

    from_square: InstanceOf[Position]
    to_square: InstanceOf[Position]

    @field_validator("from_square", "to_square", mode="before")
    @classmethod
    def validate_square(cls, value: str | Position) -> Position:
        if isinstance(value, Position):
            return value
        # raises InvalidNotationError, which pydantic lets through untouched
        return Position.parse(value)

    @classmethod
    def from_text(cls, text: str) -> "MoveRequest":
        """
        Split the typed move into its two coordinates:
        separated by a space ('e2 e4', '5,2 5,4'), or else by a comma ('e2,e4').
        """
        text = text.strip()
        coordinates = text.split() if " " in text else text.split(",")
        if len(coordinates) != 2:
            raise InvalidRequestError(
                f"Cannot read {text!r} as a move. Please enter moves in format: from to (e.g. 'e2 e4', 'e2,e4' or '5,2 5,4')."
            )
        return cls(from_square=coordinates[0], to_square=coordinates[1])

    def to_move(self) -> Move:
        return Move(self.from_square, self.to_square)


class PlayerNameRequest(BaseModel):
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidRequestError("Player name cannot be empty.")
        if len(value) > MAX_PLAYER_NAME_LENGTH:
            raise InvalidRequestError(
                f"Player name cannot exceed {MAX_PLAYER_NAME_LENGTH} characters."
            )
        return value


class PromotionRequest(BaseModel):
    """The piece type a pawn promotes into. Accepts a full name ('queen') or its letter ('q')."""

    piece_type: PieceType

    @field_validator("piece_type", mode="before")
    @classmethod
    def validate_piece_type(cls, value: str | PieceType) -> PieceType:
        choice = str(value).strip().lower()
        piece_type = SYMBOL_TO_PIECE.get(choice)
        if piece_type is None and choice in {kind.value for kind in PieceType}:
            piece_type = PieceType(choice)

        if piece_type not in PROMOTION_OPTIONS:
            raise InvalidRequestError(
                f"Cannot promote to {value!r}. Pick one from {', '.join(PROMOTION_OPTIONS)}."
            )
        return piece_type
