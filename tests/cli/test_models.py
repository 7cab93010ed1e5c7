import pytest

from src.chess.moves import Move
from src.chess.position import Position
from src.cli.models import MAX_PLAYER_NAME_LENGTH, MoveRequest, PlayerNameRequest, PromotionRequest
from src.core.exceptions import InvalidNotationError, InvalidRequestError
from src.core.shared_types import PieceType

E2 = Position(1, 4)
E4 = Position(3, 4)


# -- Validation - MoveRequest --
def test_valid_square_names() -> None:
    """Test that MoveRequest accepts correctly written squares in algebraic notation."""
    request = MoveRequest(from_square="e2", to_square="e4")
    assert request.from_square == E2
    assert request.to_square == E4


def test_positions_are_accepted_as_is() -> None:
    request = MoveRequest(from_square=E2, to_square=E4)
    assert request.to_move() == Move(E2, E4)


@pytest.mark.parametrize(
    "text",
    [
        "e2 e4",
        "e2,e4",
        "  e2   e4 ",  # extra whitespace
        "E2 E4",
        "5,2 5,4",  # numeric: file,rank
        "e2 5,4",  # notations can be mixed
    ],
)
def test_move_from_text(text: str) -> None:
    request = MoveRequest.from_text(text)
    assert request.to_move() == Move(E2, E4)


@pytest.mark.parametrize("text", ["", "e2", "e2 e4 e6", "e2,e4,e6", "5,2,5,4"])
def test_move_text_needs_two_coordinates(text: str) -> None:
    with pytest.raises(InvalidRequestError):
        MoveRequest.from_text(text)


@pytest.mark.parametrize(
    "square",
    [
        "nonsense",  # anything more than two characters.
        "11",  # numeric without separator
        "aa",  # second character is not a number
        "z9",
        "e²",  # superscript two is a digit to Python, but not a rank
    ],
)
def test_invalid_from_square(square: str) -> None:
    """Test that an exception is raised when using invalid square name."""
    with pytest.raises(InvalidNotationError):
        _ = MoveRequest(from_square=square, to_square="e2")


@pytest.mark.parametrize("square", ["nonsense", "11", "aa", "9,9"])
def test_invalid_to_square(square: str) -> None:
    """Test that an exception is raised when using invalid square name."""
    with pytest.raises(InvalidNotationError):
        _ = MoveRequest(from_square="e2", to_square=square)


# -- Validation - PlayerNameRequest --
def test_player_name_is_stripped() -> None:
    assert PlayerNameRequest(name="  Magnus ").name == "Magnus"


@pytest.mark.parametrize("name", ["", "   ", "x" * (MAX_PLAYER_NAME_LENGTH + 1)])
def test_invalid_player_name(name: str) -> None:
    with pytest.raises(InvalidRequestError):
        PlayerNameRequest(name=name)


def test_longest_player_name() -> None:
    name = "x" * MAX_PLAYER_NAME_LENGTH
    assert PlayerNameRequest(name=name).name == name


# -- Validation - PromotionRequest --
@pytest.mark.parametrize(
    "value, expected",
    [
        ("q", PieceType.QUEEN),
        ("Q", PieceType.QUEEN),
        ("queen", PieceType.QUEEN),
        (" Rook ", PieceType.ROOK),
        ("b", PieceType.BISHOP),
        ("n", PieceType.KNIGHT),
        ("knight", PieceType.KNIGHT),
        (PieceType.QUEEN, PieceType.QUEEN),
    ],
)
def test_valid_promotion(value: str, expected: PieceType) -> None:
    assert PromotionRequest(piece_type=value).piece_type == expected


@pytest.mark.parametrize("value", ["k", "king", "p", "pawn", "", "x", "dragon"])
def test_invalid_promotion(value: str) -> None:
    with pytest.raises(InvalidRequestError):
        PromotionRequest(piece_type=value)
