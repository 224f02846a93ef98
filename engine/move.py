"""Move value type and textual move notation."""

from __future__ import annotations

from dataclasses import dataclass, field

from engine.errors import InvalidMoveError, InvalidSquareError
from engine.rules import Square, parse_square


@dataclass(frozen=True)
class Move:
    """A move of one piece along one of the eight directions.

    Attributes:
        from_sq (Square): Origin square.
        to_sq (Square): Destination square.
        capture (bool): Notation flag only; ignored by equality and by
            legality checks, and refused by ``Board.make_move``.
    """

    from_sq: Square
    to_sq: Square
    capture: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if self.from_sq.direction(self.to_sq) is None:
            raise InvalidMoveError(f"Squares {self.from_sq} and {self.to_sq} are not aligned.")

    @property
    def direction(self) -> int:
        return self.from_sq.direction(self.to_sq)

    @property
    def length(self) -> int:
        return self.from_sq.distance(self.to_sq)

    def __str__(self) -> str:
        return f"{self.from_sq}-{self.to_sq}"


def parse_move(text: str) -> Move:
    """Parse a move written like ``"c3-f6"``.

    Raises:
        InvalidMoveError: If the text is malformed or the squares are not
            aligned.
    """
    parts = text.strip().split("-")
    if len(parts) != 2:
        raise InvalidMoveError(f"Invalid move text: {text!r}")
    try:
        from_sq = parse_square(parts[0])
        to_sq = parse_square(parts[1])
    except InvalidSquareError as exc:
        raise InvalidMoveError(f"Invalid move text: {text!r}") from exc
    return Move(from_sq, to_sq)
