"""Board geometry helpers for Lines of Action."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from engine.errors import InvalidSquareError
from engine.pieces import Piece

BOARD_SIZE = 8

# Compass order: N, NE, E, SE, S, SW, W, NW as (dcol, drow).
DIRECTION_DELTAS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)

SQUARE_PATTERN = re.compile(r"[a-h][1-8]")


def in_bounds(col: int, row: int) -> bool:
    """Return whether a column/row pair lies on the board."""
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


@dataclass(frozen=True)
class Square:
    """A board square; obtain instances through ``sq``."""

    col: int
    row: int

    def __post_init__(self) -> None:
        if not in_bounds(self.col, self.row):
            raise InvalidSquareError(f"Square out of range: col={self.col} row={self.row}")

    @property
    def index(self) -> int:
        return self.row * BOARD_SIZE + self.col

    def direction(self, other: "Square") -> Optional[int]:
        """Return the compass direction from this square to OTHER.

        The result is None unless OTHER lies on the same row, column or
        diagonal and differs from this square.
        """
        dc = other.col - self.col
        dr = other.row - self.row
        if dc == 0 and dr == 0:
            return None
        if dc != 0 and dr != 0 and abs(dc) != abs(dr):
            return None
        step = (_sign(dc), _sign(dr))
        return DIRECTION_DELTAS.index(step)

    def distance(self, other: "Square") -> int:
        return max(abs(other.col - self.col), abs(other.row - self.row))

    def move_dest(self, direction: int, steps: int) -> Optional["Square"]:
        """Return the square STEPS away along DIRECTION, or None if off-board."""
        dc, dr = DIRECTION_DELTAS[direction]
        col = self.col + dc * steps
        row = self.row + dr * steps
        if not in_bounds(col, row):
            return None
        return _SQUARES[row * BOARD_SIZE + col]

    def neighbors(self) -> List["Square"]:
        """Squares adjacent in any of the eight directions."""
        result: List[Square] = []
        for direction in range(len(DIRECTION_DELTAS)):
            dest = self.move_dest(direction, 1)
            if dest is not None:
                result.append(dest)
        return result

    def __str__(self) -> str:
        return chr(ord("a") + self.col) + str(self.row + 1)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


_SQUARES: Tuple[Square, ...] = tuple(
    Square(col, row) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)

ALL_SQUARES: Tuple[Square, ...] = _SQUARES


def sq(col: int, row: int) -> Square:
    """Return the shared Square at COL, ROW."""
    if not in_bounds(col, row):
        raise InvalidSquareError(f"Square out of range: col={col} row={row}")
    return _SQUARES[row * BOARD_SIZE + col]


def sq_from_index(index: int) -> Square:
    if index < 0 or index >= BOARD_SIZE * BOARD_SIZE:
        raise InvalidSquareError(f"Square index out of range: {index}")
    return _SQUARES[index]


def parse_square(text: str) -> Square:
    """Parse a designator such as ``"c3"``."""
    if not SQUARE_PATTERN.fullmatch(text):
        raise InvalidSquareError(f"Invalid square designator: {text!r}")
    return sq(ord(text[0]) - ord("a"), int(text[1]) - 1)


def squares_between(start: Square, end: Square) -> List[Square]:
    """Return squares strictly between two aligned squares."""
    direction = start.direction(end)
    if direction is None:
        return []
    between: List[Square] = []
    for steps in range(1, start.distance(end)):
        between.append(start.move_dest(direction, steps))
    return between


def pieces_along_line(cells: Sequence[Piece], square: Square, direction: int) -> int:
    """Count occupied cells on the whole line through SQUARE along DIRECTION's axis."""
    count = 1 if cells[square.index] is not Piece.EMPTY else 0
    for heading in (direction, (direction + 4) % 8):
        steps = 1
        dest = square.move_dest(heading, steps)
        while dest is not None:
            if cells[dest.index] is not Piece.EMPTY:
                count += 1
            steps += 1
            dest = square.move_dest(heading, steps)
    return count
