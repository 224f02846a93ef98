"""Piece definitions for Lines of Action."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class Piece(str, Enum):
    """Contents of a board square: a piece of either side, or nothing."""

    WHITE = "white"
    BLACK = "black"
    EMPTY = "empty"

    def opposite(self) -> "Piece":
        if self is Piece.WHITE:
            return Piece.BLACK
        if self is Piece.BLACK:
            return Piece.WHITE
        raise ValueError("EMPTY has no opposite.")

    @property
    def abbrev(self) -> str:
        return PIECE_ABBREV[self]

    @property
    def full_name(self) -> str:
        return self.value.capitalize()


PIECE_ABBREV: Dict[Piece, str] = {
    Piece.WHITE: "w",
    Piece.BLACK: "b",
    Piece.EMPTY: "-",
}

SIDES = (Piece.WHITE, Piece.BLACK)
