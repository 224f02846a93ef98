"""Error taxonomy for board and move contract violations."""

from __future__ import annotations


class LoaError(Exception):
    """Base class for engine errors."""


class InvalidSquareError(LoaError, ValueError):
    """A square reference outside the 8x8 board or a malformed designator."""


class InvalidMoveError(LoaError, ValueError):
    """A move whose endpoints do not align on one of the eight directions."""


class IllegalMoveError(LoaError, ValueError):
    """make_move was called with a move the position does not allow."""


class EmptyHistoryError(LoaError, RuntimeError):
    """retract was called with no moves recorded."""


class MoveLimitError(LoaError, ValueError):
    """A move limit inconsistent with the moves already made."""
