import os
import sys
from typing import Callable, Dict, Sequence

import pytest

# Ensure the repository root is on sys.path for `from engine...` imports
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from engine.board import Board  # noqa: E402
from engine.pieces import Piece  # noqa: E402

_SYMBOLS: Dict[str, Piece] = {"w": Piece.WHITE, "b": Piece.BLACK, "-": Piece.EMPTY}


def board_from_diagram(rows: Sequence[str], turn: Piece = Piece.BLACK) -> Board:
    """Build a board from eight strings, rank 8 first, cells separated by spaces."""
    contents = [[_SYMBOLS[cell] for cell in row.split()] for row in reversed(rows)]
    return Board(contents, turn)


@pytest.fixture
def make_board() -> Callable[..., Board]:
    return board_from_diagram
