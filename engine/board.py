"""Lines of Action board state, legal move generation, and win detection."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Union

import numpy as np

from engine.errors import EmptyHistoryError, IllegalMoveError, MoveLimitError
from engine.move import Move
from engine.pieces import SIDES, Piece
from engine.rules import ALL_SQUARES, BOARD_SIZE, Square, pieces_along_line, squares_between

# Moves per side before an undecided game is a tie.
DEFAULT_MOVE_LIMIT = 60

W = Piece.WHITE
B = Piece.BLACK
E = Piece.EMPTY

# Bottom row (rank 1) first.
INITIAL_PIECES: List[List[Piece]] = [
    [E, B, B, B, B, B, B, E],
    [W, E, E, E, E, E, E, W],
    [W, E, E, E, E, E, E, W],
    [W, E, E, E, E, E, E, W],
    [W, E, E, E, E, E, E, W],
    [W, E, E, E, E, E, E, W],
    [W, E, E, E, E, E, E, W],
    [E, B, B, B, B, B, B, E],
]


def find_regions(cells: Sequence[Piece], order: Iterable[Square] = ALL_SQUARES) -> Dict[Piece, List[int]]:
    """Return the sizes of all 8-connected clusters per side, largest first.

    ORDER is the sequence in which squares seed the flood fill; the result
    does not depend on it.
    """
    sizes: Dict[Piece, List[int]] = {side: [] for side in SIDES}
    visited = [False] * (BOARD_SIZE * BOARD_SIZE)
    for start in order:
        piece = cells[start.index]
        if piece is Piece.EMPTY or visited[start.index]:
            continue
        visited[start.index] = True
        stack = [start]
        count = 0
        while stack:
            square = stack.pop()
            count += 1
            for neighbor in square.neighbors():
                if not visited[neighbor.index] and cells[neighbor.index] is piece:
                    visited[neighbor.index] = True
                    stack.append(neighbor)
        sizes[piece].append(count)
    for side in SIDES:
        sizes[side].sort(reverse=True)
    return sizes


class Board:
    """A Lines of Action position with move history.

    ``Board(contents, turn)`` gives ``get(sq(col, row)) == contents[row][col]``.
    Written as a list literal, the bottom row of CONTENTS appears first.
    """

    def __init__(
        self,
        contents: Optional[Sequence[Sequence[Piece]]] = None,
        turn: Piece = Piece.BLACK,
        move_limit: int = DEFAULT_MOVE_LIMIT,
    ) -> None:
        self._cells: List[Piece] = [Piece.EMPTY] * (BOARD_SIZE * BOARD_SIZE)
        self._moves: List[Move] = []
        self._replaced: List[Piece] = []
        self._turn = Piece.BLACK
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._regions: Optional[Dict[Piece, List[int]]] = None
        self._winner_known = False
        self._winner: Optional[Piece] = None
        self.initialize(INITIAL_PIECES if contents is None else contents, turn)
        self.set_move_limit(move_limit)

    def initialize(self, contents: Sequence[Sequence[Piece]], side: Piece) -> None:
        """Set my state to CONTENTS with SIDE to move, clearing history."""
        if len(contents) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in contents):
            raise ValueError(f"Board contents must be {BOARD_SIZE}x{BOARD_SIZE}.")
        if side not in SIDES:
            raise ValueError(f"Side to move must be white or black, got {side}.")
        self._moves.clear()
        self._replaced.clear()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                self._cells[row * BOARD_SIZE + col] = Piece(contents[row][col])
        self._turn = side
        self._move_limit = 2 * DEFAULT_MOVE_LIMIT
        self._invalidate()

    def clear(self) -> None:
        """Reset to the standard initial position."""
        self.initialize(INITIAL_PIECES, Piece.BLACK)

    def clone(self) -> "Board":
        """Deep copy board state, including history and move limit."""
        cloned = Board.__new__(Board)
        cloned._cells = list(self._cells)
        cloned._moves = list(self._moves)
        cloned._replaced = list(self._replaced)
        cloned._turn = self._turn
        cloned._move_limit = self._move_limit
        cloned._regions = None
        cloned._winner_known = False
        cloned._winner = None
        return cloned

    def copy_from(self, board: "Board") -> None:
        """Set my state to a copy of BOARD."""
        if board is self:
            return
        self._cells = list(board._cells)
        self._moves = list(board._moves)
        self._replaced = list(board._replaced)
        self._turn = board._turn
        self._move_limit = board._move_limit
        self._invalidate()

    @property
    def turn(self) -> Piece:
        return self._turn

    @property
    def move_limit(self) -> int:
        """Number of plies after which an undecided game is tied."""
        return self._move_limit

    @property
    def history(self) -> List[Move]:
        return list(self._moves)

    def moves_made(self) -> int:
        return len(self._moves)

    def get(self, square: Square) -> Piece:
        return self._cells[square.index]

    def set(self, square: Square, piece: Piece, next_turn: Optional[Piece] = None) -> None:
        """Place PIECE on SQUARE and, if NEXT_TURN is given, hand it the move."""
        self._cells[square.index] = piece
        if next_turn is not None:
            self._turn = next_turn
        self._invalidate()

    def set_move_limit(self, limit: int) -> None:
        """Tie the game after LIMIT moves by each side; requires 2 * LIMIT > moves_made()."""
        if 2 * limit <= self.moves_made():
            raise MoveLimitError(f"Move limit {limit} too small after {self.moves_made()} moves.")
        self._move_limit = 2 * limit
        self._invalidate()

    def is_legal(self, move_or_from: Union[Move, Square], to_sq: Optional[Square] = None) -> bool:
        """Return whether a move is legal for the side to move.

        Accepts either a Move or a pair of squares. The capture flag of a
        Move is ignored.
        """
        if isinstance(move_or_from, Move):
            from_sq, to_sq = move_or_from.from_sq, move_or_from.to_sq
        else:
            from_sq = move_or_from
        if to_sq is None:
            raise TypeError("is_legal needs a Move or two squares.")
        if self.get(from_sq) is not self._turn:
            return False
        direction = from_sq.direction(to_sq)
        if direction is None:
            return False
        if from_sq.distance(to_sq) != pieces_along_line(self._cells, from_sq, direction):
            return False
        return not self._blocked(from_sq, to_sq)

    def _blocked(self, from_sq: Square, to_sq: Square) -> bool:
        """A friendly piece on the target or an enemy piece on the way blocks."""
        mover = self.get(from_sq)
        if self.get(to_sq) is mover:
            return True
        enemy = mover.opposite()
        return any(self.get(square) is enemy for square in squares_between(from_sq, to_sq))

    def legal_moves(self) -> List[Move]:
        """Generate all legal moves for the side to move."""
        legal: List[Move] = []
        for from_sq in ALL_SQUARES:
            if self.get(from_sq) is not self._turn:
                continue
            for to_sq in ALL_SQUARES:
                if self.is_legal(from_sq, to_sq):
                    legal.append(Move(from_sq, to_sq))
        return legal

    def make_move(self, move: Move) -> None:
        """Apply a legal move and switch turn.

        A piece standing on the destination is removed and kept in the
        history so that ``retract`` can put it back.
        """
        if move.capture:
            raise IllegalMoveError(f"Capture-flagged moves are not accepted: {move}")
        if not self.is_legal(move):
            raise IllegalMoveError(f"Illegal move: {move}")
        mover = self.get(move.from_sq)
        self._moves.append(move)
        self._replaced.append(self.get(move.to_sq))
        self._cells[move.from_sq.index] = Piece.EMPTY
        self._cells[move.to_sq.index] = mover
        self._turn = self._turn.opposite()
        self._invalidate()

    def retract(self) -> None:
        """Undo the last move, restoring any piece it displaced."""
        if not self._moves:
            raise EmptyHistoryError("No moves to retract.")
        move = self._moves.pop()
        replaced = self._replaced.pop()
        mover = self.get(move.to_sq)
        self._cells[move.to_sq.index] = replaced
        self._cells[move.from_sq.index] = mover
        self._turn = self._turn.opposite()
        self._invalidate()

    def _invalidate(self) -> None:
        self._regions = None
        self._winner_known = False
        self._winner = None

    def region_sizes(self, side: Piece) -> List[int]:
        """Sizes of SIDE's connected clusters, largest first."""
        if self._regions is None:
            self._regions = find_regions(self._cells)
        return self._regions[side]

    def pieces_contiguous(self, side: Piece) -> bool:
        return len(self.region_sizes(side)) == 1

    def winner(self) -> Optional[Piece]:
        """Return the winning side, Piece.EMPTY for a tie, or None if undecided."""
        if self._winner_known:
            return self._winner
        white = self.pieces_contiguous(Piece.WHITE)
        black = self.pieces_contiguous(Piece.BLACK)
        if white and black:
            # The side that just moved joined both groups and loses.
            self._winner = self._turn.opposite()
        elif white:
            self._winner = Piece.WHITE
        elif black:
            self._winner = Piece.BLACK
        elif self.moves_made() >= self._move_limit:
            self._winner = Piece.EMPTY
        else:
            self._winner = None
        self._winner_known = True
        return self._winner

    def game_over(self) -> bool:
        return self.winner() is not None

    def encode_state(self) -> np.ndarray:
        """Encode the position as white, black and side-to-move planes."""
        encoded = np.zeros((3, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
        for square in ALL_SQUARES:
            piece = self._cells[square.index]
            if piece is Piece.WHITE:
                encoded[0, square.row, square.col] = 1.0
            elif piece is Piece.BLACK:
                encoded[1, square.row, square.col] = 1.0
        encoded[2, :, :] = 1.0 if self._turn is Piece.WHITE else 0.0
        return encoded

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells and self._turn is other._turn

    def __hash__(self) -> int:
        return hash((tuple(self._cells), self._turn))

    def render_ascii(self) -> str:
        """Return a human-readable board, rank 8 at the top."""
        lines: List[str] = ["==="]
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = " ".join(self._cells[row * BOARD_SIZE + col].abbrev for col in range(BOARD_SIZE))
            lines.append(f"    {cells}")
        lines.append(f"Next move: {self._turn.full_name}")
        lines.append("===")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render_ascii()
