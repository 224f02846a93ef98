"""Minimax AI with alpha-beta pruning for Lines of Action."""

from __future__ import annotations

import logging
from typing import Optional

from ai.base_ai import BaseAI
from engine.board import Board
from engine.move import Move
from engine.pieces import Piece

LOGGER = logging.getLogger(__name__)

# Magnitude greater than any position score.
INFTY = 2**31 - 1
# Score of a won position: positive for white, negative for black.
WINNING_VALUE = INFTY - 20

DEFAULT_DEPTH = 1


class MinimaxAI(BaseAI):
    """Fixed-depth alpha-beta player."""

    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        prune: bool = True,
        score_terminal_at_horizon: bool = False,
    ) -> None:
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}.")
        self.depth = depth
        self.prune = prune
        # When set, finished games at depth 0 score as wins or ties instead of heuristically.
        self.score_terminal_at_horizon = score_terminal_at_horizon
        self.nodes_searched = 0
        self._found_move: Optional[Move] = None

    @property
    def found_move(self) -> Optional[Move]:
        """Move recorded by the last top-level search, if any."""
        return self._found_move

    def choose_move(self, board: Board) -> Move:
        """Choose move via depth-limited alpha-beta search."""
        if board.game_over():
            raise RuntimeError("Game is already over.")
        if not board.legal_moves():
            raise RuntimeError("No legal moves available.")
        move = self.search_for_move(board, max(1, self.depth))
        LOGGER.debug(
            "Minimax selected %s for %s after %d nodes",
            move,
            board.turn.full_name,
            self.nodes_searched,
        )
        return move

    def search_for_move(self, board: Board, depth: Optional[int] = None) -> Optional[Move]:
        """Search a copy of BOARD from the side to move and return the move found."""
        work = board.clone()
        sense = 1 if work.turn is Piece.WHITE else -1
        self._found_move = None
        self.nodes_searched = 0
        value = self.find_move(work, self.depth if depth is None else depth, True, sense, -INFTY, INFTY)
        LOGGER.debug("Search value %d, move %s", value, self._found_move)
        return self._found_move

    def find_move(self, board: Board, depth: int, save_move: bool, sense: int, alpha: int, beta: int) -> int:
        """Return the value of BOARD searched to DEPTH plies.

        SENSE is 1 when the side to move maximizes (white) and -1 when it
        minimizes. With SAVE_MOVE, the best move found is recorded in
        ``found_move``; the first move examined is recorded before any
        recursion so that some move is always available. Depth 0 returns
        the static estimate unless ``score_terminal_at_horizon`` is set;
        depth 0 and finished games never record a move.
        """
        self.nodes_searched += 1
        if depth == 0 and not self.score_terminal_at_horizon:
            return self.heuristic_score(board)
        winner = board.winner()
        if winner is Piece.WHITE:
            return WINNING_VALUE
        if winner is Piece.BLACK:
            return -WINNING_VALUE
        if winner is Piece.EMPTY:
            return 0
        if depth == 0:
            return self.heuristic_score(board)

        legal_moves = board.legal_moves()
        if not legal_moves:
            return self.heuristic_score(board)

        best = -INFTY if sense == 1 else INFTY
        for move in legal_moves:
            if save_move and self._found_move is None:
                self._found_move = move
            child = board.clone()
            child.make_move(move)
            score = self.find_move(child, depth - 1, False, -sense, alpha, beta)
            if sense == 1:
                if score > best:
                    best = score
                    if save_move:
                        self._found_move = move
                alpha = max(alpha, score)
            else:
                if score < best:
                    best = score
                    if save_move:
                        self._found_move = move
                beta = min(beta, score)
            if self.prune and alpha >= beta:
                break
        return best

    @staticmethod
    def heuristic_score(board: Board) -> int:
        """Static estimate favouring white: black clusters over white clusters."""
        white_regions = max(1, len(board.region_sizes(Piece.WHITE)))
        black_regions = max(1, len(board.region_sizes(Piece.BLACK)))
        return 100 * black_regions // white_regions
