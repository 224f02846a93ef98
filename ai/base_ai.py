"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.board import Board
from engine.move import Move


class BaseAI(ABC):
    """Abstract automated player contract."""

    @abstractmethod
    def choose_move(self, board: Board) -> Move:
        """Choose a legal move for the side to move on BOARD."""
        raise NotImplementedError
