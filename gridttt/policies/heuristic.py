from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from gridttt.core import BoardState

logger = logging.getLogger(__name__)


class Policy:
    """Chooses the linear index of an empty cell for ``piece`` to play."""

    def choose(self, board: BoardState, piece: str) -> int:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return an independent copy of this policy."""
        return self


class RandomPolicy(Policy):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def choose(self, board: BoardState, piece: str) -> int:
        empty = board.empty_cells()
        if not empty:
            raise ValueError("No empty cell left to play.")
        return int(self.rng.choice(empty))

    def spawn(self, seed: Optional[int] = None) -> "RandomPolicy":
        return RandomPolicy(np.random.default_rng(seed))


def find_winning_cell(board: BoardState, piece: str) -> Optional[int]:
    """Empty cell completing a line that already holds N-1 of ``piece``."""
    code = board.piece_code(piece)
    target = board.size - 1
    for line in board.lines():
        if line.counts[code] == target:
            cell = board.first_empty(line.cells)
            if cell is not None:
                return cell
    return None


def find_blocking_cell(board: BoardState, piece: str) -> Optional[int]:
    """Empty cell completing a line that holds N-1 of any piece but ``piece``."""
    code = board.piece_code(piece)
    target = board.size - 1
    for line in board.lines():
        others = np.flatnonzero(line.counts == target)
        if any(int(other) != code for other in others):
            cell = board.first_empty(line.cells)
            if cell is not None:
                return cell
    return None


class HeuristicPolicy(RandomPolicy):
    """One-ply player: take a win, else block a loss, else play at random.

    Lines are scanned rows, columns, diag1, diag2, lowest number first, and
    the first qualifying line decides the move.
    """

    def choose(self, board: BoardState, piece: str) -> int:
        cell = find_winning_cell(board, piece)
        if cell is not None:
            logger.debug("%s takes the win at %d", piece, cell)
            return cell
        cell = find_blocking_cell(board, piece)
        if cell is not None:
            logger.debug("%s blocks at %d", piece, cell)
            return cell
        cell = super().choose(board, piece)
        logger.debug("%s plays at random: %d", piece, cell)
        return cell

    def spawn(self, seed: Optional[int] = None) -> "HeuristicPolicy":
        return HeuristicPolicy(np.random.default_rng(seed))
