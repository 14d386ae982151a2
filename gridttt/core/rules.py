from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import numpy as np

from .board import BoardState
from .errors import BoardInvariantError

logger = logging.getLogger(__name__)


class MatchResult(Enum):
    WIN = "win"
    TIE = "tie"
    CONTINUE = "continue"

    @property
    def is_terminal(self) -> bool:
        return self is not MatchResult.CONTINUE


def has_line_of(board: BoardState, piece: str, length: int) -> bool:
    """True if any row, column or diagonal holds exactly ``length`` of ``piece``."""
    code = board.piece_code(piece)
    return bool(np.any(board.line_counts()[:, code] == length))


def winner(board: BoardState) -> Optional[str]:
    full_lines = board.line_counts() == board.size
    codes = np.flatnonzero(full_lines.any(axis=0))
    if len(codes) == 0:
        return None
    if len(codes) > 1:
        holders = ", ".join(board.pieces[int(code)] for code in codes)
        raise BoardInvariantError(f"More than one piece holds a full line: {holders}")
    return board.pieces[int(codes[0])]


def outcome(board: BoardState, current_piece: str) -> MatchResult:
    """Result of the move just played by ``current_piece``."""
    if winner(board) == current_piece:
        result = MatchResult.WIN
    elif board.is_full():
        result = MatchResult.TIE
    else:
        result = MatchResult.CONTINUE
    logger.debug("outcome for %s: %s", current_piece, result.value)
    return result
