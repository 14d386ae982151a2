from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidConfig, OccupiedCell

logger = logging.getLogger(__name__)

MIN_GRID_WIDTH = 2
EMPTY = 0

GridArray = NDArray[np.int8]
CountArray = NDArray[np.int16]
Position = Tuple[int, int]

LINE_KINDS: Tuple[str, ...] = ("row", "col", "diag1", "diag2")


@dataclass(frozen=True, eq=False)
class Line:
    kind: str  # one of LINE_KINDS
    number: int  # row/column number, 0 for diagonals
    counts: CountArray  # read-only view, one slot per palette piece
    cells: Tuple[int, ...]  # linear indices in scan order


class BoardState:
    """Square grid plus per-line piece counters.

    Cells are stored as palette index + 1 (0 is empty). Counters hold one
    slot per palette piece for every row, column and both diagonals, and
    are updated on each placement so win checks never rescan the grid.
    diag1 runs top-left to bottom-right, diag2 top-right to bottom-left.
    """

    def __init__(
        self,
        size: int,
        pieces: Sequence[str],
        *,
        min_size: int = MIN_GRID_WIDTH,
    ) -> None:
        self.pieces: Tuple[str, ...] = tuple(pieces)
        if len(set(self.pieces)) != len(self.pieces):
            raise InvalidConfig("Board pieces must be distinct.")
        if size < max(min_size, MIN_GRID_WIDTH) or size > len(self.pieces):
            raise InvalidConfig(
                f"Grid size {size} out of range "
                f"({max(min_size, MIN_GRID_WIDTH)} <= size <= {len(self.pieces)})."
            )
        self.size = size
        self._codes: Dict[str, int] = {piece: idx for idx, piece in enumerate(self.pieces)}

        n_pieces = len(self.pieces)
        self.grid: GridArray = np.zeros(size * size, dtype=np.int8)
        self.rows: CountArray = np.zeros((size, n_pieces), dtype=np.int16)
        self.cols: CountArray = np.zeros((size, n_pieces), dtype=np.int16)
        self.diag1: CountArray = np.zeros(n_pieces, dtype=np.int16)
        self.diag2: CountArray = np.zeros(n_pieces, dtype=np.int16)
        self._filled = 0

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------
    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def to_2d(self, index: int) -> Position:
        self._check_index(index)
        row, col = divmod(index, self.size)
        return row, col

    def to_1d(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f"Coordinates ({row}, {col}) out of range.")
        return row * self.size + col

    def piece_code(self, piece: str) -> int:
        try:
            return self._codes[piece]
        except KeyError:
            raise ValueError(f"Unknown piece {piece!r}.") from None

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, index: int, piece: str) -> None:
        row, col = self.to_2d(index)
        code = self.piece_code(piece)
        current = int(self.grid[index])
        if current != EMPTY:
            raise OccupiedCell(index, self.pieces[current - 1])

        self.grid[index] = code + 1
        self._filled += 1
        self.rows[row, code] += 1
        self.cols[col, code] += 1
        # The centre of an odd board sits on both diagonals.
        if row == col:
            self.diag1[code] += 1
        if row == self.size - 1 - col:
            self.diag2[code] += 1
        logger.debug("placed %s at %d (row=%d, col=%d)", piece, index, row, col)

    def clear(self) -> None:
        self.grid[:] = EMPTY
        self.rows[:] = 0
        self.cols[:] = 0
        self.diag1[:] = 0
        self.diag2[:] = 0
        self._filled = 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_full(self) -> bool:
        return self._filled == self.cell_count

    @property
    def filled_count(self) -> int:
        return self._filled

    def empty_cells(self) -> List[int]:
        return [int(idx) for idx in np.flatnonzero(self.grid == EMPTY)]

    def is_empty(self, index: int) -> bool:
        self._check_index(index)
        return int(self.grid[index]) == EMPTY

    def cell(self, index: int) -> Optional[str]:
        self._check_index(index)
        value = int(self.grid[index])
        return None if value == EMPTY else self.pieces[value - 1]

    def rows_of_cells(self) -> List[List[Optional[str]]]:
        return [
            [self.cell(self.to_1d(row, col)) for col in range(self.size)]
            for row in range(self.size)
        ]

    def open_rows(self) -> List[int]:
        return sorted({idx // self.size for idx in self.empty_cells()})

    def open_cols(self) -> List[int]:
        return sorted({idx % self.size for idx in self.empty_cells()})

    def count(self, kind: str, number: int, piece: str) -> int:
        code = self.piece_code(piece)
        if kind == "row":
            return int(self.rows[number, code])
        if kind == "col":
            return int(self.cols[number, code])
        if kind == "diag1":
            return int(self.diag1[code])
        if kind == "diag2":
            return int(self.diag2[code])
        raise ValueError(f"Unknown line kind {kind!r}.")

    def line_cells(self, kind: str, number: int = 0) -> Tuple[int, ...]:
        n = self.size
        if kind == "row":
            return tuple(number * n + i for i in range(n))
        if kind == "col":
            return tuple(i * n + number for i in range(n))
        if kind == "diag1":
            return tuple(i * n + i for i in range(n))
        if kind == "diag2":
            return tuple(i * n + (n - 1 - i) for i in range(n))
        raise ValueError(f"Unknown line kind {kind!r}.")

    def lines(self) -> Iterator[Line]:
        """Yield every line: rows, then columns, then diag1, then diag2."""
        for row in range(self.size):
            yield Line("row", row, self._view(self.rows[row]), self.line_cells("row", row))
        for col in range(self.size):
            yield Line("col", col, self._view(self.cols[col]), self.line_cells("col", col))
        yield Line("diag1", 0, self._view(self.diag1), self.line_cells("diag1"))
        yield Line("diag2", 0, self._view(self.diag2), self.line_cells("diag2"))

    def line_counts(self) -> CountArray:
        """All 2N+2 counters stacked in scan order, shape (2N+2, pieces)."""
        return np.vstack([self.rows, self.cols, self.diag1[None, :], self.diag2[None, :]])

    def first_empty(self, cells: Sequence[int]) -> Optional[int]:
        for index in cells:
            if int(self.grid[index]) == EMPTY:
                return index
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.cell_count:
            raise ValueError(f"Cell index {index} out of range.")

    @staticmethod
    def _view(array: CountArray) -> CountArray:
        view = array.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        board_str = "\n".join(
            " ".join(cell or "." for cell in row) for row in self.rows_of_cells()
        )
        return f"BoardState(size={self.size}, filled={self._filled})\n{board_str}"
