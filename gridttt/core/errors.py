from __future__ import annotations


class GridGameError(Exception):
    """Base class for engine errors."""


class InvalidConfig(GridGameError, ValueError):
    """Board side, player counts or settings are out of bounds."""


class OccupiedCell(GridGameError, ValueError):
    def __init__(self, index: int, piece: str) -> None:
        super().__init__(f"Cell {index} is already occupied by {piece!r}.")
        self.index = index
        self.piece = piece


class BoardInvariantError(GridGameError, RuntimeError):
    pass
