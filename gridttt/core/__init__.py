"""Board state, win rules and players for the grid game."""

from .board import LINE_KINDS, MIN_GRID_WIDTH, BoardState, Line, Position
from .errors import BoardInvariantError, GridGameError, InvalidConfig, OccupiedCell
from .players import Player, PlayerRoster
from .rules import MatchResult, has_line_of, outcome, winner

__all__ = [
    "BoardState",
    "Line",
    "LINE_KINDS",
    "MIN_GRID_WIDTH",
    "Position",
    "GridGameError",
    "InvalidConfig",
    "OccupiedCell",
    "BoardInvariantError",
    "Player",
    "PlayerRoster",
    "MatchResult",
    "has_line_of",
    "outcome",
    "winner",
]
