"""Turn rotation and series bookkeeping."""

from .turns import (
    DEFAULT_WIN_CONDITION,
    FirstPlayer,
    TurnScheduler,
    first_player_categories,
    first_player_shift,
)

__all__ = [
    "DEFAULT_WIN_CONDITION",
    "FirstPlayer",
    "TurnScheduler",
    "first_player_categories",
    "first_player_shift",
]
