from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from gridttt.core import MatchResult, Player, PlayerRoster

logger = logging.getLogger(__name__)

DEFAULT_WIN_CONDITION = 5


class FirstPlayer(Enum):
    HUMAN = "human"
    AI = "ai"
    RANDOM = "random"


def first_player_categories(human_count: int, ai_count: int) -> List[FirstPlayer]:
    categories = []
    if human_count:
        categories.append(FirstPlayer.HUMAN)
    if ai_count:
        categories.append(FirstPlayer.AI)
    categories.append(FirstPlayer.RANDOM)
    return categories


def first_player_shift(
    category: FirstPlayer,
    index: int,
    human_count: int,
    ai_count: int,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Roster shift that brings the chosen first player to the head.

    The roster lists humans first, then AIs. ``index`` is ignored for
    ``FirstPlayer.RANDOM``.
    """
    total = human_count + ai_count
    if category is FirstPlayer.RANDOM:
        rng = rng or np.random.default_rng()
        return int(rng.integers(total))
    limit = human_count if category is FirstPlayer.HUMAN else ai_count
    if not 0 <= index < limit:
        raise ValueError(f"No {category.value} player number {index}.")
    offset = 0 if category is FirstPlayer.HUMAN else human_count
    return offset + index


class TurnScheduler:
    """Turn order, scores and rotation bookkeeping for one series.

    Three rotation counters are kept so every rotation can be undone
    exactly: the first-player shift chosen at series start, the rotations
    between matches (``series_windup``) and the rotations within the
    current match (``match_windup``).
    """

    def __init__(self, players: Sequence[Player], *, win_condition: int = DEFAULT_WIN_CONDITION) -> None:
        if win_condition < 1:
            raise ValueError("win_condition must be at least 1.")
        self.roster = PlayerRoster(players)
        self.win_condition = win_condition
        self.first_shift = 0
        self.series_windup = 0
        self.match_windup = 0
        self.matches_played = 0
        self.ties = 0

    @property
    def current(self) -> Player:
        return self.roster.head

    @property
    def players(self) -> Sequence[Player]:
        return self.roster.players

    # ------------------------------------------------------------------
    # Series cycle
    # ------------------------------------------------------------------
    def start_series(self, shift: int = 0) -> None:
        for player in self.roster.players:
            player.score = 0
        self.roster.rotate(shift)
        self.first_shift = shift
        self.series_windup = 0
        self.match_windup = 0
        self.matches_played = 0
        self.ties = 0
        logger.info("series started, %s moves first", self.current.name)

    def series_over(self) -> bool:
        return any(player.score >= self.win_condition for player in self.roster.players)

    def winners(self) -> List[Player]:
        return [player for player in self.roster if player.score >= self.win_condition]

    def finish_series(self) -> List[Player]:
        self.roster.rotate(-self.series_windup)
        self.series_windup = 0
        winners = self.winners()
        logger.info(
            "series over after %d matches, won by %s",
            self.matches_played,
            ", ".join(player.name for player in winners),
        )
        return winners

    # ------------------------------------------------------------------
    # Match cycle
    # ------------------------------------------------------------------
    def start_match(self) -> None:
        self.match_windup = 0

    def finish_match(self, result: MatchResult) -> Player:
        """Record the result of the move just played by the current player.

        Returns the player who made the final move.
        """
        if not result.is_terminal:
            raise ValueError("Cannot finish a match that is still in progress.")
        mover = self.current
        if result is MatchResult.WIN:
            mover.score += 1
        else:
            self.ties += 1
        self.matches_played += 1
        logger.debug("match %d: %s by %s", self.matches_played, result.value, mover.name)

        self.roster.rotate(-self.match_windup)
        self.match_windup = 0
        if not self.series_over():
            # The next player in the starting order leads the next match.
            self.roster.rotate(1)
            self.series_windup += 1
        return mover

    # ------------------------------------------------------------------
    # Move cycle
    # ------------------------------------------------------------------
    def advance(self) -> Player:
        self.roster.rotate(1)
        self.match_windup += 1
        return self.current

    def print_order(self) -> List[Player]:
        """Players in creation order: humans first, then AIs."""
        return self.roster.rotated(-(self.first_shift + self.series_windup + self.match_windup))
