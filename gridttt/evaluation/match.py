from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

import numpy as np

from gridttt.config import EngineConfig, load_config
from gridttt.console import NullRenderer, Prompter
from gridttt.core import Player
from gridttt.orchestration import GameLoop
from gridttt.policies import Policy


@dataclass
class EvaluationResult:
    series_played: int
    matches_played: int
    ties: int
    moves_played: int
    series_wins: Dict[str, int] = field(default_factory=dict)  # piece -> series won
    match_wins: Dict[str, int] = field(default_factory=dict)  # piece -> matches won

    def series_winrate(self, piece: str) -> float:
        return self.series_wins.get(piece, 0) / max(1, self.series_played)

    def tie_rate(self) -> float:
        return self.ties / max(1, self.matches_played)

    def average_match_length(self) -> float:
        return self.moves_played / max(1, self.matches_played)


class HeadlessPrompter(Prompter):
    """Prompter for all-AI series: pauses are skipped, questions are errors."""

    def say(self, msg: str) -> None:
        pass

    def pause(self, msg: str) -> None:
        pass

    def _refuse(self, msg: str):
        raise RuntimeError(f"Headless series cannot ask for input: {msg}")

    def ask_int(self, msg, low, high):
        self._refuse(msg)

    def ask_int_from(self, msg, options):
        self._refuse(msg)

    def ask_choice(self, msg, options):
        self._refuse(msg)

    def ask_piece(self, msg, pool):
        self._refuse(msg)

    def confirm(self, msg):
        self._refuse(msg)


def evaluate_policies(
    policies: Sequence[Policy],
    *,
    grid_size: int,
    series: int,
    config: Optional[EngineConfig] = None,
    seed: Optional[int] = None,
) -> EvaluationResult:
    """Play ``series`` all-AI series, one AI per policy.

    AI ``i`` plays the ``i``-th palette piece. The first player rotates from
    one series to the next so no policy always opens.
    """
    config = config or load_config()
    rng = np.random.default_rng(seed)
    pieces = config.pieces[: len(policies)]
    player_policies = {
        piece: policy.spawn(int(rng.integers(2**31))) for piece, policy in zip(pieces, policies)
    }
    loop = GameLoop(config, HeadlessPrompter(), NullRenderer(), player_policies=player_policies, rng=rng)

    matches_played = ties = moves_played = 0
    series_wins = {piece: 0 for piece in pieces}
    match_wins = {piece: 0 for piece in pieces}
    for index in range(series):
        players = [Player(number, piece, human=False) for number, piece in enumerate(pieces)]
        board, scheduler = loop.create_series(grid_size, players, index % len(players))
        result = loop.play_series(board, scheduler)
        matches_played += result.matches_played
        ties += result.ties
        moves_played += result.moves_played
        for player in result.winners:
            series_wins[player.piece] += 1
        for piece, score in result.scores.items():
            match_wins[piece] += score

    return EvaluationResult(
        series_played=series,
        matches_played=matches_played,
        ties=ties,
        moves_played=moves_played,
        series_wins=series_wins,
        match_wins=match_wins,
    )
