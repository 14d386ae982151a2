from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from gridttt.config import EngineConfig
from gridttt.console import Prompter, Renderer, joinor
from gridttt.core import BoardState, InvalidConfig, MatchResult, Player, outcome
from gridttt.policies import HeuristicPolicy, Policy
from gridttt.scheduling import FirstPlayer, TurnScheduler, first_player_categories, first_player_shift

logger = logging.getLogger(__name__)


@dataclass
class SeriesResult:
    winners: List[Player]
    matches_played: int
    ties: int
    moves_played: int
    scores: Dict[str, int] = field(default_factory=dict)  # piece -> match wins


def ai_count_bounds(grid_size: int, human_count: int, min_players: int) -> Tuple[int, int]:
    """Smallest and largest AI count that keeps the roster playable."""
    min_ai = min_players - human_count if human_count <= min_players else 0
    max_ai = grid_size - human_count
    return min_ai, max_ai


def validate_player_counts(grid_size: int, human_count: int, ai_count: int, *, min_players: int) -> None:
    if human_count < 0 or ai_count < 0:
        raise InvalidConfig("Player counts cannot be negative.")
    total = human_count + ai_count
    if total < min_players:
        raise InvalidConfig(f"At least {min_players} players are needed, got {total}.")
    if total > grid_size:
        raise InvalidConfig(f"A {grid_size}x{grid_size} grid holds at most {grid_size} players, got {total}.")


class GameLoop:
    """Drives series, matches and moves, delegating I/O to collaborators."""

    def __init__(
        self,
        config: EngineConfig,
        prompter: Prompter,
        renderer: Renderer,
        *,
        policy: Optional[Policy] = None,
        player_policies: Optional[Dict[str, Policy]] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config
        self.prompter = prompter
        self.renderer = renderer
        self.rng = rng or np.random.default_rng()
        self.policy = policy or HeuristicPolicy(self.rng)
        self.player_policies = dict(player_policies or {})  # piece -> policy
        self.moves_played = 0

    def run(self) -> None:
        msg = self.config.message
        self.prompter.say(msg("welcome", win_condition=self.config.win_condition))
        while True:
            board, scheduler = self.setup_series()
            self.play_series(board, scheduler)
            if not self.prompter.confirm(msg("again")):
                break
        self.prompter.say(msg("goodbye"))

    # ------------------------------------------------------------------
    # Series setup
    # ------------------------------------------------------------------
    def setup_series(self) -> Tuple[BoardState, TurnScheduler]:
        msg = self.config.message
        low, high = self.config.min_grid_width, self.config.max_grid_width
        grid_size = self.prompter.ask_int(
            f"{msg('enter_grid_size')} ({low} <= {msg('grid_size')} <= {high})", low, high
        )
        human_count = self._ask_player_count(0, grid_size, human=True)

        min_ai, max_ai = ai_count_bounds(grid_size, human_count, self.config.min_players)
        if max_ai <= 0:
            ai_count = 0
        elif min_ai == max_ai:
            ai_count = min_ai
        else:
            ai_count = self._ask_player_count(min_ai, max_ai, human=False)
        validate_player_counts(grid_size, human_count, ai_count, min_players=self.config.min_players)

        pool = list(self.config.pieces)
        players = []
        for number in range(human_count):
            piece = self.prompter.ask_piece(
                f"{msg('human')} {number} {msg('piece_choice')} {joinor(pool)}", pool
            )
            pool.remove(piece)
            players.append(Player(number, piece, human=True, name=f"{msg('human')} {number}"))
        for number in range(ai_count):
            piece = pool.pop(int(self.rng.integers(len(pool))))
            players.append(Player(number, piece, human=False, name=f"{msg('ai')} {number}"))

        shift = self._ask_first_player(human_count, ai_count)
        return self.create_series(grid_size, players, shift)

    def create_series(
        self,
        grid_size: int,
        players: Sequence[Player],
        first_shift: int = 0,
    ) -> Tuple[BoardState, TurnScheduler]:
        human_count = sum(1 for player in players if player.human)
        validate_player_counts(
            grid_size, human_count, len(players) - human_count, min_players=self.config.min_players
        )
        pieces = [player.piece for player in players]
        if len(set(pieces)) != len(pieces):
            raise InvalidConfig("Every player needs a distinct piece.")
        unknown = [piece for piece in pieces if piece not in self.config.pieces]
        if unknown:
            raise InvalidConfig(f"Pieces not in the palette: {joinor(unknown)}")
        board = BoardState(grid_size, self.config.pieces, min_size=self.config.min_grid_width)
        scheduler = TurnScheduler(players, win_condition=self.config.win_condition)
        scheduler.start_series(first_shift)
        logger.info(
            "new series: grid=%d, players=%s",
            grid_size,
            ", ".join(f"{player.name} ({player.piece})" for player in players),
        )
        return board, scheduler

    def _ask_player_count(self, low: int, high: int, *, human: bool) -> int:
        msg = self.config.message
        kind = msg("human") if human else msg("ai")
        return self.prompter.ask_int(
            f"{msg('enter_num_players')} {kind} {msg('players')} ({low} <= {msg('players')} <= {high})",
            low,
            high,
        )

    def _ask_first_player(self, human_count: int, ai_count: int) -> int:
        msg = self.config.message
        words = {
            FirstPlayer.HUMAN: msg("human"),
            FirstPlayer.AI: msg("ai"),
            FirstPlayer.RANDOM: msg("random"),
        }
        categories = first_player_categories(human_count, ai_count)
        answers = {words[category].lower(): category for category in categories}
        answers[msg("random_abbreviated").lower()] = FirstPlayer.RANDOM
        answer = self.prompter.ask_choice(
            f"{msg('who_first')} {joinor([words[category] for category in categories])}",
            list(answers),
        )
        category = answers[answer.lower()]

        index = 0
        if category is not FirstPlayer.RANDOM:
            count = human_count if category is FirstPlayer.HUMAN else ai_count
            if count > 1:
                index = self.prompter.ask_int(
                    f"{msg('enter_the')} {words[category]} {msg('player_num_first')} {joinor(range(count))}",
                    0,
                    count - 1,
                )
        return first_player_shift(category, index, human_count, ai_count, self.rng)

    # ------------------------------------------------------------------
    # Match and series loops
    # ------------------------------------------------------------------
    def play_series(self, board: BoardState, scheduler: TurnScheduler) -> SeriesResult:
        msg = self.config.message
        self.moves_played = 0
        while True:
            result = self.play_match(board, scheduler)
            mover = scheduler.finish_match(result)
            self._show(board, scheduler, mover)
            self.renderer.show_match_result(mover, result)
            if scheduler.series_over():
                break
            self.prompter.pause(msg("next_match"))

        winners = scheduler.finish_series()
        self.renderer.show_winners(winners)
        return SeriesResult(
            winners=winners,
            matches_played=scheduler.matches_played,
            ties=scheduler.ties,
            moves_played=self.moves_played,
            scores={player.piece: player.score for player in scheduler.players},
        )

    def play_match(self, board: BoardState, scheduler: TurnScheduler) -> MatchResult:
        board.clear()
        scheduler.start_match()
        while True:
            player = scheduler.current
            self._show(board, scheduler, player)
            if player.human:
                index = self._human_move(board, player)
            else:
                index = self._ai_move(board, player)

            board.place(index, player.piece)
            self.moves_played += 1
            self._show(board, scheduler, player)
            if not player.human:
                self.prompter.pause(self.config.message("continue"))

            result = outcome(board, player.piece)
            if result.is_terminal:
                logger.debug("match ended: %s after %d placements", result.value, board.filled_count)
                return result
            scheduler.advance()

    def _human_move(self, board: BoardState, player: Player) -> int:
        msg = self.config.message
        prefix = f"{msg('human')} {player.number}"
        while True:
            cols = board.open_cols()
            col = self.prompter.ask_int_from(f"{prefix} {msg('human_col')} {joinor(cols)}", cols)
            rows = board.open_rows()
            row = self.prompter.ask_int_from(f"{prefix} {msg('human_row')} {joinor(rows)}", rows)
            index = board.to_1d(row, col)
            if board.is_empty(index):
                return index
            self.prompter.say(msg("square_occupied"))

    def _ai_move(self, board: BoardState, player: Player) -> int:
        self.prompter.say(f"{self.config.message('ai')} {player.number} {self.config.message('turn')}")
        policy = self.player_policies.get(player.piece, self.policy)
        return policy.choose(board, player.piece)

    def _show(self, board: BoardState, scheduler: TurnScheduler, current: Player) -> None:
        self.renderer.show_board(board)
        self.renderer.show_scores(scheduler.print_order(), current)
