import numpy as np
import pytest

from gridttt.config import load_config
from gridttt.evaluation import HeadlessPrompter, evaluate_policies
from gridttt.policies import HeuristicPolicy, RandomPolicy


def test_evaluate_heuristic_vs_random_small():
    config = load_config(win_condition=2)
    policies = [HeuristicPolicy(np.random.default_rng(0)), RandomPolicy(np.random.default_rng(1))]
    result = evaluate_policies(policies, grid_size=3, series=4, config=config, seed=5)

    assert result.series_played == 4
    assert sum(result.series_wins.values()) == 4
    assert sum(result.match_wins.values()) + result.ties == result.matches_played
    # A 3x3 match needs at least five placements.
    assert result.average_match_length() >= 5
    assert 0.0 <= result.tie_rate() <= 1.0
    assert result.series_winrate("X") + result.series_winrate("O") == pytest.approx(1.0)


def test_evaluation_is_reproducible_with_seed():
    config = load_config(win_condition=1)
    policies = [RandomPolicy(), RandomPolicy(), RandomPolicy()]
    first = evaluate_policies(policies, grid_size=4, series=3, config=config, seed=9)
    second = evaluate_policies(policies, grid_size=4, series=3, config=config, seed=9)
    assert first == second
    assert set(first.series_wins) == {"X", "O", "~"}


def test_headless_prompter_refuses_questions():
    prompter = HeadlessPrompter()
    prompter.say("hello")
    prompter.pause("continue")
    with pytest.raises(RuntimeError):
        prompter.ask_int("grid size", 2, 16)
    with pytest.raises(RuntimeError):
        prompter.confirm("again?")
