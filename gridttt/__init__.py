"""N x N tic-tac-toe engine with human and AI players."""

from . import config, core, evaluation, orchestration, policies, scheduling
from .config import EngineConfig, load_config
from .console import ConsolePrompter, ConsoleRenderer, NullRenderer, Prompter, Renderer, joinor
from .core import (
    BoardInvariantError,
    BoardState,
    GridGameError,
    InvalidConfig,
    MatchResult,
    OccupiedCell,
    Player,
    PlayerRoster,
    has_line_of,
    outcome,
    winner,
)
from .evaluation import EvaluationResult, evaluate_policies
from .orchestration import GameLoop, SeriesResult
from .policies import HeuristicPolicy, Policy, RandomPolicy
from .scheduling import FirstPlayer, TurnScheduler

__all__ = [
    "config",
    "core",
    "evaluation",
    "orchestration",
    "policies",
    "scheduling",
    "EngineConfig",
    "load_config",
    "ConsolePrompter",
    "ConsoleRenderer",
    "NullRenderer",
    "Prompter",
    "Renderer",
    "joinor",
    "BoardState",
    "BoardInvariantError",
    "GridGameError",
    "InvalidConfig",
    "OccupiedCell",
    "MatchResult",
    "Player",
    "PlayerRoster",
    "has_line_of",
    "outcome",
    "winner",
    "EvaluationResult",
    "evaluate_policies",
    "GameLoop",
    "SeriesResult",
    "HeuristicPolicy",
    "Policy",
    "RandomPolicy",
    "FirstPlayer",
    "TurnScheduler",
]
