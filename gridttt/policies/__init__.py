"""Move selection for automated players."""

from .heuristic import HeuristicPolicy, Policy, RandomPolicy, find_blocking_cell, find_winning_cell

__all__ = [
    "Policy",
    "RandomPolicy",
    "HeuristicPolicy",
    "find_winning_cell",
    "find_blocking_cell",
]
