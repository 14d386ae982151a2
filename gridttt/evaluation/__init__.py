"""Headless all-AI series for comparing policies."""

from .match import EvaluationResult, HeadlessPrompter, evaluate_policies

__all__ = ["EvaluationResult", "HeadlessPrompter", "evaluate_policies"]
