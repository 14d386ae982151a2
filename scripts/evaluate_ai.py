#!/usr/bin/env python3
"""Pit AI policies against each other over headless series."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from gridttt import load_config
from gridttt.evaluation import evaluate_policies
from gridttt.policies import HeuristicPolicy, RandomPolicy

POLICIES = {"heuristic": HeuristicPolicy, "random": RandomPolicy}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("policies", nargs="+", choices=sorted(POLICIES), help="One policy per AI player")
    parser.add_argument("--grid-size", type=int, default=3)
    parser.add_argument("--series", type=int, default=20)
    parser.add_argument("--win-condition", type=int)
    parser.add_argument("--config", default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    config = load_config(args.config, win_condition=args.win_condition)
    policies = [POLICIES[name]() for name in args.policies]

    result = evaluate_policies(
        policies,
        grid_size=args.grid_size,
        series=args.series,
        config=config,
        seed=args.seed,
    )

    pieces = config.pieces[: len(policies)]
    output = {
        "series": result.series_played,
        "matches": result.matches_played,
        "ties": result.ties,
        "tie_rate": result.tie_rate(),
        "average_match_length": result.average_match_length(),
        "players": [
            {
                "policy": name,
                "piece": piece,
                "series_wins": result.series_wins[piece],
                "series_winrate": result.series_winrate(piece),
                "match_wins": result.match_wins[piece],
            }
            for name, piece in zip(args.policies, pieces)
        ],
    }
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
