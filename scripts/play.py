#!/usr/bin/env python3
"""Play N x N tic-tac-toe in the console against humans and AI players."""

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from gridttt import ConsolePrompter, ConsoleRenderer, GameLoop, GridGameError, load_config
from gridttt.policies import HeuristicPolicy, RandomPolicy

logger = logging.getLogger("gridttt.play")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe on an N x N grid in the console.")
    parser.add_argument("--config", help="YAML file with settings and messages", default=None)
    parser.add_argument("--win-condition", type=int, help="Match wins needed to take the series")
    parser.add_argument("--ai", choices=["heuristic", "random"], default="heuristic")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config, win_condition=args.win_condition)
    except GridGameError as exc:
        logger.error("invalid configuration: %s", exc)
        return 2

    rng = np.random.default_rng(args.seed)
    policy = HeuristicPolicy(rng) if args.ai == "heuristic" else RandomPolicy(rng)
    loop = GameLoop(
        config,
        ConsolePrompter(config),
        ConsoleRenderer(config, clear=not args.no_clear),
        policy=policy,
        rng=rng,
    )
    try:
        loop.run()
    except (KeyboardInterrupt, EOFError):
        print()
        print(f"=> {config.message('goodbye')}")
    except GridGameError:
        logger.exception("game aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
