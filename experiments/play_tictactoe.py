#!/usr/bin/env python3
"""Play tic-tac-toe against the MCTS engine on the console.

The engine plays X and moves first unless --human X is given.
Moves are entered as "row col" with 0-based indices.

Usage:
    python experiments/play_tictactoe.py --iterations 1000
    python experiments/play_tictactoe.py --human X --config configs/tictactoe.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcts_games.core.game.tictactoe import O, X
from mcts_games.play.console import run_console_game
from mcts_games.utils.config import ConfigError, build_mcts_config, get_iterations, load_config
from mcts_games.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against MCTS")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML config file")
    parser.add_argument("--iterations", type=int, default=None,
                        help="MCTS iterations per engine move (default 1000)")
    parser.add_argument("--human", type=str, choices=["X", "O"], default="O",
                        help="Side the human plays")
    parser.add_argument("--exploration_constant", type=float, default=None,
                        help="UCT exploration constant")
    parser.add_argument("--evaluation", type=str, choices=["rollout", "direct"], default=None,
                        help="Leaf evaluation method")
    parser.add_argument("--backup", type=str, choices=["negamax", "absolute"], default=None,
                        help="Reward backup convention")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log_level", type=str, default="WARNING", help="Logging level")

    args = parser.parse_args()

    setup_logging(level=getattr(logging, args.log_level.upper(), logging.WARNING))

    try:
        config = load_config(args.config) if args.config else {}
        mcts_config = build_mcts_config(
            config,
            exploration_constant=args.exploration_constant,
            evaluation=args.evaluation,
            backup=args.backup,
            seed=args.seed,
        )
        iterations = args.iterations or get_iterations(config)
    except ConfigError as e:
        logger.error(f"Bad configuration: {e}")
        sys.exit(2)

    logger.info(f"Engine: {iterations} iterations, {mcts_config}")

    try:
        run_console_game(
            iterations=iterations,
            human_side=X if args.human == "X" else O,
            config=mcts_config,
        )
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")


if __name__ == "__main__":
    main()
