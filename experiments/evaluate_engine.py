#!/usr/bin/env python3
"""Evaluate the MCTS engine against baseline players.

Plays the engine against a random player and a perfect minimax player,
alternating sides, and reports win / draw / loss rates with a
significance test. With --compare_reference the plain direct-reward,
absolute-backup engine is measured against the same random baseline.

Usage:
    python experiments/evaluate_engine.py --num_games 20 --iterations 1000
    python experiments/evaluate_engine.py --config configs/tictactoe.yaml --compare_reference
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcts_games.comparison.arena import evaluate_player
from mcts_games.comparison.statistical_tests import statistical_significance_test
from mcts_games.mcts.search import MCTSConfig
from mcts_games.play.players import MCTSPlayer, MinimaxPlayer, RandomPlayer
from mcts_games.utils.config import ConfigError, build_mcts_config, get_iterations, load_config
from mcts_games.utils.logging import setup_logging
from mcts_games.utils.seed import derive_seed, set_seed

logger = logging.getLogger(__name__)

OPPONENTS = ("random", "minimax")


def make_opponent(kind: str, seed: int):
    if kind == "random":
        return RandomPlayer(seed=seed)
    if kind == "minimax":
        return MinimaxPlayer()
    raise ValueError(f"Unknown opponent: {kind}")


def main():
    parser = argparse.ArgumentParser(description="Evaluate MCTS against baselines")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--iterations", type=int, default=None,
                        help="MCTS iterations per move")
    parser.add_argument("--num_games", type=int, default=None,
                        help="Games per opponent")
    parser.add_argument("--opponents", type=str, nargs="+", choices=OPPONENTS, default=None,
                        help="Opponents to play")
    parser.add_argument("--compare_reference", action="store_true",
                        help="Also test the direct/absolute engine against random")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--log_file", type=str, default=None, help="Optional log file")

    args = parser.parse_args()

    try:
        config = load_config(args.config) if args.config else {}
        mcts_config = build_mcts_config(config, seed=args.seed)
        iterations = args.iterations or get_iterations(config)
    except ConfigError as e:
        print(f"Bad configuration: {e}", file=sys.stderr)
        sys.exit(2)

    eval_config = config.get('evaluation', {}) or {}
    level_name = (config.get('logging', {}) or {}).get('level', 'INFO')
    setup_logging(level=getattr(logging, str(level_name).upper(), logging.INFO),
                  log_file=args.log_file)

    num_games = args.num_games or eval_config.get('num_games', 20)
    opponents = args.opponents or eval_config.get('opponents', list(OPPONENTS))

    set_seed(args.seed)

    logger.info("=" * 60)
    logger.info("MCTS Engine Evaluation")
    logger.info("=" * 60)
    logger.info(f"Iterations: {iterations}, games per opponent: {num_games}")
    logger.info(f"Config: {mcts_config}")

    engine = MCTSPlayer(iterations=iterations, config=mcts_config)
    all_results = {}

    for i, kind in enumerate(opponents):
        opponent = make_opponent(kind, derive_seed(args.seed, i + 1))
        result = evaluate_player(engine, opponent, num_games=num_games, verbose=True)
        all_results[kind] = result

        logger.info(
            f"vs {opponent.name}: win={result['win_rate']:.2f} "
            f"draw={result['draw_rate']:.2f} loss={result['loss_rate']:.2f} "
            f"(p={result['p_value']:.4f})"
        )

    if args.compare_reference and "random" in all_results:
        reference = MCTSPlayer(
            iterations=iterations,
            config=MCTSConfig.reference(seed=args.seed),
            name=f"Reference-{iterations}",
        )
        ref_result = evaluate_player(
            reference, make_opponent("random", derive_seed(args.seed, 99)),
            num_games=num_games, verbose=True
        )

        test = statistical_significance_test(
            all_results["random"]["scores"], ref_result["scores"],
            min_samples=min(30, num_games), test_type="mannwhitney"
        )
        logger.info("-" * 60)
        logger.info(f"Default vs reference engine (scores against random): {test}")

    logger.info("=" * 60)
    logger.info("SUMMARY")
    logger.info("=" * 60)
    for kind, result in all_results.items():
        logger.info(f"{kind:>8}: {result['wins']}W {result['draws']}D {result['losses']}L")


if __name__ == "__main__":
    main()
