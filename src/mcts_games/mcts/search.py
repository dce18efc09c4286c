"""Main MCTS search.

One iteration:

    leaf = ucb_select(root)
    if not leaf.state.is_terminal():
        leaf.expand()
    target = ucb_select(leaf)
    reward = evaluate(target.state)
    backprop(target, reward)

After the budget is spent the caller reads the root's children and plays
the most visited one. The engine itself never picks a move.

With evaluation="direct" and backup="absolute" this is the plain
read-the-reward, same-sign-everywhere loop. The defaults (random rollouts,
negamax backup) are what make the engine play tic-tac-toe properly.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.game.state import Action, GameState
from .backprop import backpropagate, backpropagate_negamax
from .node import SearchNode
from .rollout import EVALUATIONS, evaluate
from .tree import MCTSTree
from .ucb import DEFAULT_EXPLORATION, select_most_visited, ucb_select

logger = logging.getLogger(__name__)

BACKUPS = ("negamax", "absolute")


@dataclass
class MCTSConfig:
    """Configuration for MCTS search."""
    exploration_constant: float = DEFAULT_EXPLORATION
    # "rollout" plays random moves to the end, "direct" reads state.reward()
    evaluation: str = "rollout"
    # "negamax" signs rewards per mover, "absolute" adds the raw reward everywhere
    backup: str = "negamax"
    max_rollout_depth: Optional[int] = None
    seed: Optional[int] = None
    # Log progress every N iterations (0 disables)
    log_interval: int = 0

    def __post_init__(self):
        if self.exploration_constant < 0:
            raise ValueError(f"exploration_constant must be >= 0, got {self.exploration_constant}")
        if self.evaluation not in EVALUATIONS:
            raise ValueError(f"evaluation must be one of {EVALUATIONS}, got {self.evaluation!r}")
        if self.backup not in BACKUPS:
            raise ValueError(f"backup must be one of {BACKUPS}, got {self.backup!r}")
        if self.max_rollout_depth is not None and self.max_rollout_depth < 0:
            raise ValueError(f"max_rollout_depth must be >= 0, got {self.max_rollout_depth}")
        if self.log_interval < 0:
            raise ValueError(f"log_interval must be >= 0, got {self.log_interval}")

    @classmethod
    def reference(cls, **kwargs) -> "MCTSConfig":
        """Direct reward read-off with absolute backup."""
        return cls(evaluation="direct", backup="absolute", **kwargs)


def iterate(
    root: SearchNode,
    config: MCTSConfig,
    rng: np.random.Generator
) -> float:
    """Single MCTS iteration.

    1. UCT select from root down to a leaf
    2. Expand the leaf by one ply unless its game is over
    3. UCT select again from the leaf (first unvisited child after expansion)
    4. Evaluate the selected node
    5. Backpropagate

    Returns:
        Reward obtained at step 4 (first player's point of view)
    """
    c = config.exploration_constant

    # 1. Selection
    leaf = ucb_select(root, c)

    # 2. Expansion
    if not leaf.state.is_terminal():
        leaf.expand()

    # 3. Pick the node to evaluate
    target = ucb_select(leaf, c)

    # 4. Evaluation
    reward = evaluate(target.state, config.evaluation, rng, config.max_rollout_depth)

    # 5. Backpropagate
    if config.backup == "negamax":
        backpropagate_negamax(target, reward)
    else:
        backpropagate(target, reward)

    return reward


def _check_iterations(iterations) -> int:
    if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)):
        raise ValueError(f"iterations must be an int, got {type(iterations).__name__}")
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")
    return int(iterations)


def run_mcts(
    root_state: GameState,
    iterations: int,
    config: Optional[MCTSConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> SearchNode:
    """Run exactly `iterations` MCTS iterations from root_state.

    Args:
        root_state: Position to search from
        iterations: Budget (0 returns an unexpanded, unvisited root)
        config: Search configuration (defaults to MCTSConfig())
        rng: Random generator for rollouts (seeded from config.seed if omitted)

    Returns:
        Root of the search tree
    """
    return MCTSSearch(config, rng=rng).search(root_state, iterations)


class MCTSSearch:
    """Reusable MCTS searcher.

    Keeps one random generator across searches so a seeded searcher
    plays a whole game reproducibly.
    """

    def __init__(
        self,
        config: Optional[MCTSConfig] = None,
        rng: Optional[np.random.Generator] = None
    ):
        self.config = config or MCTSConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        # Statistics
        self.num_searches = 0
        self.num_iterations = 0

    def reset_stats(self):
        self.num_searches = 0
        self.num_iterations = 0

    def search(self, state: GameState, iterations: int) -> SearchNode:
        """Run MCTS from state and return the root of the tree."""
        iterations = _check_iterations(iterations)
        interval = self.config.log_interval
        root = SearchNode.root(state)

        # Reward sum since the last progress line
        window_reward = 0.0
        for i in range(iterations):
            reward = iterate(root, self.config, self.rng)
            self.num_iterations += 1

            if interval:
                window_reward += reward
            if interval and (i + 1) % interval == 0:
                tree = MCTSTree(root)
                stats = tree.get_statistics()
                logger.info(
                    f"Iter {i+1}/{iterations}: "
                    f"avg_reward={window_reward / interval:.3f}, "
                    f"nodes={stats['total_nodes']}, "
                    f"depth={stats['max_depth']}"
                )
                window_reward = 0.0

        self.num_searches += 1

        if root.children:
            best = select_most_visited(root)
            logger.debug(
                f"Search done: {iterations} iterations, best action {best.action!r} "
                f"({best.visit_count} visits, Q={best.Q:.3f})"
            )
        return root

    def best_child(self, state: GameState, iterations: int) -> Optional[SearchNode]:
        """Most visited root child after searching, or None if no moves."""
        return select_most_visited(self.search(state, iterations))

    def best_action(self, state: GameState, iterations: int) -> Action:
        """Action of the most visited root child.

        Raises:
            ValueError: If the state offers no actions
        """
        child = self.best_child(state, iterations)
        if child is None:
            raise ValueError("No legal actions to choose from")
        return child.action
