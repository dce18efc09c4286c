"""Leaf evaluation.

direct:  read the reward off the state as-is (0 for unfinished tic-tac-toe)
rollout: play uniformly random moves to the end, then read the reward
"""

from typing import Optional

import numpy as np

from ..core.game.state import GameState

EVALUATIONS = ("rollout", "direct")


def direct_reward(state: GameState) -> float:
    """Reward reported by the state itself."""
    return float(state.reward())


def random_rollout(
    state: GameState,
    rng: np.random.Generator,
    max_depth: Optional[int] = None
) -> float:
    """Play random legal moves until the game ends.

    Args:
        state: Starting state (not modified)
        rng: Random generator
        max_depth: Stop after this many moves and read the reward there

    Returns:
        Reward of the final state
    """
    depth = 0
    while not state.is_terminal():
        if max_depth is not None and depth >= max_depth:
            break
        actions = state.possible_actions()
        if not actions:
            break
        state = state.apply(actions[rng.integers(len(actions))])
        depth += 1

    return float(state.reward())


def evaluate(
    state: GameState,
    method: str,
    rng: np.random.Generator,
    max_depth: Optional[int] = None
) -> float:
    """Evaluate a leaf state with the given method."""
    if method == "direct":
        return direct_reward(state)
    if method == "rollout":
        return random_rollout(state, rng, max_depth)
    raise ValueError(f"Unknown evaluation method: {method}")
