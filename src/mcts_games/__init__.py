"""Monte Carlo Tree Search for two-player games.

Core loop, repeated for a fixed number of iterations:
1. Select: descend by UCT to a leaf
2. Expand: one child per legal action
3. Evaluate: rollout (or read the reward directly)
4. Backprop: update visits and rewards up to the root

Components:
- core/game/ - GameState contract and tic-tac-toe
- mcts/ - Node, UCT selection, backprop, search loop
- play/ - Players and the console game loop
- comparison/ - Arena and significance tests
"""

__version__ = "0.1.0"

from .core.game import GameState, TicTacToeState, IllegalMoveError
from .mcts.search import MCTSConfig, MCTSSearch, run_mcts
from .mcts.node import SearchNode
from .mcts.ucb import select_most_visited

__all__ = [
    "GameState",
    "TicTacToeState",
    "IllegalMoveError",
    "MCTSConfig",
    "MCTSSearch",
    "run_mcts",
    "SearchNode",
    "select_most_visited",
    "choose_move",
]


def choose_move(state: GameState, iterations: int = 1000, **kwargs):
    """High-level API: search and return the most visited action.

    Args:
        state: Position to move from
        iterations: Search budget
        **kwargs: MCTSConfig options

    Returns:
        The chosen action, or None if the state has no legal actions
    """
    root = run_mcts(state, iterations, MCTSConfig(**kwargs))
    best = select_most_visited(root)
    return best.action if best is not None else None
