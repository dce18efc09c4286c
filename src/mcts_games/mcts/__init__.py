"""MCTS module: tree search over any GameState.

Select with UCT, expand one ply, evaluate, backpropagate.
The root's most visited child is the move to play.
"""

from .node import SearchNode
from .tree import MCTSTree
from .ucb import ucb_select, ucb_score, select_child, select_most_visited
from .backprop import backpropagate, backpropagate_negamax
from .rollout import evaluate, random_rollout, direct_reward
from .search import MCTSConfig, MCTSSearch, iterate, run_mcts

__all__ = [
    "SearchNode",
    "MCTSTree",
    "ucb_select",
    "ucb_score",
    "select_child",
    "select_most_visited",
    "backpropagate",
    "backpropagate_negamax",
    "evaluate",
    "random_rollout",
    "direct_reward",
    "MCTSConfig",
    "MCTSSearch",
    "iterate",
    "run_mcts",
]
