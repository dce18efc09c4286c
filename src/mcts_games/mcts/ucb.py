"""UCB selection for game MCTS."""

import math
from typing import Optional

from .node import SearchNode

DEFAULT_EXPLORATION = 1.41


def ucb_score(
    child: SearchNode,
    parent: SearchNode,
    c: float = DEFAULT_EXPLORATION
) -> float:
    """Compute UCT score.

    UCT = Q + c * sqrt(ln(N_parent) / N_child)

    Unvisited children score +inf so each one is tried once before
    any average is trusted.

    Args:
        child: Child node
        parent: Parent node (must have been visited if child has)
        c: Exploration constant

    Returns:
        UCT score
    """
    if child.visit_count == 0:
        return float('inf')

    exploitation = child.total_reward / child.visit_count
    exploration = c * math.sqrt(
        math.log(parent.visit_count) / child.visit_count
    )

    return exploitation + exploration


def select_child(node: SearchNode, c: float = DEFAULT_EXPLORATION) -> SearchNode:
    """Child with the highest UCT score, first one on ties.

    Raises:
        ValueError: If node has no children
    """
    if not node.children:
        raise ValueError("No children to select from")

    best_child = None
    best_score = float('-inf')

    for child in node.children:
        score = ucb_score(child, node, c)
        if score > best_score:
            best_score = score
            best_child = child

    return best_child


def ucb_select(
    root: SearchNode,
    c: float = DEFAULT_EXPLORATION
) -> SearchNode:
    """Select node using UCT.

    Traverse from root, taking the highest scoring child,
    until reaching a leaf. A leaf returns itself.

    Args:
        root: Node to start from
        c: Exploration constant

    Returns:
        Selected leaf node
    """
    node = root

    while node.children:
        node = select_child(node, c)

    return node


def select_most_visited(node: SearchNode) -> Optional[SearchNode]:
    """Select most visited child (for final move choice)."""
    if not node.children:
        return None

    return max(node.children, key=lambda child: child.visit_count)
