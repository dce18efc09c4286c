"""MCTS tree structure for game search."""

from typing import Iterator, List, Optional

from ..core.game.state import Action
from .node import SearchNode
from .ucb import select_most_visited


class MCTSTree:
    """Read-only view over a search tree.

    Traversals are iterative so deep game trees do not hit the
    recursion limit.
    """

    def __init__(self, root: SearchNode):
        self.root = root

    def iter_nodes(self) -> Iterator[SearchNode]:
        """Depth-first, pre-order walk over all nodes."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def get_path_to_root(self, node: SearchNode) -> List[SearchNode]:
        """Get path from node to root."""
        path = []
        current = node
        while current is not None:
            path.append(current)
            current = current.parent
        return path

    def principal_variation(self) -> List[Action]:
        """Actions along the most visited line from the root."""
        actions = []
        node = select_most_visited(self.root)
        while node is not None:
            actions.append(node.action)
            node = select_most_visited(node)
        return actions

    def best_child(self) -> Optional[SearchNode]:
        return select_most_visited(self.root)

    def count_nodes(self) -> int:
        """Count total nodes."""
        return sum(1 for _ in self.iter_nodes())

    def count_terminal(self) -> int:
        """Count nodes holding a finished game."""
        return sum(1 for node in self.iter_nodes() if node.is_terminal())

    def max_depth(self) -> int:
        """Depth of the deepest node (root is 0)."""
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in node.children)
        return deepest

    def get_statistics(self) -> dict:
        """Get tree statistics."""
        return {
            "total_nodes": self.count_nodes(),
            "terminal_nodes": self.count_terminal(),
            "max_depth": self.max_depth(),
            "root_visits": self.root.visit_count,
            "root_Q": self.root.Q,
        }

    def child_statistics(self) -> List[dict]:
        """Per-move visit counts and averages at the root."""
        return [
            {
                "action": child.action,
                "visits": child.visit_count,
                "total_reward": child.total_reward,
                "Q": child.Q,
            }
            for child in self.root.children
        ]
