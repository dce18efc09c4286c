"""MCTS node for game tree search."""

import weakref
from dataclasses import dataclass, field
from typing import List, Optional

from ..core.game.state import Action, GameState


@dataclass(eq=False)
class SearchNode:
    """MCTS node.

    The parent link is a weak reference: nodes own their children, never
    their parent. Dropping the root releases the whole tree.

    Attributes:
        state: Game state at this node
        action: Action applied to the parent's state to reach this node
        children: Child nodes, in the order the state listed its actions
        visit_count: N - number of backpropagations through this node
        total_reward: W - sum of backpropagated rewards
    """
    state: GameState
    parent_ref: Optional["weakref.ReferenceType[SearchNode]"] = field(default=None, repr=False)
    action: Optional[Action] = None
    children: List["SearchNode"] = field(default_factory=list, repr=False)
    visit_count: int = 0
    total_reward: float = 0.0

    @classmethod
    def root(cls, state: GameState) -> "SearchNode":
        """Create a parentless node."""
        return cls(state=state)

    @property
    def parent(self) -> Optional["SearchNode"]:
        """Parent node (None for root, or once the parent is gone)."""
        if self.parent_ref is None:
            return None
        return self.parent_ref()

    @property
    def Q(self) -> float:
        """Average reward (Q = W / N)."""
        if self.visit_count == 0:
            return 0.0
        return self.total_reward / self.visit_count

    def is_leaf(self) -> bool:
        """Check if node has no children."""
        return len(self.children) == 0

    def is_root(self) -> bool:
        return self.parent is None

    def is_terminal(self) -> bool:
        return self.state.is_terminal()

    def add_child(self, child: "SearchNode") -> None:
        """Attach child and point it back at this node."""
        child.parent_ref = weakref.ref(self)
        self.children.append(child)

    def expand(self) -> List["SearchNode"]:
        """Create one child per legal action.

        Children keep the order of possible_actions(). A state with no
        actions leaves the node a leaf. The caller decides whether a
        terminal node should be expanded at all.

        Returns:
            The new children

        Raises:
            ValueError: If the node was already expanded
        """
        if self.children:
            raise ValueError(f"Node already has {len(self.children)} children")

        for action in self.state.possible_actions():
            self.add_child(SearchNode(state=self.state.apply(action), action=action))
        return self.children

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def __repr__(self) -> str:
        return (f"SearchNode(action={self.action!r}, visits={self.visit_count}, "
                f"Q={self.Q:.3f}, children={len(self.children)})")
