"""Backpropagation for game MCTS.

Each evaluation updates every node on the path to the root:
- Visit counts
- Accumulated reward

Two conventions are supported:
- absolute: every ancestor adds the same scalar, as reported by the state
- negamax: every node adds the reward as seen by the player who moved into it
"""

from .node import SearchNode


def backpropagate(node: SearchNode, reward: float) -> None:
    """Backpropagate reward from node to root.

    Updates visit_count and total_reward for all ancestors with the raw
    reward, regardless of whose turn each ancestor represents.

    Args:
        node: Evaluated node
        reward: Reward from the first player's point of view
    """
    current = node

    while current is not None:
        current.visit_count += 1
        current.total_reward += reward
        current = current.parent


def backpropagate_negamax(node: SearchNode, reward: float) -> None:
    """Backpropagate reward from node to root, signed per mover.

    A node's statistics are from the point of view of the player who
    made the move into it, i.e. the player to move at its parent. The
    root has no incoming move and is credited to the opponent of its
    own side to move.

    Args:
        node: Evaluated node
        reward: Reward from the first player's point of view
    """
    current = node

    while current is not None:
        parent = current.parent
        if parent is not None:
            mover = parent.state.player()
        else:
            mover = -current.state.player()

        current.visit_count += 1
        current.total_reward += reward * mover
        current = parent

