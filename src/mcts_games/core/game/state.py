"""Game state contract consumed by the search engine.

The engine never looks inside a state. It only needs to:
- enumerate legal actions
- apply an action to get a new state
- ask whether play is over
- read a reward

States are immutable values. Many nodes hold references to ancestor
states, so apply() must return a fresh state and leave the receiver alone.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, List

# Opaque, game-specific move. Only equality is assumed.
Action = Hashable


class IllegalMoveError(ValueError):
    """Raised when an action is not legal in the current state."""


class GameState(ABC):
    """Immutable position plus side to move.

    Reward convention: positive favours the first player
    (+1 win, -1 loss, 0 draw for a symmetric zero-sum game).
    """

    @abstractmethod
    def possible_actions(self) -> List[Action]:
        """All legal actions from this state (empty if none)."""

    @abstractmethod
    def apply(self, action: Action) -> "GameState":
        """Return the successor state. Must not mutate self."""

    @abstractmethod
    def is_terminal(self) -> bool:
        """True iff no further play is possible."""

    @abstractmethod
    def reward(self) -> float:
        """Reward from the first player's point of view."""

    def player(self) -> int:
        """Sign of the side to move: +1 first player, -1 second player.

        Single-perspective games can keep the default.
        """
        return 1

    def describe(self) -> Any:
        """Human readable form, used in logs."""
        return repr(self)
