"""Players for two-player games.

- MCTSPlayer: plays the most visited move after a fixed search budget
- RandomPlayer: uniform random legal move
- MinimaxPlayer: exact game-tree search (small games only)
- HumanPlayer: reads "row col" from the console
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

import numpy as np

from ..core.game.state import Action, GameState, IllegalMoveError
from ..core.game.tictactoe import BOARD_SIZE, Move
from ..mcts.search import MCTSConfig, MCTSSearch

logger = logging.getLogger(__name__)

MOVE_PROMPT = "Enter your move (row col):"
INVALID_MOVE = "Invalid input. Please try again."


class Player(ABC):
    """Base class for players."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def get_action(self, state: GameState) -> Action:
        """Choose a legal action for the side to move."""

    def reset(self):
        """Called at the start of each game."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class MCTSPlayer(Player):
    """MCTS engine player.

    Searches from scratch every move (no tree reuse) and plays the
    most visited root child.
    """

    def __init__(
        self,
        iterations: int = 1000,
        config: Optional[MCTSConfig] = None,
        name: Optional[str] = None,
    ):
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")
        super().__init__(name or f"MCTS-{iterations}")
        self.iterations = iterations
        self.search = MCTSSearch(config)

    @property
    def config(self) -> MCTSConfig:
        return self.search.config

    def get_action(self, state: GameState) -> Action:
        child = self.search.best_child(state, self.iterations)
        if child is None:
            raise ValueError("No legal actions to choose from")

        logger.debug(f"{self.name} plays {child.action!r} "
                     f"(visits={child.visit_count}, Q={child.Q:.3f})")
        return child.action


class RandomPlayer(Player):
    """Uniform random legal move."""

    def __init__(self, seed: Optional[int] = None, name: str = "Random"):
        super().__init__(name)
        self.rng = np.random.default_rng(seed)

    def get_action(self, state: GameState) -> Action:
        actions = state.possible_actions()
        if not actions:
            raise ValueError("No legal actions to choose from")
        return actions[self.rng.integers(len(actions))]


class MinimaxPlayer(Player):
    """Perfect player by exhaustive negamax.

    Values are memoized per state, so tic-tac-toe is solved once
    (a few thousand positions) and reused across games. Among equally
    good moves the first in action order is played.
    """

    def __init__(self, name: str = "Minimax"):
        super().__init__(name)
        self._values: Dict[GameState, float] = {}

    def value(self, state: GameState) -> float:
        """Game value for the side to move under perfect play."""
        cached = self._values.get(state)
        if cached is not None:
            return cached

        if state.is_terminal():
            result = state.reward() * state.player()
        else:
            result = max(-self.value(state.apply(a)) for a in state.possible_actions())

        self._values[state] = result
        return result

    def get_action(self, state: GameState) -> Action:
        actions = state.possible_actions()
        if not actions:
            raise ValueError("No legal actions to choose from")

        best_action = actions[0]
        best_value = float('-inf')
        for action in actions:
            value = -self.value(state.apply(action))
            if value > best_value:
                best_value = value
                best_action = action
        return best_action


def parse_move(text: str) -> Move:
    """Parse "row col" into a (row, col) pair.

    Raises:
        IllegalMoveError: On anything but two in-range integers
    """
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise IllegalMoveError(f"Expected 'row col', got {text!r}")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        raise IllegalMoveError(f"Row and column must be integers, got {text!r}") from None
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise IllegalMoveError(f"Move {(row, col)} is off the board")
    return row, col


class HumanPlayer(Player):
    """Console player.

    Keeps prompting until a legal move is entered.
    """

    def __init__(
        self,
        name: str = "Human",
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        super().__init__(name)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def get_action(self, state: GameState) -> Action:
        legal = state.possible_actions()
        if not legal:
            raise ValueError("No legal actions to choose from")

        while True:
            self.output_fn(MOVE_PROMPT)
            try:
                move = parse_move(self.input_fn())
            except IllegalMoveError as e:
                logger.debug(f"Rejected input: {e}")
                self.output_fn(INVALID_MOVE)
                continue

            if move in legal:
                return move
            self.output_fn(INVALID_MOVE)
