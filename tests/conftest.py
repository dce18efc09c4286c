"""Pytest fixtures for testing."""

import sys
from pathlib import Path

import numpy as np
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcts_games.core.game.state import GameState, IllegalMoveError
from mcts_games.core.game.tictactoe import TicTacToeState


class NimState(GameState):
    """Take 1 or 2 stones; whoever takes the last stone wins.

    First player is +1. Small enough to reason about by hand.
    """

    def __init__(self, stones: int, to_move: int = 1):
        self.stones = stones
        self.to_move = to_move

    def possible_actions(self):
        return [n for n in (1, 2) if n <= self.stones]

    def apply(self, action):
        if action not in self.possible_actions():
            raise IllegalMoveError(f"Cannot take {action} from {self.stones}")
        return NimState(self.stones - action, -self.to_move)

    def is_terminal(self):
        return self.stones == 0

    def reward(self):
        # The player who just moved took the last stone
        if self.stones == 0:
            return float(-self.to_move)
        return 0.0

    def player(self):
        return self.to_move


@pytest.fixture
def seed():
    """Set random seed for reproducibility."""
    seed_value = 42
    np.random.seed(seed_value)
    return seed_value


@pytest.fixture
def rng(seed):
    return np.random.default_rng(seed)


@pytest.fixture
def empty_board():
    """Empty board, X to move."""
    return TicTacToeState.initial()


@pytest.fixture
def o_wins_in_one():
    """O to move, O completes the top row at (0, 2)."""
    return TicTacToeState.from_string("OO. XX. X..")


@pytest.fixture
def x_wins_in_one():
    """X to move, X completes the top row at (0, 2)."""
    return TicTacToeState.from_string("XX. OO. ...")


@pytest.fixture
def x_won_board():
    """Finished game, X owns the main diagonal."""
    return TicTacToeState.from_string("XO. OX. ..X")


@pytest.fixture
def drawn_board():
    """Full board, nobody has a line."""
    return TicTacToeState.from_string("XOX XOO OXX")


@pytest.fixture
def nim():
    """Factory for Nim positions."""
    return NimState
