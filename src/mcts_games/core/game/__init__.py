"""Game states the search engine can play."""

from .state import Action, GameState, IllegalMoveError
from .tictactoe import TicTacToeState, EMPTY, X, O, player_symbol

__all__ = [
    "Action",
    "GameState",
    "IllegalMoveError",
    "TicTacToeState",
    "EMPTY",
    "X",
    "O",
    "player_symbol",
]
