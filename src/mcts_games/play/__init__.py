"""Players and the console game loop."""

from .players import (
    Player,
    MCTSPlayer,
    RandomPlayer,
    MinimaxPlayer,
    HumanPlayer,
    parse_move,
)
from .console import GameRecord, play_game, result_message, run_console_game

__all__ = [
    "Player",
    "MCTSPlayer",
    "RandomPlayer",
    "MinimaxPlayer",
    "HumanPlayer",
    "parse_move",
    "GameRecord",
    "play_game",
    "result_message",
    "run_console_game",
]
