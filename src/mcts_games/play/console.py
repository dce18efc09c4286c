"""Console game loop.

Engine and human alternate until the game ends. The board is printed
before every move and once more at the end, followed by the result.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..core.game.state import Action
from ..core.game.tictactoe import O, X, TicTacToeState, player_symbol
from ..mcts.search import MCTSConfig
from .players import HumanPlayer, MCTSPlayer, Player

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """Finished game: final position and the moves that led there."""
    final_state: TicTacToeState
    moves: List[Action] = field(default_factory=list)

    @property
    def winner(self) -> Optional[int]:
        return self.final_state.winner

    @property
    def num_moves(self) -> int:
        return len(self.moves)


def result_message(state: TicTacToeState) -> str:
    """Announcement for a finished game."""
    result = state.reward()
    if result > 0:
        return "Player X wins!"
    if result < 0:
        return "Player O wins!"
    return "It's a draw!"


def play_game(
    x_player: Player,
    o_player: Player,
    state: Optional[TicTacToeState] = None,
    output_fn: Optional[Callable[[str], None]] = None,
) -> GameRecord:
    """Play one game to the end.

    Args:
        x_player: Player for X
        o_player: Player for O
        state: Starting position (empty board if omitted)
        output_fn: Where to print boards and the result (silent if None)

    Returns:
        GameRecord with the final state and move list
    """
    state = state if state is not None else TicTacToeState.initial()
    players = {X: x_player, O: o_player}
    moves = []

    x_player.reset()
    o_player.reset()

    while not state.is_terminal():
        if output_fn is not None:
            output_fn(state.render() + "\n")

        player = players[state.player()]
        action = player.get_action(state)
        logger.debug(f"{player.name} ({player_symbol(state.player())}) plays {action}")

        state = state.apply(action)
        moves.append(action)

    if output_fn is not None:
        output_fn(state.render() + "\n")
        output_fn(result_message(state))

    return GameRecord(final_state=state, moves=moves)


def run_console_game(
    iterations: int = 1000,
    human_side: int = O,
    config: Optional[MCTSConfig] = None,
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
) -> GameRecord:
    """Human against the engine on the console.

    The engine plays X and the human O unless human_side says otherwise.
    """
    if human_side not in (X, O):
        raise ValueError(f"human_side must be X ({X}) or O ({O}), got {human_side}")

    human = HumanPlayer(input_fn=input_fn, output_fn=output_fn)
    engine = MCTSPlayer(iterations=iterations, config=config)

    if human_side == X:
        return play_game(human, engine, output_fn=output_fn)
    return play_game(engine, human, output_fn=output_fn)
