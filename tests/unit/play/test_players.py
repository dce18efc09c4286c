"""Test players."""

import pytest

from mcts_games.core.game.state import IllegalMoveError
from mcts_games.core.game.tictactoe import TicTacToeState
from mcts_games.mcts.search import MCTSConfig
from mcts_games.play.players import (
    INVALID_MOVE,
    MOVE_PROMPT,
    HumanPlayer,
    MCTSPlayer,
    MinimaxPlayer,
    RandomPlayer,
    parse_move,
)


def scripted(lines):
    """input() replacement returning the given lines in order."""
    it = iter(lines)
    return lambda: next(it)


class TestParseMove:

    @pytest.mark.parametrize("text,expected", [
        ("1 2", (1, 2)),
        ("1,2", (1, 2)),
        ("  0   0 ", (0, 0)),
        ("2, 1", (2, 1)),
    ])
    def test_valid(self, text, expected):
        assert parse_move(text) == expected

    @pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b", "3 0", "-1 0", "1.5 0"])
    def test_invalid(self, text):
        with pytest.raises(IllegalMoveError):
            parse_move(text)


class TestHumanPlayer:

    def test_retries_until_legal(self, x_wins_in_one):
        output = []
        player = HumanPlayer(
            input_fn=scripted(["foo", "0 0", "9 9", "2,2"]),
            output_fn=output.append,
        )

        assert player.get_action(x_wins_in_one) == (2, 2)
        assert output.count(MOVE_PROMPT) == 4
        assert output.count(INVALID_MOVE) == 3
        assert output[0] == MOVE_PROMPT

    def test_first_try(self, empty_board):
        output = []
        player = HumanPlayer(input_fn=scripted(["1 1"]), output_fn=output.append)

        assert player.get_action(empty_board) == (1, 1)
        assert output == [MOVE_PROMPT]

    def test_no_moves(self, drawn_board):
        player = HumanPlayer(input_fn=scripted([]), output_fn=lambda s: None)
        with pytest.raises(ValueError):
            player.get_action(drawn_board)


class TestRandomPlayer:

    def test_legal_and_reproducible(self, empty_board):
        a = RandomPlayer(seed=5)
        b = RandomPlayer(seed=5)

        moves_a = [a.get_action(empty_board) for _ in range(10)]
        moves_b = [b.get_action(empty_board) for _ in range(10)]

        assert moves_a == moves_b
        assert all(m in empty_board.possible_actions() for m in moves_a)

    def test_no_moves(self, x_won_board):
        with pytest.raises(ValueError):
            RandomPlayer(seed=0).get_action(x_won_board)


class TestMinimaxPlayer:

    def test_takes_win(self, x_wins_in_one, o_wins_in_one):
        player = MinimaxPlayer()
        assert player.get_action(x_wins_in_one) == (0, 2)
        assert player.get_action(o_wins_in_one) == (0, 2)

    def test_blocks(self):
        state = TicTacToeState.from_string("XX. O.. ...")
        assert MinimaxPlayer().get_action(state) == (0, 2)

    def test_empty_board_is_a_draw(self, empty_board):
        assert MinimaxPlayer().value(empty_board) == 0.0

    def test_value_of_finished_game(self, x_won_board):
        # O to move, X has won
        assert MinimaxPlayer().value(x_won_board) == -1.0


class TestMCTSPlayer:

    def test_name_and_config(self):
        player = MCTSPlayer(iterations=50, config=MCTSConfig(seed=1))
        assert player.name == "MCTS-50"
        assert player.config.seed == 1
        assert "MCTS-50" in repr(player)

    def test_invalid_iterations(self):
        with pytest.raises(ValueError):
            MCTSPlayer(iterations=0)

    def test_legal_move(self, empty_board):
        player = MCTSPlayer(iterations=100, config=MCTSConfig(seed=0))
        assert player.get_action(empty_board) in empty_board.possible_actions()

    def test_counts_searches(self, empty_board):
        player = MCTSPlayer(iterations=20, config=MCTSConfig(seed=0))
        player.get_action(empty_board)
        player.get_action(empty_board.apply((1, 1)))

        assert player.search.num_searches == 2
        assert player.search.num_iterations == 40

    def test_no_moves(self, drawn_board):
        with pytest.raises(ValueError):
            MCTSPlayer(iterations=10).get_action(drawn_board)
