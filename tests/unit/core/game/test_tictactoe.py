"""Test tic-tac-toe rules."""

import numpy as np
import pytest

from mcts_games.core.game.state import IllegalMoveError
from mcts_games.core.game.tictactoe import EMPTY, O, X, TicTacToeState


class TestTicTacToeState:
    """Tests for TicTacToeState."""

    def test_initial_state(self, empty_board):
        assert empty_board.player() == X
        assert np.all(empty_board.board == EMPTY)
        assert not empty_board.is_terminal()
        assert empty_board.reward() == 0.0
        assert empty_board.winner is None

    def test_possible_actions_row_major(self, empty_board):
        actions = empty_board.possible_actions()
        assert actions == [(r, c) for r in range(3) for c in range(3)]

    def test_apply_returns_new_state(self, empty_board):
        """Applying a move must not touch the original board."""
        before = empty_board.board.copy()
        child = empty_board.apply((1, 1))

        assert child is not empty_board
        assert np.array_equal(empty_board.board, before)
        assert child.board[1, 1] == X
        assert child.player() == O
        assert (1, 1) not in child.possible_actions()
        assert len(child.possible_actions()) == 8

    def test_board_is_read_only(self, empty_board):
        with pytest.raises(ValueError):
            empty_board.board[0, 0] = X

    def test_constructor_copies_board(self):
        board = np.zeros((3, 3), dtype=np.int8)
        state = TicTacToeState(board=board)
        board[0, 0] = X
        assert state.board[0, 0] == EMPTY

    @pytest.mark.parametrize("cells", [
        "XXX OO. ...",  # row
        "XO. XO. X..",  # column
        "XO. OX. ..X",  # diagonal
        "O.X OX. X..",  # anti-diagonal
    ])
    def test_x_wins(self, cells):
        state = TicTacToeState.from_string(cells)
        assert state.winner == X
        assert state.is_terminal()
        assert state.reward() == 1.0

    def test_o_wins(self):
        state = TicTacToeState.from_string("XX. OOO X..", player=X)
        assert state.winner == O
        assert state.is_terminal()
        assert state.reward() == -1.0

    def test_draw(self, drawn_board):
        assert drawn_board.winner is None
        assert drawn_board.is_draw()
        assert drawn_board.is_terminal()
        assert drawn_board.reward() == 0.0
        assert drawn_board.possible_actions() == []

    def test_finished_game_has_no_actions(self, x_won_board):
        """Empty cells remain, but the game is over."""
        assert np.any(x_won_board.board == EMPTY)
        assert x_won_board.possible_actions() == []

    def test_player_inferred_from_counts(self):
        assert TicTacToeState.from_string("X.. ... ...").player() == O
        assert TicTacToeState.from_string("XO. ... ...").player() == X

    def test_equality_and_hash(self, empty_board):
        a = empty_board.apply((0, 0)).apply((1, 1))
        b = TicTacToeState.from_string("X.. .O. ...")
        assert a == b
        assert hash(a) == hash(b)
        assert a != empty_board
        assert len({a, b, empty_board}) == 2

    def test_render(self):
        state = TicTacToeState.from_string("XO. .X. ..O")
        assert state.render() == "X O .\n. X .\n. . O"
        assert str(state) == state.render()


class TestIllegalMoves:
    """apply() rejects moves that possible_actions() would never produce."""

    def test_occupied_cell(self, empty_board):
        state = empty_board.apply((0, 0))
        with pytest.raises(IllegalMoveError):
            state.apply((0, 0))

    @pytest.mark.parametrize("move", [(-1, 0), (3, 0), (0, 3), (5, 5)])
    def test_off_board(self, empty_board, move):
        with pytest.raises(IllegalMoveError):
            empty_board.apply(move)

    @pytest.mark.parametrize("move", [None, "a", (1,), (1, 2, 3), ("a", "b")])
    def test_malformed(self, empty_board, move):
        with pytest.raises(IllegalMoveError):
            empty_board.apply(move)

    def test_game_over(self, x_won_board):
        with pytest.raises(IllegalMoveError):
            x_won_board.apply((0, 2))

    def test_illegal_move_is_value_error(self, empty_board):
        with pytest.raises(ValueError):
            empty_board.apply((9, 9))


class TestConstruction:

    def test_bad_cell_values(self):
        with pytest.raises(ValueError):
            TicTacToeState(board=np.full((3, 3), 2))

    def test_bad_player(self):
        with pytest.raises(ValueError):
            TicTacToeState(player_to_move=0)

    def test_from_string_wrong_length(self):
        with pytest.raises(ValueError):
            TicTacToeState.from_string("XO")

    def test_from_string_bad_symbol(self):
        with pytest.raises(ValueError):
            TicTacToeState.from_string("XOZ ... ...")
