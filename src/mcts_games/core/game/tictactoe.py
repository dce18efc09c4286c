"""Tic-tac-toe as a GameState.

Board is a read-only 3x3 int8 array:
    EMPTY = 0, X = 1, O = -1

X always moves first, so reward() is +1 for an X win and -1 for an O win.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Optional, Tuple

import numpy as np

from .state import GameState, IllegalMoveError

EMPTY = 0
X = 1
O = -1

BOARD_SIZE = 3

SYMBOLS = {X: "X", O: "O", EMPTY: "."}

# Flat indices of every row, column and diagonal.
LINES = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
], dtype=np.intp)

Move = Tuple[int, int]


def _empty_board() -> np.ndarray:
    return np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)


@dataclass(frozen=True, eq=False)
class TicTacToeState(GameState):
    """Tic-tac-toe position.

    Attributes:
        board: 3x3 array of EMPTY / X / O (copied and frozen on creation)
        player_to_move: Side to move (X or O)
    """
    board: np.ndarray = field(default_factory=_empty_board)
    player_to_move: int = X

    def __post_init__(self):
        board = np.array(self.board, dtype=np.int8).reshape(BOARD_SIZE, BOARD_SIZE)
        if board.min() < O or board.max() > X:
            raise ValueError(f"Board holds values other than {EMPTY}, {X}, {O}")
        if self.player_to_move not in (X, O):
            raise ValueError(f"player_to_move must be X ({X}) or O ({O}), got {self.player_to_move}")
        board.flags.writeable = False
        object.__setattr__(self, "board", board)

    @classmethod
    def initial(cls) -> "TicTacToeState":
        """Empty board, X to move."""
        return cls()

    @classmethod
    def from_string(cls, text: str, player: Optional[int] = None) -> "TicTacToeState":
        """Build a state from 9 cell symbols, e.g. "XO. .X. ..O".

        Whitespace is ignored. When player is omitted it is inferred from the
        piece counts (X moves when counts are equal).
        """
        symbols = [ch for ch in text if not ch.isspace()]
        if len(symbols) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Expected 9 cells, got {len(symbols)}")

        lookup = {"X": X, "O": O, ".": EMPTY}
        try:
            cells = [lookup[ch.upper()] for ch in symbols]
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol {e.args[0]!r}") from None

        if player is None:
            player = X if cells.count(X) == cells.count(O) else O
        return cls(board=np.array(cells, dtype=np.int8), player_to_move=player)

    @cached_property
    def winner(self) -> Optional[int]:
        """X or O if that side owns a full line, else None."""
        sums = self.board.ravel()[LINES].sum(axis=1)
        if (sums == 3 * X).any():
            return X
        if (sums == 3 * O).any():
            return O
        return None

    def is_full(self) -> bool:
        return not (self.board == EMPTY).any()

    def is_draw(self) -> bool:
        return self.winner is None and self.is_full()

    # GameState contract

    def possible_actions(self) -> List[Move]:
        """Empty cells in row-major order. Finished games have no moves."""
        if self.is_terminal():
            return []
        return [(int(r), int(c)) for r, c in np.argwhere(self.board == EMPTY)]

    def apply(self, action: Move) -> "TicTacToeState":
        row, col = self._validate(action)
        board = self.board.copy()
        board[row, col] = self.player_to_move
        return TicTacToeState(board=board, player_to_move=-self.player_to_move)

    def is_terminal(self) -> bool:
        return self.winner is not None or self.is_full()

    def reward(self) -> float:
        if self.winner == X:
            return 1.0
        if self.winner == O:
            return -1.0
        return 0.0

    def player(self) -> int:
        return self.player_to_move

    def _validate(self, action: Move) -> Move:
        try:
            row, col = action
            row, col = int(row), int(col)
        except (TypeError, ValueError):
            raise IllegalMoveError(f"Move must be a (row, col) pair, got {action!r}") from None

        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IllegalMoveError(f"Move {(row, col)} is off the board")
        if self.is_terminal():
            raise IllegalMoveError("Game is already over")
        if self.board[row, col] != EMPTY:
            raise IllegalMoveError(f"Cell {(row, col)} is already taken")
        return row, col

    # Display

    def render(self) -> str:
        """Board as text, one row per line: "X O .\\n. X .\\n. . O"."""
        return "\n".join(
            " ".join(SYMBOLS[int(v)] for v in row) for row in self.board
        )

    def describe(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        cells = "".join(SYMBOLS[int(v)] for v in self.board.ravel())
        return f"TicTacToeState({cells!r}, to_move={SYMBOLS[self.player_to_move]})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, TicTacToeState):
            return NotImplemented
        return (self.player_to_move == other.player_to_move
                and np.array_equal(self.board, other.board))

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), self.player_to_move))


def player_symbol(player: int) -> str:
    """'X' or 'O'."""
    return SYMBOLS[player]
