"""Unit tests for UCT selection."""

import math

import pytest

from mcts_games.mcts.node import SearchNode
from mcts_games.mcts.ucb import (
    select_child,
    select_most_visited,
    ucb_score,
    ucb_select,
)


def make_children(state, stats):
    """Root with one child per (visits, total_reward) pair."""
    root = SearchNode.root(state)
    root.visit_count = sum(v for v, _ in stats) or 1
    for i, (visits, total) in enumerate(stats):
        child = SearchNode(state=state, action=i, visit_count=visits, total_reward=total)
        root.add_child(child)
    return root


class TestUCBScore:

    def test_unvisited_is_infinite(self, empty_board):
        root = make_children(empty_board, [(0, 0.0)])
        assert ucb_score(root.children[0], root) == float('inf')

    def test_formula(self, empty_board):
        root = make_children(empty_board, [(4, 2.0), (6, 0.0)])
        child = root.children[0]

        expected = 2.0 / 4 + 1.41 * math.sqrt(math.log(10) / 4)
        assert ucb_score(child, root) == pytest.approx(expected)

    def test_exploration_constant(self, empty_board):
        root = make_children(empty_board, [(4, 2.0), (6, 0.0)])
        child = root.children[0]

        assert ucb_score(child, root, c=0.0) == pytest.approx(0.5)
        assert ucb_score(child, root, c=2.0) > ucb_score(child, root, c=1.0)

    def test_single_parent_visit(self, empty_board):
        """ln(1) = 0: score is the plain average."""
        root = make_children(empty_board, [(1, -1.0)])
        assert ucb_score(root.children[0], root) == pytest.approx(-1.0)


class TestSelection:

    def test_select_child_prefers_unvisited(self, empty_board):
        root = make_children(empty_board, [(50, 50.0), (0, 0.0)])
        assert select_child(root) is root.children[1]

    def test_select_child_ties_go_to_first(self, empty_board):
        root = make_children(empty_board, [(3, 1.0), (3, 1.0), (3, 1.0)])
        assert select_child(root) is root.children[0]

        root = make_children(empty_board, [(0, 0.0), (0, 0.0)])
        assert select_child(root) is root.children[0]

    def test_select_child_exploits(self, empty_board):
        root = make_children(empty_board, [(10, -5.0), (10, 5.0)])
        assert select_child(root) is root.children[1]

    def test_select_child_without_children(self, empty_board):
        with pytest.raises(ValueError):
            select_child(SearchNode.root(empty_board))

    def test_ucb_select_on_leaf_returns_leaf(self, empty_board):
        node = SearchNode.root(empty_board)
        assert ucb_select(node) is node

    def test_ucb_select_descends_to_leaf(self, empty_board):
        root = SearchNode.root(empty_board)
        root.visit_count = 1
        first = root.expand()[0]
        first.visit_count = 1
        grandchildren = first.expand()

        # Unvisited siblings of `first` win over descending into it
        assert ucb_select(root) is root.children[1]

        for child in root.children[1:]:
            child.visit_count = 1
            child.total_reward = -1.0
        root.visit_count = 9
        assert ucb_select(root) is grandchildren[0]


class TestMostVisited:

    def test_most_visited(self, empty_board):
        root = make_children(empty_board, [(3, 3.0), (7, -7.0), (5, 5.0)])
        assert select_most_visited(root) is root.children[1]

    def test_ties_go_to_first(self, empty_board):
        root = make_children(empty_board, [(5, 0.0), (5, 0.0)])
        assert select_most_visited(root) is root.children[0]

    def test_no_children(self, empty_board):
        assert select_most_visited(SearchNode.root(empty_board)) is None
