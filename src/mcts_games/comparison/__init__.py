"""Comparison: engine strength against baseline players.

Games are played in an arena and the outcomes tested for significance.
"""

from .arena import Arena, MatchResult, evaluate_player, summarize
from .statistical_tests import (
    binomial_win_test,
    welch_ttest,
    mann_whitney_u_test,
    compute_effect_size,
    statistical_significance_test,
)

__all__ = [
    "Arena",
    "MatchResult",
    "evaluate_player",
    "summarize",
    "binomial_win_test",
    "welch_ttest",
    "mann_whitney_u_test",
    "compute_effect_size",
    "statistical_significance_test",
]
