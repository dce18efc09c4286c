"""Arena: play players against each other and record the results."""

import logging
import time
from dataclasses import dataclass
from typing import Dict, List

from tqdm import tqdm

from ..core.game.tictactoe import X, O
from ..play.console import play_game
from ..play.players import Player
from .statistical_tests import binomial_win_test

logger = logging.getLogger(__name__)


@dataclass
class MatchResult:
    """Result of one game.

    Attributes:
        player1_name: Name of player 1
        player2_name: Name of player 2
        player1_side: X or O, the side player 1 played
        winner: 1 player1 won, -1 player2 won, 0 draw
        num_moves: Moves played
        duration: Wall-clock seconds
    """
    player1_name: str
    player2_name: str
    player1_side: int
    winner: int
    num_moves: int
    duration: float

    @property
    def player1_score(self) -> int:
        """+1 / 0 / -1 from player 1's point of view."""
        return self.winner

    def __str__(self) -> str:
        if self.winner == 1:
            result = f"{self.player1_name} wins"
        elif self.winner == -1:
            result = f"{self.player2_name} wins"
        else:
            result = "Draw"

        side = "X" if self.player1_side == X else "O"
        return (
            f"{result} | "
            f"{self.player1_name} played {side} | "
            f"Moves: {self.num_moves} | "
            f"Time: {self.duration:.2f}s"
        )


class Arena:
    """Runs games between two players."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def play_game(
        self,
        player1: Player,
        player2: Player,
        starting_player: int = 1,
    ) -> MatchResult:
        """Play one game.

        Args:
            player1: First player
            player2: Second player
            starting_player: 1 if player1 plays X (moves first), -1 otherwise

        Returns:
            MatchResult from player 1's point of view
        """
        if starting_player not in (1, -1):
            raise ValueError(f"starting_player must be 1 or -1, got {starting_player}")

        player1_side = X if starting_player == 1 else O
        if player1_side == X:
            x_player, o_player = player1, player2
        else:
            x_player, o_player = player2, player1

        start_time = time.time()
        record = play_game(x_player, o_player)
        duration = time.time() - start_time

        # reward() is from X's point of view
        outcome = int(record.final_state.reward())
        winner = outcome if player1_side == X else -outcome

        result = MatchResult(
            player1_name=player1.name,
            player2_name=player2.name,
            player1_side=player1_side,
            winner=winner,
            num_moves=record.num_moves,
            duration=duration,
        )

        if self.verbose:
            logger.info(f"{result} | moves={record.moves}")

        return result

    def play_matches(
        self,
        player1: Player,
        player2: Player,
        num_games: int = 10,
        alternate_colors: bool = True,
    ) -> List[MatchResult]:
        """Play several games.

        Args:
            player1: First player
            player2: Second player
            num_games: Number of games
            alternate_colors: Swap who plays X every game

        Returns:
            List of results from player 1's point of view
        """
        results = []

        for game_idx in tqdm(range(num_games), desc=f"{player1.name} vs {player2.name}",
                             disable=not self.verbose):
            if alternate_colors:
                starting_player = 1 if game_idx % 2 == 0 else -1
            else:
                starting_player = 1

            results.append(self.play_game(player1, player2, starting_player))

        if self.verbose:
            self._log_summary(results, player1.name, player2.name)

        return results

    def _log_summary(
        self,
        results: List[MatchResult],
        player1_name: str,
        player2_name: str,
    ):
        """Log a summary of the match results."""
        summary = summarize(results)

        logger.info("=" * 60)
        logger.info(f"Match Summary: {player1_name} vs {player2_name}")
        logger.info("=" * 60)
        logger.info(f"Total Games: {summary['games']}")
        logger.info(f"{player1_name}: {summary['wins']} wins ({summary['win_rate'] * 100:.1f}%)")
        logger.info(f"{player2_name}: {summary['losses']} wins ({summary['loss_rate'] * 100:.1f}%)")
        logger.info(f"Draws: {summary['draws']}")
        logger.info(f"Average Moves: {summary['avg_moves']:.1f}")
        logger.info(f"Average Duration: {summary['avg_duration']:.2f}s")


def summarize(results: List[MatchResult]) -> Dict:
    """Win / draw / loss counts and averages from player 1's point of view."""
    total = len(results)
    wins = sum(1 for r in results if r.winner == 1)
    losses = sum(1 for r in results if r.winner == -1)
    draws = total - wins - losses

    return {
        "games": total,
        "wins": wins,
        "losses": losses,
        "draws": draws,
        "win_rate": wins / total if total else 0.0,
        "loss_rate": losses / total if total else 0.0,
        "draw_rate": draws / total if total else 0.0,
        "avg_moves": sum(r.num_moves for r in results) / total if total else 0.0,
        "avg_duration": sum(r.duration for r in results) / total if total else 0.0,
    }


def evaluate_player(
    player: Player,
    opponent: Player,
    num_games: int = 10,
    verbose: bool = False,
) -> Dict:
    """Evaluate player against opponent.

    Returns:
        dict with win/draw/loss rates, per-game scores, the binomial
        test on decisive games and the raw results
    """
    arena = Arena(verbose=verbose)
    results = arena.play_matches(player, opponent, num_games=num_games)
    summary = summarize(results)

    win_fraction, p_value, significant = binomial_win_test(
        summary["wins"], summary["wins"] + summary["losses"]
    )

    return {
        **summary,
        "scores": [r.player1_score for r in results],
        "decisive_win_fraction": win_fraction,
        "p_value": p_value,
        "significant": significant,
        "results": results,
    }
