"""Run many independent War games and summarise the outcomes."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List

from warsim.simulation.events import GameResult, Winner
from warsim.simulation.war import play_war_game

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchSummary:
    """Aggregate statistics over a batch of games."""

    games: int
    player1_wins: int
    player2_wins: int
    ties: int
    mean_rounds: float
    mean_wars: float

    @property
    def player1_win_rate(self) -> float:
        return self.player1_wins / self.games if self.games else 0.0


def summarize(results: List[GameResult]) -> BatchSummary:
    """Aggregate a list of game results."""
    games = len(results)
    if games == 0:
        return BatchSummary(0, 0, 0, 0, 0.0, 0.0)

    return BatchSummary(
        games=games,
        player1_wins=sum(1 for r in results if r.winner == Winner.PLAYER1_WINS),
        player2_wins=sum(1 for r in results if r.winner == Winner.PLAYER2_WINS),
        ties=sum(1 for r in results if r.winner == Winner.TIE),
        mean_rounds=sum(r.round_count for r in results) / games,
        mean_wars=sum(r.war_count for r in results) / games,
    )


def simulate_games(num_games: int, seed: int = 42) -> BatchSummary:
    """Play num_games seeded games.

    Each game gets its own seed drawn from a master RNG, so the whole batch
    is reproducible from a single seed.
    """
    if num_games <= 0:
        raise ValueError(f"num_games must be positive, got {num_games}")

    master = random.Random(seed)
    results: List[GameResult] = []
    for i in range(num_games):
        game_seed = master.randint(0, 2**32 - 1)
        results.append(play_war_game(seed=game_seed))
        if (i + 1) % 1000 == 0:
            logger.info(f"  Simulated {i + 1}/{num_games} games")

    summary = summarize(results)
    logger.info(
        f"Batch complete: {summary.player1_wins} / {summary.player2_wins} / "
        f"{summary.ties} (P1 / P2 / tie) over {summary.games} games"
    )
    return summary
