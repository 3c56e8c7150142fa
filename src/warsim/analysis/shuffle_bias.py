"""Statistical checks that deck shuffling has no positional bias."""

from __future__ import annotations

import random
from dataclasses import dataclass

import numpy as np
from scipy import stats

from warsim.simulation.deck import DECK_SIZE, Deck, generate_full_deck


@dataclass
class ShuffleBiasReport:
    """Result of a positional uniformity test over repeated shuffles."""

    trials: int
    position_counts: np.ndarray  # [card index in generation order, position after shuffle]
    chi_square: float
    p_value: float
    mean_fixed_points: float  # cards left at their generation position, per shuffle

    def is_uniform(self, alpha: float = 0.001) -> bool:
        """True when uniformity cannot be rejected at the given level."""
        return self.p_value >= alpha


def position_counts(trials: int, seed: int = 0) -> np.ndarray:
    """Count how often each card lands in each deck position."""
    index_of = {card: i for i, card in enumerate(generate_full_deck())}
    counts = np.zeros((DECK_SIZE, DECK_SIZE), dtype=np.int64)

    rng = random.Random(seed)
    for _ in range(trials):
        deck = Deck(rng=rng)
        for position, card in enumerate(deck.cards):
            counts[index_of[card], position] += 1
    return counts


def analyze_shuffle(trials: int = 2000, seed: int = 0) -> ShuffleBiasReport:
    """Chi-square test of the card/position matrix against a uniform shuffle.

    A permutation matrix has fixed row and column sums, so the statistic has
    (n - 1)^2 degrees of freedom.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")

    counts = position_counts(trials, seed)
    expected = trials / DECK_SIZE
    chi_square = float(((counts - expected) ** 2 / expected).sum())
    dof = (DECK_SIZE - 1) ** 2
    p_value = float(stats.chi2.sf(chi_square, dof))
    mean_fixed_points = float(np.trace(counts)) / trials

    return ShuffleBiasReport(
        trials=trials,
        position_counts=counts,
        chi_square=chi_square,
        p_value=p_value,
        mean_fixed_points=mean_fixed_points,
    )
