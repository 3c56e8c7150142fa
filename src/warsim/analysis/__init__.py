"""Statistical analysis tools."""

from warsim.analysis.shuffle_bias import (
    ShuffleBiasReport,
    analyze_shuffle,
    position_counts,
)

__all__ = [
    "ShuffleBiasReport",
    "analyze_shuffle",
    "position_counts",
]
