"""CLI command for batch simulation of War games."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import asdict

import click

from warsim.analysis.shuffle_bias import analyze_shuffle
from warsim.simulation.batch import simulate_games


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    # Per-round engine logs are far too noisy for batches
    logging.getLogger("warsim.simulation.war").setLevel(logging.WARNING)


@click.command()
@click.option("-n", "--games", type=int, default=1000, show_default=True, help="Number of games")
@click.option("--seed", type=int, default=42, show_default=True, help="Master random seed")
@click.option("--check-shuffle", is_flag=True, help="Also run the shuffle uniformity test")
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(games: int, seed: int, check_shuffle: bool, as_json: bool, verbose: bool):
    """Simulate many games of War and summarise the outcomes."""
    setup_logging(verbose)

    if games <= 0:
        raise click.BadParameter("must be positive", param_hint="--games")

    summary = simulate_games(games, seed=seed)
    report = analyze_shuffle(seed=seed) if check_shuffle else None

    if as_json:
        data = asdict(summary)
        if report is not None:
            data["shuffle"] = {
                "trials": report.trials,
                "chi_square": report.chi_square,
                "p_value": report.p_value,
                "mean_fixed_points": report.mean_fixed_points,
            }
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(f"Games:         {summary.games}")
    click.echo(f"Player 1 wins: {summary.player1_wins} ({summary.player1_win_rate:.1%})")
    click.echo(f"Player 2 wins: {summary.player2_wins}")
    click.echo(f"Ties:          {summary.ties}")
    click.echo(f"Mean rounds:   {summary.mean_rounds:.2f}")
    click.echo(f"Mean wars:     {summary.mean_wars:.2f}")

    if report is not None:
        verdict = "uniform" if report.is_uniform() else "BIASED"
        click.echo("")
        click.echo(f"Shuffle check over {report.trials} decks: {verdict}")
        click.echo(f"  chi-square {report.chi_square:.1f}, p = {report.p_value:.4f}")
        click.echo(f"  mean fixed points {report.mean_fixed_points:.3f} (expected 1.0)")


if __name__ == "__main__":
    main()
