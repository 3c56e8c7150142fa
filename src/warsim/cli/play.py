"""CLI command for playing a game of War in the terminal."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from warsim.playtest.session import SessionConfig, WarSession
from warsim.simulation.players import PlayerKind


KIND_CHOICES = click.Choice([k.value for k in PlayerKind])


@click.command()
@click.option("--player1", default="Player 1", show_default=True, help="Name of the first player")
@click.option("--player2", default="Player 2", show_default=True, help="Name of the second player")
@click.option("--player1-kind", type=KIND_CHOICES, default="human", show_default=True)
@click.option("--player2-kind", type=KIND_CHOICES, default="ai", show_default=True)
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--quiet", is_flag=True, help="Only show the final result")
@click.option("--debug", is_flag=True, help="Show both hands after dealing")
@click.option(
    "--results",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append a JSON line with the result to this file",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    player1: str,
    player2: str,
    player1_kind: str,
    player2_kind: str,
    seed: int | None,
    quiet: bool,
    debug: bool,
    results: str | None,
    verbose: bool,
):
    """Play a game of War between two players."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    if player1 == player2:
        raise click.BadParameter("players need different names", param_hint="--player2")

    config = SessionConfig(
        player1_name=player1,
        player2_name=player2,
        player1_kind=PlayerKind(player1_kind),
        player2_kind=PlayerKind(player2_kind),
        seed=seed,
        show_rounds=not quiet,
        debug=debug,
        results_path=Path(results) if results else None,
    )

    session = WarSession(config)
    session.run(output_fn=click.echo)


if __name__ == "__main__":
    main()
