"""Console session wiring players, deck, engine and display together."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from warsim.simulation.deck import Deck
from warsim.simulation.events import GameResult, RoundResult
from warsim.simulation.players import Player, PlayerKind
from warsim.simulation.serialization import game_result_to_dict
from warsim.simulation.war import WarGame
from warsim.playtest.display import RoundRenderer, format_cards

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for a console game."""

    player1_name: str = "Player 1"
    player2_name: str = "Player 2"
    player1_kind: PlayerKind = PlayerKind.HUMAN
    player2_kind: PlayerKind = PlayerKind.AI
    seed: Optional[int] = None
    show_rounds: bool = True
    debug: bool = False
    results_path: Optional[Path] = None

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


class WarSession:
    """Runs one game of War and streams it as text."""

    def __init__(self, config: SessionConfig):
        self.config = config
        self.seed = config.seed
        self.player1 = Player(config.player1_name, kind=config.player1_kind)
        self.player2 = Player(config.player2_name, kind=config.player2_kind)
        self.renderer = RoundRenderer(config.player1_name, config.player2_name)

    def run(self, output_fn: Callable[[str], None] = print) -> GameResult:
        """Play the game to completion.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            GameResult with the final winner, scores and round history
        """
        output_fn("Card Game: War")
        output_fn("=================")
        output_fn(f"Seed: {self.seed} (use --seed {self.seed} to replay)")
        output_fn("")

        def show_round(result: RoundResult) -> None:
            if self.config.show_rounds:
                output_fn(self.renderer.render_round(result))
                output_fn("")

        game = WarGame(
            self.player1,
            self.player2,
            deck=Deck(seed=self.seed),
            on_round=show_round,
        )

        game.deal_cards()
        output_fn(self.renderer.render_deal(self.player1.hand_size, self.player2.hand_size))
        if self.config.debug:
            output_fn(f"{self.player1.name} hand: [{format_cards(self.player1.hand)}]")
            output_fn(f"{self.player2.name} hand: [{format_cards(self.player2.hand)}]")
        output_fn("")

        result = game.play()
        output_fn(self.renderer.render_game_over(result))

        if self.config.results_path is not None:
            self._save(result, self.config.results_path)

        return result

    def _save(self, result: GameResult, path: Path) -> None:
        """Append a one-line summary of the game to a JSONL file."""
        record = game_result_to_dict(result, include_rounds=False)
        record["seed"] = self.seed
        with open(path, "a") as f:
            f.write(json.dumps(record) + "\n")
        logger.info(f"Result saved to {path}")
