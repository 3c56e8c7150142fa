"""War card game engine.

Two players are dealt the whole deck alternately. Each round both reveal
their front card and the higher rank scores a point. Equal ranks start a
war: each player discards three cards face down and reveals a fourth,
repeating while the reveals keep tying. A player who holds fewer than four
cards when a war iteration starts forfeits that war to the opponent.
Player 1 is checked first, so when both are short Player 2 takes the point.

The game ends as soon as either hand is empty; the higher score wins.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from warsim.cards.schema import Card
from warsim.simulation.deck import Deck
from warsim.simulation.events import (
    DecidedBy,
    GameResult,
    Outcome,
    RoundResult,
    WarStep,
    Winner,
)
from warsim.simulation.players import Player, ai_player, human_player

logger = logging.getLogger(__name__)

WAR_FACE_DOWN = 3
WAR_CARDS_NEEDED = WAR_FACE_DOWN + 1

RoundCallback = Callable[[RoundResult], None]


class WarInvariantError(Exception):
    """A war reveal failed after the hand-size check passed."""


class WarGame:
    """Round engine for one game of War between two players."""

    def __init__(
        self,
        player1: Player,
        player2: Player,
        deck: Optional[Deck] = None,
        seed: Optional[int] = None,
        on_round: Optional[RoundCallback] = None,
    ) -> None:
        if player1 is player2:
            raise ValueError("A game needs two distinct players")

        self.player1 = player1
        self.player2 = player2
        self.deck = deck if deck is not None else Deck(seed=seed)
        self.on_round = on_round

        self.round_number = 0
        self.history: List[RoundResult] = []
        self._dealt = False

    def deal_cards(self) -> int:
        """Deal the whole deck alternately, starting with Player 1.

        Returns:
            Number of cards dealt
        """
        dealt = 0
        to_player1 = True
        while True:
            card = self.deck.draw()
            if card is None:
                break
            target = self.player1 if to_player1 else self.player2
            target.receive_card(card)
            to_player1 = not to_player1
            dealt += 1

        self._dealt = True
        logger.info(
            f"Dealt {dealt} cards: {self.player1.name} {self.player1.hand_size}, "
            f"{self.player2.name} {self.player2.hand_size}"
        )
        return dealt

    def is_game_over(self) -> bool:
        """Check if either hand has run out."""
        return not self.player1.has_cards() or not self.player2.has_cards()

    def winner(self) -> Winner:
        """Compare current scores."""
        if self.player1.score > self.player2.score:
            return Winner.PLAYER1_WINS
        if self.player2.score > self.player1.score:
            return Winner.PLAYER2_WINS
        return Winner.TIE

    def play_round(self) -> RoundResult:
        """Play one top-level round, including any war it triggers."""
        self.round_number += 1

        card1 = self.player1.play_card()
        card2 = self.player2.play_card() if card1 is not None else None

        if card1 is None or card2 is None:
            result = self._record(card1, card2, Outcome.ABORTED, None, [])
            logger.debug(f"Round {self.round_number} aborted: a hand is empty")
            return result

        if card1 > card2:
            self.player1.score += 1
            outcome, decided_by, steps = Outcome.PLAYER1, DecidedBy.RANK, []
        elif card2 > card1:
            self.player2.score += 1
            outcome, decided_by, steps = Outcome.PLAYER2, DecidedBy.RANK, []
        else:
            logger.debug(f"Round {self.round_number}: war on {card1.rank.name}")
            outcome, decided_by, steps = self._resolve_war()

        result = self._record(card1, card2, outcome, decided_by, steps)
        logger.debug(
            f"Round {self.round_number}: {card1} vs {card2} -> {outcome.value} "
            f"({decided_by.value}), score {result.score1}-{result.score2}"
        )
        return result

    def _resolve_war(self) -> Tuple[Outcome, DecidedBy, List[WarStep]]:
        """Run war iterations until a reveal differs or a player runs short."""
        steps: List[WarStep] = []

        while True:
            if self.player1.hand_size < WAR_CARDS_NEEDED:
                self.player2.score += 1
                steps.append(WarStep(face_down=0, short_player=1))
                return Outcome.PLAYER2, DecidedBy.EXHAUSTION, steps
            if self.player2.hand_size < WAR_CARDS_NEEDED:
                self.player1.score += 1
                steps.append(WarStep(face_down=0, short_player=2))
                return Outcome.PLAYER1, DecidedBy.EXHAUSTION, steps

            for _ in range(WAR_FACE_DOWN):
                self.player1.play_card()
            for _ in range(WAR_FACE_DOWN):
                self.player2.play_card()

            war_card1 = self.player1.play_card()
            war_card2 = self.player2.play_card()
            if war_card1 is None or war_card2 is None:
                raise WarInvariantError(
                    f"Round {self.round_number}: war reveal failed after hand-size check"
                )

            steps.append(WarStep(face_down=WAR_FACE_DOWN, card1=war_card1, card2=war_card2))

            if war_card1 > war_card2:
                self.player1.score += 1
                return Outcome.PLAYER1, DecidedBy.WAR, steps
            if war_card2 > war_card1:
                self.player2.score += 1
                return Outcome.PLAYER2, DecidedBy.WAR, steps

            logger.debug(f"Round {self.round_number}: war again on {war_card1.rank.name}")

    def _record(
        self,
        card1: Optional[Card],
        card2: Optional[Card],
        outcome: Outcome,
        decided_by: Optional[DecidedBy],
        steps: List[WarStep],
    ) -> RoundResult:
        result = RoundResult(
            round_number=self.round_number,
            card1=card1,
            card2=card2,
            outcome=outcome,
            decided_by=decided_by,
            war_steps=tuple(steps),
            score1=self.player1.score,
            score2=self.player2.score,
        )
        self.history.append(result)
        if self.on_round is not None:
            self.on_round(result)
        return result

    def result(self) -> GameResult:
        """Snapshot of the game so far as a GameResult."""
        return GameResult(
            winner=self.winner(),
            player1_name=self.player1.name,
            player2_name=self.player2.name,
            score1=self.player1.score,
            score2=self.player2.score,
            rounds=self.history,
        )

    def play(self) -> GameResult:
        """Deal (if not done yet) and play rounds until a hand is empty."""
        if not self._dealt:
            self.deal_cards()

        while not self.is_game_over():
            self.play_round()

        result = self.result()
        logger.info(
            f"Game over after {result.round_count} rounds: {result.winner.value} "
            f"({self.player1.name} {result.score1} - {self.player2.name} {result.score2})"
        )
        return result


def play_war_game(
    seed: int = 42,
    player1_name: str = "Player 1",
    player2_name: str = "Player 2",
    on_round: Optional[RoundCallback] = None,
) -> GameResult:
    """Play a complete War game with a seeded deck and return the result."""
    game = WarGame(
        human_player(player1_name),
        ai_player(player2_name),
        seed=seed,
        on_round=on_round,
    )
    return game.play()
