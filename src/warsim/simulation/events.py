"""Structured records of what happened during a game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from warsim.cards.schema import Card


class Outcome(Enum):
    """Result of a single round."""

    PLAYER1 = "player1"
    PLAYER2 = "player2"
    ABORTED = "aborted"  # a hand was empty before the round could be played


class DecidedBy(Enum):
    """How a round's point was awarded."""

    RANK = "rank"  # the opening cards differed
    WAR = "war"  # a war reveal differed
    EXHAUSTION = "exhaustion"  # a player could not fund a war iteration


class Winner(Enum):
    """Final game result."""

    PLAYER1_WINS = "Player1Wins"
    PLAYER2_WINS = "Player2Wins"
    TIE = "Tie"


@dataclass(frozen=True)
class WarStep:
    """One war iteration.

    When a player cannot fund the iteration, ``short_player`` names them
    (1 or 2), nothing is discarded and both revealed cards are None.
    """

    face_down: int
    card1: Optional[Card] = None
    card2: Optional[Card] = None
    short_player: Optional[int] = None

    @property
    def is_tie(self) -> bool:
        return (
            self.card1 is not None
            and self.card2 is not None
            and self.card1.ties(self.card2)
        )


@dataclass(frozen=True)
class RoundResult:
    """Everything a presentation layer needs about one top-level round."""

    round_number: int
    card1: Optional[Card]
    card2: Optional[Card]
    outcome: Outcome
    decided_by: Optional[DecidedBy]
    war_steps: tuple[WarStep, ...]
    score1: int
    score2: int

    @property
    def had_war(self) -> bool:
        return bool(self.war_steps)

    @property
    def cards_used(self) -> int:
        """Cards each player lost this round."""
        if self.outcome == Outcome.ABORTED:
            return 0
        used = 1
        for step in self.war_steps:
            if step.short_player is None:
                used += step.face_down + 1
        return used


@dataclass(frozen=True)
class GameResult:
    """Final outcome and full round history of a game."""

    winner: Winner
    player1_name: str
    player2_name: str
    score1: int
    score2: int
    rounds: tuple[RoundResult, ...]

    def __init__(
        self,
        winner: Winner,
        player1_name: str,
        player2_name: str,
        score1: int,
        score2: int,
        rounds: List[RoundResult],
    ) -> None:
        object.__setattr__(self, "winner", winner)
        object.__setattr__(self, "player1_name", player1_name)
        object.__setattr__(self, "player2_name", player2_name)
        object.__setattr__(self, "score1", score1)
        object.__setattr__(self, "score2", score2)
        object.__setattr__(self, "rounds", tuple(rounds))

    @property
    def round_count(self) -> int:
        return len(self.rounds)

    @property
    def war_count(self) -> int:
        """Number of rounds that went to war."""
        return sum(1 for r in self.rounds if r.had_war)

    @property
    def winner_name(self) -> Optional[str]:
        if self.winner == Winner.PLAYER1_WINS:
            return self.player1_name
        if self.winner == Winner.PLAYER2_WINS:
            return self.player2_name
        return None
