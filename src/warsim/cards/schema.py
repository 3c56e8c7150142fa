"""Card value types: ranks, suits and cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class Rank(Enum):
    """Playing card ranks, declared from lowest to highest."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def strength(self) -> int:
        """Numeric value, 2 (TWO) through 14 (ACE)."""
        return _RANK_ORDER.index(self) + 2

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.strength < other.strength

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.strength <= other.strength

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.strength > other.strength

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.strength >= other.strength


_RANK_ORDER = tuple(Rank)


class Suit(Enum):
    """Playing card suits. Order is used for deck generation only."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    Equality is structural so decks can be checked for duplicates. The
    ordering operators look at rank only: an ace of spades and an ace of
    hearts are neither lower nor higher than each other.
    """

    rank: Rank
    suit: Suit

    def ties(self, other: Card) -> bool:
        """True when both cards have the same rank."""
        return self.rank == other.rank

    def __lt__(self, other: Card) -> bool:
        return self.rank < other.rank

    def __le__(self, other: Card) -> bool:
        return self.rank <= other.rank

    def __gt__(self, other: Card) -> bool:
        return self.rank > other.rank

    def __ge__(self, other: Card) -> bool:
        return self.rank >= other.rank

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"


def highest_card(cards: Iterable[Card]) -> Optional[Card]:
    """Return the highest-ranked card, or None for an empty sequence.

    Among cards of equal rank the first one seen is returned.
    """
    best: Optional[Card] = None
    for card in cards:
        if best is None or card > best:
            best = card
    return best
