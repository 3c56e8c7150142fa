"""Terminal display for rounds and game results."""

from __future__ import annotations

from typing import Iterable, Optional

from warsim.cards.schema import Card
from warsim.simulation.events import DecidedBy, GameResult, Outcome, RoundResult, Winner


# Unicode card symbols
SUIT_SYMBOLS = {"H": "♥", "D": "♦", "C": "♣", "S": "♠"}


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    suit_symbol = SUIT_SYMBOLS.get(card.suit.value, card.suit.value)
    return f"{card.rank.value}{suit_symbol}"


def format_cards(cards: Iterable[Card]) -> str:
    """Comma-separated card list."""
    return ", ".join(format_card(c) for c in cards)


class RoundRenderer:
    """Renders game events as text from both players' names."""

    def __init__(self, player1_name: str, player2_name: str) -> None:
        self.names = {1: player1_name, 2: player2_name}

    def _name_for(self, outcome: Outcome) -> Optional[str]:
        if outcome == Outcome.PLAYER1:
            return self.names[1]
        if outcome == Outcome.PLAYER2:
            return self.names[2]
        return None

    def render_deal(self, hand_size1: int, hand_size2: int) -> str:
        return "\n".join([
            "Dealing cards...",
            f"{self.names[1]} received {hand_size1} cards",
            f"{self.names[2]} received {hand_size2} cards",
        ])

    def render_score(self, score1: int, score2: int) -> str:
        return f"Score: {self.names[1]} {score1} - {self.names[2]} {score2}"

    def render_round(self, result: RoundResult) -> str:
        """Render one round, including every war iteration."""
        lines: list[str] = [f"--- Round {result.round_number} ---"]

        if result.outcome == Outcome.ABORTED:
            lines.append("(no cards left to play)")
            return "\n".join(lines)

        assert result.card1 is not None and result.card2 is not None
        lines.append(f"{self.names[1]} plays: {format_card(result.card1)}")
        lines.append(f"{self.names[2]} plays: {format_card(result.card2)}")

        winner = self._name_for(result.outcome)
        if result.decided_by == DecidedBy.RANK:
            lines.append(f"{winner} wins this round!")
        else:
            lines.append(f"War! Both played {result.card1.rank.name.title()}!")
            lines.append("Each player plays 3 cards face down...")
            for step in result.war_steps:
                if step.short_player is not None:
                    short = self.names[step.short_player]
                    lines.append(
                        f"{short} doesn't have enough cards for war. {winner} wins the war!"
                    )
                    continue
                assert step.card1 is not None and step.card2 is not None
                lines.append(f"{self.names[1]} plays: {format_card(step.card1)}")
                lines.append(f"{self.names[2]} plays: {format_card(step.card2)}")
                if step.is_tie:
                    lines.append("War again!")
                else:
                    lines.append(f"{winner} wins the war!")

        lines.append(self.render_score(result.score1, result.score2))
        return "\n".join(lines)

    def render_game_over(self, result: GameResult) -> str:
        lines = ["=== GAME OVER ==="]
        if result.winner == Winner.PLAYER1_WINS:
            lines.append(f"Winner: {result.player1_name} with {result.score1} points!")
        elif result.winner == Winner.PLAYER2_WINS:
            lines.append(f"Winner: {result.player2_name} with {result.score2} points!")
        else:
            lines.append(f"It's a tie with {result.score1} points each!")
        lines.append(
            f"Final score: {result.player1_name} {result.score1} - "
            f"{result.player2_name} {result.score2}"
        )
        return "\n".join(lines)
