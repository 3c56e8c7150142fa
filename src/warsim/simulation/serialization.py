"""JSON serialization for game events."""

import json
from typing import Any, Dict, Optional

from warsim.cards.schema import Card
from warsim.simulation.events import GameResult, RoundResult, WarStep


def card_to_dict(card: Optional[Card]) -> Optional[Dict[str, str]]:
    """Serialize a card using enum names (e.g. "ACE", "SPADES")."""
    if card is None:
        return None
    return {"rank": card.rank.name, "suit": card.suit.name}


def _war_step_to_dict(step: WarStep) -> Dict[str, Any]:
    return {
        "face_down": step.face_down,
        "card1": card_to_dict(step.card1),
        "card2": card_to_dict(step.card2),
        "short_player": step.short_player,
    }


def round_to_dict(result: RoundResult) -> Dict[str, Any]:
    """Convert a RoundResult to a JSON-serializable dict."""
    return {
        "round": result.round_number,
        "card1": card_to_dict(result.card1),
        "card2": card_to_dict(result.card2),
        "outcome": result.outcome.value,
        "decided_by": result.decided_by.value if result.decided_by else None,
        "war_steps": [_war_step_to_dict(s) for s in result.war_steps],
        "score1": result.score1,
        "score2": result.score2,
    }


def game_result_to_dict(result: GameResult, include_rounds: bool = True) -> Dict[str, Any]:
    """Convert a GameResult to a JSON-serializable dict."""
    data: Dict[str, Any] = {
        "winner": result.winner.value,
        "player1": result.player1_name,
        "player2": result.player2_name,
        "score1": result.score1,
        "score2": result.score2,
        "round_count": result.round_count,
        "war_count": result.war_count,
    }
    if include_rounds:
        data["rounds"] = [round_to_dict(r) for r in result.rounds]
    return data


def game_result_to_json(result: GameResult, indent: int = 2) -> str:
    """Serialize GameResult to JSON string."""
    return json.dumps(game_result_to_dict(result), indent=indent)
