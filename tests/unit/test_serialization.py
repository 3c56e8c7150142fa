"""Tests for JSON serialization of game events."""

import json

from warsim.cards.schema import Card, Rank, Suit
from warsim.simulation.deck import Deck
from warsim.simulation.players import Player
from warsim.simulation.serialization import (
    card_to_dict, game_result_to_dict, game_result_to_json, round_to_dict,
)
from warsim.simulation.war import WarGame, play_war_game


def test_card_to_dict_uses_enum_names() -> None:
    assert card_to_dict(Card(Rank.ACE, Suit.SPADES)) == {"rank": "ACE", "suit": "SPADES"}
    assert card_to_dict(None) is None


def test_round_with_war() -> None:
    player1 = Player("One", hand=[Card(r, Suit.CLUBS) for r in (Rank.SEVEN, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.KING)])
    player2 = Player("Two", hand=[Card(r, Suit.DIAMONDS) for r in (Rank.SEVEN, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE)])
    game = WarGame(player1, player2, deck=Deck.from_cards([]))

    data = round_to_dict(game.play_round())

    assert data["round"] == 1
    assert data["outcome"] == "player1"
    assert data["decided_by"] == "war"
    assert data["war_steps"] == [{
        "face_down": 3,
        "card1": {"rank": "KING", "suit": "CLUBS"},
        "card2": {"rank": "FIVE", "suit": "DIAMONDS"},
        "short_player": None,
    }]
    assert (data["score1"], data["score2"]) == (1, 0)


def test_game_result_roundtrips_through_json() -> None:
    result = play_war_game(seed=4)
    data = json.loads(game_result_to_json(result))

    assert data == game_result_to_dict(result)
    assert data["round_count"] == len(data["rounds"]) == result.round_count
    assert data["winner"] == result.winner.value


def test_game_result_without_rounds() -> None:
    data = game_result_to_dict(play_war_game(seed=4), include_rounds=False)
    assert "rounds" not in data
    assert data["player1"] == "Player 1"
