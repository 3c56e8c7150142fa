"""Property-based tests for the War engine."""

from hypothesis import given, settings, strategies as st
from warsim.simulation.deck import Deck
from warsim.simulation.events import Outcome, Winner
from warsim.simulation.players import Player
from warsim.simulation.war import WarGame, play_war_game


@given(seed=st.integers(min_value=0, max_value=10000))
def test_determinism_property(seed: int) -> None:
    """Property: Same seed always produces the same game."""
    result1 = play_war_game(seed=seed)
    result2 = play_war_game(seed=seed)

    assert result1.rounds == result2.rounds
    assert result1.winner == result2.winner


@given(seed=st.integers(min_value=0, max_value=10000))
def test_game_terminates_property(seed: int) -> None:
    """Property: Every game ends within 26 rounds with both hands empty."""
    game = WarGame(Player("One"), Player("Two"), seed=seed)
    result = game.play()

    assert result.round_count <= 26
    assert game.player1.hand_size == 0
    assert game.player2.hand_size == 0


@given(seed=st.integers(min_value=0, max_value=10000))
def test_cards_conserved_property(seed: int) -> None:
    """Property: Each player's 26 cards are all accounted for by the rounds."""
    result = play_war_game(seed=seed)

    assert sum(r.cards_used for r in result.rounds) == 26


@given(seed=st.integers(min_value=0, max_value=10000))
def test_one_point_per_round_property(seed: int) -> None:
    """Property: Scores never decrease and rise by exactly one per round."""
    result = play_war_game(seed=seed)

    previous = (0, 0)
    for r in result.rounds:
        assert r.outcome != Outcome.ABORTED
        assert (r.score1 + r.score2) == sum(previous) + 1
        assert r.score1 >= previous[0] and r.score2 >= previous[1]
        previous = (r.score1, r.score2)

    assert (result.score1, result.score2) == previous


@given(seed=st.integers(min_value=0, max_value=10000))
def test_winner_matches_scores_property(seed: int) -> None:
    result = play_war_game(seed=seed)

    if result.score1 > result.score2:
        assert result.winner == Winner.PLAYER1_WINS
    elif result.score2 > result.score1:
        assert result.winner == Winner.PLAYER2_WINS
    else:
        assert result.winner == Winner.TIE


@settings(max_examples=50)
@given(seed=st.integers(min_value=0, max_value=10000), size=st.integers(min_value=0, max_value=52))
def test_partial_deck_deal_property(seed: int, size: int) -> None:
    """Property: Dealing any prefix of a deck splits it with Player 1 ahead by at most one."""
    cards = Deck(seed=seed).cards[:size]
    game = WarGame(Player("One"), Player("Two"), deck=Deck.from_cards(cards))

    assert game.deal_cards() == size
    assert game.player1.hand_size == (size + 1) // 2
    assert game.player2.hand_size == size // 2
    assert game.player1.hand + game.player2.hand == tuple(cards[0::2]) + tuple(cards[1::2])
