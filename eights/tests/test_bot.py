"""Tests for the Crazy Eights bot policy."""

from eights.game_utils.cards import Card
from eights.games.crazyeights.bot import bot_think, choose_card, choose_suit
from eights.games.crazyeights.game import CrazyEightsGame, CrazyEightsPlayer


C = Card.make


def table(suit, rank):
    game = CrazyEightsGame()
    game.current_suit = suit
    game.current_rank = rank
    return game


def bot_with(*cards):
    return CrazyEightsPlayer(id="ai1", name="Alice", is_bot=True, hand=list(cards))


class TestChooseSuit:
    def test_most_held_suit(self):
        assert choose_suit([C("2", "spades"), C("3", "spades"), C("4", "hearts")]) == "spades"

    def test_tie_goes_to_earlier_suit(self):
        assert choose_suit([C("2", "spades"), C("3", "clubs")]) == "clubs"
        assert choose_suit([C("2", "diamonds"), C("3", "hearts")]) == "hearts"

    def test_empty_hand(self):
        assert choose_suit([]) == "hearts"

    def test_eights_count_toward_their_suit(self):
        assert choose_suit([C("8", "diamonds"), C("2", "clubs"), C("8", "diamonds")]) == "diamonds"


class TestChooseCard:
    def test_rank_match(self):
        game = table("hearts", "7")
        player = bot_with(C("3", "spades"), C("7", "spades"), C("9", "diamonds"))
        assert choose_card(game, player) == C("7", "spades")
        assert bot_think(game, player) == "play_card_7-spades"

    def test_prefers_plain_cards_over_eights(self):
        game = table("hearts", "5")
        player = bot_with(C("8", "clubs"), C("K", "spades"), C("5", "diamonds"))
        assert choose_card(game, player) == C("5", "diamonds")

    def test_first_playable_in_hand_order(self):
        game = table("hearts", "5")
        player = bot_with(C("2", "hearts"), C("5", "clubs"))
        assert choose_card(game, player) == C("2", "hearts")

    def test_falls_back_to_eight(self):
        game = table("hearts", "5")
        player = bot_with(C("2", "spades"), C("8", "clubs"))
        assert bot_think(game, player) == "play_card_8-clubs"

    def test_draws_when_nothing_fits(self):
        game = table("hearts", "5")
        player = bot_with(C("2", "spades"), C("K", "clubs"))
        assert choose_card(game, player) is None
        assert bot_think(game, player) == "draw"
