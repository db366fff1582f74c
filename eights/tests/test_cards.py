"""Tests for cards, decks and the deck factory."""

import random

from eights.game_utils.cards import (
    Card,
    Deck,
    DeckFactory,
    RANKS,
    SUITS,
    card_name,
    create_deck,
    shuffle_cards,
)


class TestCard:
    def test_id_is_rank_and_suit(self):
        card = Card.make("Q", "spades")
        assert card.id == "Q-spades"
        assert card.rank == "Q"
        assert card.suit == "spades"

    def test_only_eights_are_wild(self):
        assert Card.make("8", "clubs").is_wild
        assert not Card.make("7", "clubs").is_wild

    def test_short_label(self):
        assert Card.make("10", "hearts").short == "10♥"

    def test_card_name(self):
        assert card_name(Card.make("Q", "spades"), "en") == "Queen of Spades"
        assert card_name(Card.make("10", "hearts"), "en") == "10 of Hearts"
        assert card_name(Card.make("A", "clubs"), "zh") == "梅花A"


class TestDeckFactory:
    def test_fresh_deck_has_52_unique_cards(self):
        deck = create_deck()
        ids = [card.id for card in deck.cards]
        assert len(ids) == 52
        assert len(set(ids)) == 52

    def test_every_suit_and_rank_present(self):
        deck = create_deck()
        for suit in SUITS:
            for rank in RANKS:
                assert Card.make(rank, suit) in deck.cards

    def test_ordered_cards_are_suit_major(self):
        cards = DeckFactory.ordered_cards()
        assert cards[0].id == "A-hearts"
        assert cards[12].id == "K-hearts"
        assert cards[13].id == "A-diamonds"
        assert cards[-1].id == "K-spades"

    def test_seeded_rng_is_reproducible(self):
        first = create_deck(random.Random(42))
        second = create_deck(random.Random(42))
        assert [c.id for c in first.cards] == [c.id for c in second.cards]

    def test_decks_are_independent(self):
        first = create_deck()
        second = create_deck()
        first.draw_one()
        assert second.size() == 52

    def test_shuffle_keeps_every_card(self):
        cards = DeckFactory.ordered_cards()
        shuffle_cards(cards, random.Random(7))
        assert sorted(c.id for c in cards) == sorted(c.id for c in DeckFactory.ordered_cards())


class TestDeck:
    def test_draw_takes_from_the_tail(self):
        deck = Deck(cards=[Card.make("2", "hearts"), Card.make("3", "hearts")])
        assert deck.draw_one().id == "3-hearts"
        assert deck.size() == 1

    def test_draw_from_empty_deck(self):
        deck = Deck()
        assert deck.is_empty()
        assert deck.draw_one() is None
        assert deck.size() == 0
