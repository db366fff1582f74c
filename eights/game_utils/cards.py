"""Standard 52-card deck: card values, the deck container and the deck factory."""

from __future__ import annotations

from dataclasses import dataclass, field
import random

from mashumaro.mixins.json import DataClassJSONMixin

from ..messages.localization import Localization


SUIT_HEARTS = "hearts"
SUIT_DIAMONDS = "diamonds"
SUIT_CLUBS = "clubs"
SUIT_SPADES = "spades"

# Enumeration order matters: it is also the tie-break order for bot suit picks.
SUITS = [SUIT_HEARTS, SUIT_DIAMONDS, SUIT_CLUBS, SUIT_SPADES]
RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]

WILD_RANK = "8"

SUIT_SYMBOLS = {
    SUIT_HEARTS: "♥",
    SUIT_DIAMONDS: "♦",
    SUIT_CLUBS: "♣",
    SUIT_SPADES: "♠",
}

RANK_MESSAGE_IDS = {
    "A": "rank-ace",
    "J": "rank-jack",
    "Q": "rank-queen",
    "K": "rank-king",
}


def make_card_id(rank: str, suit: str) -> str:
    return f"{rank}-{suit}"


@dataclass(frozen=True)
class Card(DataClassJSONMixin):
    """An immutable playing card. ``id`` is ``"<rank>-<suit>"``."""

    id: str
    suit: str
    rank: str

    @classmethod
    def make(cls, rank: str, suit: str) -> "Card":
        return cls(id=make_card_id(rank, suit), suit=suit, rank=rank)

    @property
    def is_wild(self) -> bool:
        return self.rank == WILD_RANK

    @property
    def short(self) -> str:
        """Compact label such as ``10♠``."""
        return f"{self.rank}{SUIT_SYMBOLS.get(self.suit, '?')}"


@dataclass
class Deck(DataClassJSONMixin):
    """Ordered draw pile. The top of the pile is the end of ``cards``."""

    cards: list[Card] = field(default_factory=list)

    def draw_one(self) -> Card | None:
        if not self.cards:
            return None
        return self.cards.pop()

    def size(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def shuffle(self, rng: random.Random | None = None) -> None:
        shuffle_cards(self.cards, rng)


def shuffle_cards(cards: list[Card], rng: random.Random | None = None) -> None:
    """
    Fisher-Yates shuffle in place.

    Walks i from the last index down to 1 and swaps cards[i] with a uniformly
    chosen cards[j], 0 <= j <= i. Uses the module PRNG unless ``rng`` is given.
    """
    source = rng if rng is not None else random
    for i in range(len(cards) - 1, 0, -1):
        j = source.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]


class DeckFactory:
    """Builds fresh decks. Every call returns an independent deck."""

    @staticmethod
    def ordered_cards() -> list[Card]:
        """All 52 cards, suit-major in ``SUITS`` order, ranks in ``RANKS`` order."""
        return [Card.make(rank, suit) for suit in SUITS for rank in RANKS]

    @staticmethod
    def standard_deck(rng: random.Random | None = None) -> Deck:
        deck = Deck(cards=DeckFactory.ordered_cards())
        deck.shuffle(rng)
        return deck


def create_deck(rng: random.Random | None = None) -> Deck:
    """A fresh, uniformly shuffled 52-card deck."""
    return DeckFactory.standard_deck(rng)


def suit_name(suit: str, locale: str = "en") -> str:
    return Localization.get(locale, f"suit-{suit}")


def rank_name(rank: str, locale: str = "en") -> str:
    message_id = RANK_MESSAGE_IDS.get(rank)
    if message_id is None:
        return rank
    return Localization.get(locale, message_id)


def card_name(card: Card, locale: str = "en") -> str:
    """Localized card name, e.g. "Queen of spades"."""
    return Localization.get(
        locale,
        "card-name",
        rank=rank_name(card.rank, locale),
        suit=suit_name(card.suit, locale),
    )
