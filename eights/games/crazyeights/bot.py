from __future__ import annotations

from typing import TYPE_CHECKING

from ...game_utils.cards import Card, SUITS

if TYPE_CHECKING:
    from .game import CrazyEightsGame, CrazyEightsPlayer


def choose_suit(hand: list[Card]) -> str:
    """Suit the hand holds most of; ties go to the earliest suit in SUITS."""
    suit_counts = {suit: 0 for suit in SUITS}
    for card in hand:
        if card.suit in suit_counts:
            suit_counts[card.suit] += 1
    best = SUITS[0]
    for suit in SUITS:
        if suit_counts[suit] > suit_counts[best]:
            best = suit
    return best


def choose_card(game: "CrazyEightsGame", player: "CrazyEightsPlayer") -> Card | None:
    """First playable non-8 in hand order, else the first playable 8."""
    playable = [card for card in player.hand if game.is_playable(card)]
    if not playable:
        return None
    for card in playable:
        if not card.is_wild:
            return card
    return playable[0]


def bot_think(game: "CrazyEightsGame", player: "CrazyEightsPlayer") -> str | None:
    card = choose_card(game, player)
    if card is not None:
        return f"play_card_{card.id}"
    return "draw"
