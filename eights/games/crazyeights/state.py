"""Crazy Eights table state as seen from outside the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mashumaro.mixins.json import DataClassJSONMixin

from ...game_utils.cards import Card, card_name, make_card_id, suit_name, RANKS, SUITS


class GameStatus(str, Enum):
    """Where the table is in its lifecycle."""

    LANDING = "landing"
    PLAYING = "playing"
    SUIT_PICKING = "suit_picking"
    GAME_OVER = "game_over"


@dataclass
class LastAction(DataClassJSONMixin):
    """
    The most recent announced event, kept locale-free.

    ``args`` may carry ``card`` (a card id) and ``suit`` (a suit code); they
    are turned into names when the message is rendered for a locale.
    """

    message_id: str
    args: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HandView(DataClassJSONMixin):
    player_id: str
    name: str
    is_bot: bool
    cards: tuple[Card, ...]


@dataclass(frozen=True)
class GameSnapshot(DataClassJSONMixin):
    """Immutable copy of everything a renderer needs after a transition."""

    version: int
    status: GameStatus
    turn: str | None
    winner: str | None
    deck_count: int
    hands: tuple[HandView, ...]
    discard_top: Card | None
    discard_count: int
    current_suit: str | None
    current_rank: str | None
    last_action: LastAction | None = None

    def hand_of(self, player_id: str) -> HandView | None:
        for hand in self.hands:
            if hand.player_id == player_id:
                return hand
        return None

    @property
    def card_total(self) -> int:
        """Cards across deck, hands and discard pile."""
        return self.deck_count + self.discard_count + sum(len(h.cards) for h in self.hands)


_CARDS_BY_ID = {make_card_id(rank, suit): Card.make(rank, suit) for suit in SUITS for rank in RANKS}


def localize_args(args: dict[str, str], locale: str) -> dict[str, str]:
    """Replace card ids and suit codes in message args with localized names."""
    localized = dict(args)
    card = _CARDS_BY_ID.get(args.get("card", ""))
    if card is not None:
        localized["card"] = card_name(card, locale)
    if "suit" in args:
        localized["suit"] = suit_name(args["suit"], locale)
    return localized
