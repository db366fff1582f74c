"""Shared game utilities."""

from .actions import Action, ActionSet, Visibility
from .bot_helper import BotHelper
from .cards import Card, Deck, DeckFactory, create_deck
from .game_result import GameResult, PlayerResult
from .game_sound_mixin import GameSoundMixin
from .game_communication_mixin import GameCommunicationMixin
from .turn_management_mixin import TurnManagementMixin
from .options import GameOptions, IntOption, BoolOption, option_field

__all__ = [
    "Action",
    "ActionSet",
    "Visibility",
    "BotHelper",
    "Card",
    "Deck",
    "DeckFactory",
    "create_deck",
    "GameResult",
    "PlayerResult",
    "GameSoundMixin",
    "GameCommunicationMixin",
    "TurnManagementMixin",
    "GameOptions",
    "IntOption",
    "BoolOption",
    "option_field",
]
