"""Crazy Eights game package."""

from .game import CrazyEightsGame, CrazyEightsPlayer, CrazyEightsOptions, DealError
from .state import GameStatus, GameSnapshot, LastAction

__all__ = [
    "CrazyEightsGame",
    "CrazyEightsPlayer",
    "CrazyEightsOptions",
    "DealError",
    "GameStatus",
    "GameSnapshot",
    "LastAction",
]
