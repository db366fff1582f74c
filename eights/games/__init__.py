"""Game implementations."""

from .base import Game, Player
from .crazyeights.game import CrazyEightsGame

__all__ = [
    "Game",
    "Player",
    "CrazyEightsGame",
]
