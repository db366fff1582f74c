"""Crazy Eights: a card game engine with a terminal table and bot simulator."""

__version__ = "0.1.0"
