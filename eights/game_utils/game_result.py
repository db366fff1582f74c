"""Structured outcome of a finished game."""

from dataclasses import dataclass, field
from typing import Any

from mashumaro.mixins.json import DataClassJSONMixin


@dataclass
class PlayerResult(DataClassJSONMixin):
    """How one player finished."""

    player_id: str
    player_name: str
    is_bot: bool
    cards_left: int = 0


@dataclass
class GameResult(DataClassJSONMixin):
    """Result of one game, built when it ends."""

    game_type: str
    timestamp: str
    duration_ticks: int
    player_results: list[PlayerResult] = field(default_factory=list)
    custom_data: dict[str, Any] = field(default_factory=dict)

    def has_human_players(self) -> bool:
        return any(not p.is_bot for p in self.player_results)

    def get_winner(self) -> PlayerResult | None:
        winner_id = self.custom_data.get("winner_id")
        for p in self.player_results:
            if p.player_id == winner_id:
                return p
        return None
