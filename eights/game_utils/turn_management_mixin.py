"""Mixin providing turn order for games."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..games.base import Player


class TurnManagementMixin:
    """Fixed cyclic turn order over a list of seated players.

    Expects on the Game class:
        - self.turn_player_ids: list[str]
        - self.turn_index: int
        - self.get_player_by_id(player_id) -> Player | None
        - self.get_user(player) -> User | None
        - self.broadcast_l(message_id, **kwargs)
    """

    TURN_SOUND = "turn.ogg"

    @property
    def current_player(self) -> "Player | None":
        if not self.turn_player_ids:
            return None
        index = self.turn_index % len(self.turn_player_ids)
        return self.get_player_by_id(self.turn_player_ids[index])

    @current_player.setter
    def current_player(self, player: "Player | None") -> None:
        if player is None or player.id not in self.turn_player_ids:
            return
        self.turn_index = self.turn_player_ids.index(player.id)

    def set_turn_players(self, players: list["Player"], reset_index: bool = True) -> None:
        """Fix the seating order used for turn rotation."""
        self.turn_player_ids = [p.id for p in players]
        if reset_index:
            self.turn_index = 0

    def advance_turn(self, announce: bool = True) -> "Player | None":
        """Pass the turn to the next seat and return the new current player."""
        if not self.turn_player_ids:
            return None
        self.turn_index = (self.turn_index + 1) % len(self.turn_player_ids)
        if announce:
            self.announce_turn()
        return self.current_player

    def announce_turn(self) -> None:
        player = self.current_player
        if not player:
            return
        user = self.get_user(player)
        if user and not player.is_bot:
            self.play_sound_for(user, self.TURN_SOUND)
        self.broadcast_personal_l(player, "game-your-turn", "game-turn-start")

    @property
    def turn_players(self) -> list["Player"]:
        """Seated players in turn order."""
        return [
            p
            for player_id in self.turn_player_ids
            if (p := self.get_player_by_id(player_id)) is not None
        ]
