"""Mixin providing message broadcasting for games."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..games.base import Player


class GameCommunicationMixin:
    """Mixin providing localized broadcasts.

    Messages travel as ids plus arguments; each user renders them in its own
    locale.

    Expects on the Game class:
        - self.players: list[Player]
        - self.get_user(player) -> User | None
    """

    def broadcast_l(
        self,
        message_id: str,
        buffer: str = "misc",
        exclude: "Player | None" = None,
        **kwargs,
    ) -> None:
        """Send a localized message to all players (each in their own locale)."""
        for player in self.players:
            if player is exclude:
                continue
            user = self.get_user(player)
            if user:
                user.speak_l(message_id, buffer, **kwargs)

    def broadcast_personal_l(
        self,
        player: "Player",
        personal_message_id: str,
        others_message_id: str,
        buffer: str = "misc",
        **kwargs,
    ) -> None:
        """
        Send one message to ``player`` and another to everyone else.

        The others' message also receives ``player=player.name``.
        """
        user = self.get_user(player)
        if user:
            user.speak_l(personal_message_id, buffer, **kwargs)

        for p in self.players:
            if p is player:
                continue
            u = self.get_user(p)
            if u:
                u.speak_l(others_message_id, buffer, player=player.name, **kwargs)
