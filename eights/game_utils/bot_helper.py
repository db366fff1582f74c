"""Bot helper for pacing AI player actions.

This is a stateless helper that operates on serialized Player fields:
- player.bot_think_ticks: Ticks until the bot may act
- player.bot_pending_action: Action decided on, waiting to be executed
- player.bot_pending_version: Game state version the pending action was decided against
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..games.base import Game, Player


class BotHelper:
    """
    Stateless helper that turns a bot's decision into a delayed move.

    A bot's move is a scheduled task tied to the game's ``state_version``:
    it is decided on one tick and executed on a later one, and it is thrown
    away if any transition (a restart, say) happened in between.

    Usage:
        # In game on_tick:
        BotHelper.on_tick(self)

        # Implement bot_think in your game:
        def bot_think(self, player: Player) -> str | None:
            return "draw"

        # When a bot's turn starts, make it wait before acting:
        BotHelper.jolt_bot(player, ticks=30)
    """

    DEFAULT_THINK_TICKS = 5

    @staticmethod
    def cancel(player: "Player") -> None:
        """Drop any pending move and thinking delay."""
        player.bot_think_ticks = 0
        player.bot_pending_action = None
        player.bot_pending_version = -1

    @staticmethod
    def jolt_bot(player: "Player", ticks: int | None = None) -> None:
        """Make one bot wait ``ticks`` ticks before acting, discarding any pending move."""
        if not player.is_bot:
            return
        BotHelper.cancel(player)
        player.bot_think_ticks = ticks if ticks is not None else BotHelper.DEFAULT_THINK_TICKS

    @staticmethod
    def on_tick(game: "Game") -> None:
        """
        Advance the current bot by one tick: think-delay, then decide, then act.

        Call this from your game's on_tick() method.
        """
        if not game.game_active or game.status != "playing":
            return

        current = game.current_player
        if not current or not current.is_bot:
            return

        if current.bot_think_ticks > 0:
            current.bot_think_ticks -= 1
            return

        if current.bot_pending_action:
            action_id = current.bot_pending_action
            stale = current.bot_pending_version != game.state_version
            current.bot_pending_action = None
            current.bot_pending_version = -1
            if not stale:
                game.execute_action(current, action_id)
            return

        action_id = game.bot_think(current)
        if action_id:
            current.bot_pending_action = action_id
            current.bot_pending_version = game.state_version
