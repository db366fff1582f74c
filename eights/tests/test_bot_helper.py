"""Tests for bot pacing."""

from eights.game_utils.bot_helper import BotHelper
from eights.games.crazyeights.game import CrazyEightsGame, CrazyEightsOptions
from eights.users.bot import Bot
from eights.users.test_user import MockUser


class TestBotHelper:
    def setup_method(self):
        self.game = CrazyEightsGame(options=CrazyEightsOptions(ai_delay_ticks=0))
        self.game.add_player("Alice", Bot("Alice"), player_id="ai1")
        self.game.add_player("Bob", Bot("Bob"), player_id="ai2")
        self.game.on_start()
        self.bot = self.game.get_player_by_id("ai1")

    def test_jolt_sets_delay(self):
        BotHelper.jolt_bot(self.bot, ticks=7)
        assert self.bot.bot_think_ticks == 7
        assert self.bot.bot_pending_action is None

    def test_jolt_ignores_humans(self):
        human = self.game.add_player("Sam", MockUser("Sam"))
        BotHelper.jolt_bot(human, ticks=7)
        assert human.bot_think_ticks == 0

    def test_decide_then_act(self):
        self.game.on_tick()
        assert self.bot.bot_pending_action is not None
        assert self.bot.bot_pending_version == self.game.state_version
        assert self.game.turns_taken == 0

        self.game.on_tick()
        assert self.bot.bot_pending_action is None
        assert self.game.turns_taken == 1
        assert self.game.current_player.id == "ai2"

    def test_stale_action_is_dropped(self):
        self.game.on_tick()
        assert self.bot.bot_pending_action is not None

        self.game.state_version += 1
        self.game.on_tick()
        assert self.bot.bot_pending_action is None
        assert self.game.turns_taken == 0

        self.game.on_tick()
        self.game.on_tick()
        assert self.game.turns_taken == 1

    def test_think_delay(self):
        BotHelper.jolt_bot(self.bot, ticks=3)
        for _ in range(3):
            self.game.on_tick()
        assert self.bot.bot_pending_action is None
        self.game.on_tick()
        assert self.bot.bot_pending_action is not None

    def test_cancel(self):
        self.game.on_tick()
        BotHelper.cancel(self.bot)
        assert self.bot.bot_pending_action is None
        assert self.bot.bot_pending_version == -1
        assert self.bot.bot_think_ticks == 0

    def test_idle_when_game_inactive(self):
        self.game.game_active = False
        self.game.on_tick()
        assert self.bot.bot_pending_action is None
