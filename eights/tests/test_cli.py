"""Tests for the command-line interface and the terminal renderer."""

import json
import random

import pytest

from eights.cli import GameSimulator, TerminalSession, build_parser, cmd_play, main
from eights.game_utils.cards import Card, Deck
from eights.games.crazyeights.game import CrazyEightsGame, CrazyEightsOptions
from eights.users.terminal_user import TerminalUser


def scripted_input(answers):
    answers = iter(answers)

    def read(prompt):
        try:
            return next(answers)
        except StopIteration:
            return "q"

    return read


class TestGameSimulator:
    def test_simulation_completes(self):
        random.seed(1)
        simulator = GameSimulator(["Alice", "Bob"], options=["ai_delay_ticks=0"], quiet=True)
        assert simulator.setup()
        results = simulator.run()

        assert results["timed_out"] is False
        assert results["winner"] in ("ai1", "ai2")
        assert results["messages"][0].startswith("Cards are dealt.")
        assert results["result"]["custom_data"]["winner_id"] == results["winner"]
        winner_name = "Alice" if results["winner"] == "ai1" else "Bob"
        assert results["messages"][-1] == f"{winner_name} wins!"
        assert f"{winner_name} wins!" in results["final_menu"]

    def test_messages_logged_once_per_transition(self):
        random.seed(2)
        simulator = GameSimulator(["Alice", "Bob", "Charlie"], options=["ai_delay_ticks=0"], quiet=True)
        simulator.setup()
        results = simulator.run()
        # One deal, one message per turn
        assert len(results["messages"]) == results["turns"] + 1

    def test_too_few_bots(self, capsys):
        assert not GameSimulator(["Alice"]).setup()
        assert "at least 2" in capsys.readouterr().out

    def test_too_many_bots(self):
        assert not GameSimulator(["A", "B", "C", "D", "E"], quiet=True).setup()

    def test_bad_option(self, capsys):
        assert not GameSimulator(["Alice", "Bob"], options=["bogus=1"]).setup()
        assert "Unknown option: bogus" in capsys.readouterr().out

    def test_timeout(self):
        simulator = GameSimulator(["Alice", "Bob"], quiet=True, max_ticks=3)
        simulator.setup()
        results = simulator.run()
        assert results["timed_out"] is True
        assert results["ticks"] == 3


class TestCommands:
    def test_show_options_json(self, capsys):
        main(["show-options", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["game_type"] == "crazyeights"
        assert [o["name"] for o in data["options"]] == [
            "ai_count",
            "hand_size",
            "ai_delay_ticks",
            "show_landing",
        ]

    def test_show_options_text(self, capsys):
        main(["show-options"])
        out = capsys.readouterr().out
        assert "ai_count (int)" in out
        assert "Range: 1 - 3" in out

    def test_simulate_json(self, capsys):
        main(["simulate", "--bots", "2", "--json", "--seed", "4", "-o", "ai_delay_ticks=0"])
        data = json.loads(capsys.readouterr().out)
        assert data["game_type"] == "crazyeights"
        assert data["timed_out"] is False

    def test_simulate_invalid_option_exits(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["simulate", "--bots", "2", "--quiet", "-o", "ai_count=lots"])
        assert excinfo.value.code == 1

    def test_no_command_prints_help(self):
        with pytest.raises(SystemExit):
            main([])

    def test_play_quits(self, capsys):
        args = build_parser().parse_args(["play", "--ai", "1", "--no-landing", "--tick-delay", "0"])
        cmd_play(args, input_fn=scripted_input(["q"]))
        out = capsys.readouterr().out
        assert "Your hand:" in out
        assert "Goodbye!" in out

    def test_play_landing_menu(self, capsys):
        args = build_parser().parse_args(["play", "--ai", "2", "--tick-delay", "0"])
        cmd_play(args, input_fn=scripted_input(["2", "q"]))
        out = capsys.readouterr().out
        assert "1. Start game" in out
        assert "Match the top card" in out


class TestTerminalSession:
    def _session(self, answers, ai_count=1, locale="en"):
        game = CrazyEightsGame(
            options=CrazyEightsOptions(ai_count=ai_count, ai_delay_ticks=0, show_landing=False)
        )
        user = TerminalUser("Sam", locale=locale)
        game.seat_players("Sam", user)
        return game, TerminalSession(game, user, input_fn=scripted_input(answers), tick_delay=0)

    def test_invalid_choice(self, capsys):
        _, session = self._session(["x", "99", "q"])
        session.run()
        out = capsys.readouterr().out
        assert out.count("Please enter one of the listed numbers.") == 2

    def test_always_first_choice(self, capsys):
        random.seed(3)
        game, session = self._session(["1"] * 300, ai_count=3)
        session.run()
        out = capsys.readouterr().out
        assert "Goodbye!" in out
        assert "draws a card" in out or "plays the" in out

    def test_eof_quits(self, capsys):
        def closed(prompt):
            raise EOFError

        game, _ = self._session([])
        user = game.get_user(game.players[0])
        session = TerminalSession(game, user, input_fn=closed, tick_delay=0)
        session.run()
        assert "Goodbye!" in capsys.readouterr().out


class TestTerminalUser:
    def _table(self, locale="en"):
        game = CrazyEightsGame(
            options=CrazyEightsOptions(ai_count=2, ai_delay_ticks=0, show_landing=False)
        )
        user = TerminalUser("Sam", locale=locale)
        game.seat_players("Sam", user)
        game.on_start()
        game.get_player_by_id("player").hand = [Card.make("10", "hearts"), Card.make("Q", "spades")]
        game.discard_pile = [Card.make("5", "clubs")]
        game.current_suit = "clubs"
        game.current_rank = "5"
        game.deck = Deck()
        game.rebuild_all_menus()
        user.update_table(game.snapshot())
        return game, user

    def test_render_table(self):
        _, user = self._table()
        lines = user.render_table("player")
        assert lines[0] == "=== Crazy Eights ==="
        assert "Discard pile: 5 of Clubs" in lines
        assert "Suit in play: Clubs" in lines
        assert "Deck: 0 cards" in lines
        assert "Your hand: 10♥ Q♠" in lines
        assert "Turn: Sam" in lines
        opponents = [line for line in lines if line.startswith("Opponents:")][0]
        assert "Alice (8 cards)" in opponents
        assert "Bob (8 cards)" in opponents

    def test_render_table_zh(self):
        _, user = self._table(locale="zh")
        lines = user.render_table("player")
        assert "弃牌堆：梅花5" in lines
        assert "当前花色：梅花" in lines

    def test_menu_labels(self):
        _, user = self._table()
        texts = [item.text for item in user.get_menu()]
        assert texts == ["Pass (deck is empty)", "New game"]

    def test_speech_is_printed(self, capsys):
        user = TerminalUser("Sam")
        user.speak_l("crazyeights-winner", player="Bob")
        assert capsys.readouterr().out == "  Bob wins!\n"
