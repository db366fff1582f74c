"""Tests for declarative game options."""

import json

from eights.games.crazyeights.game import CrazyEightsOptions


class TestOptions:
    def setup_method(self):
        self.options = CrazyEightsOptions()

    def test_set_int(self):
        assert self.options.set_from_string("ai_count", "2") is None
        assert self.options.ai_count == 2

    def test_int_is_clamped(self):
        assert self.options.set_from_string("ai_count", "9") is None
        assert self.options.ai_count == 3
        assert self.options.set_from_string("ai_delay_ticks", "-5") is None
        assert self.options.ai_delay_ticks == 0

    def test_invalid_int(self):
        assert self.options.set_from_string("hand_size", "many") == "option-invalid-value"
        assert self.options.hand_size == 8

    def test_set_bool(self):
        assert self.options.set_from_string("show_landing", "no") is None
        assert self.options.show_landing is False
        assert self.options.set_from_string("show_landing", "ON") is None
        assert self.options.show_landing is True

    def test_invalid_bool(self):
        assert self.options.set_from_string("show_landing", "maybe") == "option-invalid-value"
        assert self.options.show_landing is True

    def test_unknown_option(self):
        assert self.options.set_from_string("winning_score", "500") == "option-unknown"

    def test_metas_in_declaration_order(self):
        assert list(self.options.get_option_metas()) == [
            "ai_count",
            "hand_size",
            "ai_delay_ticks",
            "show_landing",
        ]

    def test_describe(self):
        described = {d["name"]: d for d in self.options.describe("en")}
        assert described["ai_count"]["label"] == "Computer opponents: 3"
        assert described["ai_count"]["min"] == 1
        assert described["ai_count"]["max"] == 3
        assert described["show_landing"]["label"] == "Show welcome screen: on"
        assert described["show_landing"]["type"] == "bool"
        assert "min" not in described["show_landing"]

    def test_serialization(self):
        options = CrazyEightsOptions(ai_count=1, show_landing=False)
        data = json.loads(options.to_json())
        assert data["ai_count"] == 1
        assert CrazyEightsOptions.from_json(options.to_json()) == options
