"""
Command-line interface: play at the terminal, simulate bot games, inspect options.

All game output goes through the same users the engine talks to; this module
only prints progress and errors of its own.

Usage examples:
    # Play against three computer opponents
    python -m eights play

    # Play against one opponent, in Chinese, skipping the welcome screen
    python -m eights play --ai 1 --locale zh --no-landing

    # Simulate a game between 4 bots with no thinking delay
    python -m eights simulate --bots 4 -o ai_delay_ticks=0

    # Simulate with specific bot names and a fixed shuffle
    python -m eights simulate --bots Alice,Bob --seed 7

    # Output as JSON for machine parsing
    python -m eights simulate --bots 3 --json

    # Show game options
    python -m eights show-options
"""

import argparse
import json
import random
import sys
import time
from typing import Any, Callable

from .messages.localization import Localization

Localization.init()

from .game_utils.game_sound_mixin import GameSoundMixin  # noqa: E402
from .game_utils.options import GameOptions  # noqa: E402
from .games.base import BOT_NAMES  # noqa: E402
from .games.crazyeights.game import CrazyEightsGame, HUMAN_PLAYER_ID  # noqa: E402
from .games.crazyeights.state import GameSnapshot, GameStatus, localize_args  # noqa: E402
from .users.base import MenuItem  # noqa: E402
from .users.bot import Bot  # noqa: E402
from .users.terminal_user import TerminalUser  # noqa: E402


class SpectatorUser(Bot):
    """
    A bot seat that also narrates the game.

    Used for CLI simulation to watch games play out: every published snapshot
    carries the last event, which is rendered and logged once per version.
    """

    def __init__(
        self,
        name: str,
        locale: str = "en",
        json_mode: bool = False,
        quiet: bool = False,
    ):
        super().__init__(name, locale=locale)
        self.json_mode = json_mode
        self.quiet = quiet
        self.messages: list[str] = []
        self.menus: dict[str, list[str]] = {}
        self._last_version = -1

    def _log(self, text: str) -> None:
        self.messages.append(text)
        if not self.quiet and not self.json_mode:
            print(f"  {text}")

    def update_table(self, snapshot: GameSnapshot) -> None:
        if snapshot.version == self._last_version or snapshot.last_action is None:
            return
        self._last_version = snapshot.version
        action = snapshot.last_action
        self._log(
            Localization.get(
                self.locale, action.message_id, **localize_args(action.args, self.locale)
            )
        )

    def show_menu(
        self, menu_id: str, items: list[MenuItem], *, position: int | None = None
    ) -> None:
        self.menus[menu_id] = [item.text for item in items]

    def remove_menu(self, menu_id: str) -> None:
        self.menus.pop(menu_id, None)


def apply_options(
    options: GameOptions, pairs: list[str] | None, locale: str = "en"
) -> list[str]:
    """Apply ``key=value`` strings to an options object. Returns error messages."""
    errors = []
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            errors.append(Localization.get(locale, "cli-invalid-option", option=pair))
            continue
        key, value = key.strip(), value.strip()
        error = options.set_from_string(key, value)
        if error:
            errors.append(Localization.get(locale, error, name=key, value=value))
    return errors


class GameSimulator:
    """Runs a bot-only game with a spectator seat."""

    def __init__(
        self,
        bot_names: list[str],
        options: list[str] | None = None,
        json_mode: bool = False,
        quiet: bool = False,
        max_ticks: int = 1000000,
        locale: str = "en",
    ):
        self.bot_names = bot_names
        self.options = options
        self.json_mode = json_mode
        self.quiet = quiet
        self.max_ticks = max_ticks
        self.locale = locale

        self.game: CrazyEightsGame | None = None
        self.spectator: SpectatorUser | None = None

    def setup(self) -> bool:
        """Set up the game. Returns True on success."""
        min_players = CrazyEightsGame.get_min_players()
        max_players = CrazyEightsGame.get_max_players()

        if len(self.bot_names) < min_players:
            if not self.json_mode:
                print(f"Error: Crazy Eights requires at least {min_players} players")
            return False

        if len(self.bot_names) > max_players:
            if not self.json_mode:
                print(f"Error: Crazy Eights allows at most {max_players} players")
            return False

        self.game = CrazyEightsGame()
        errors = apply_options(self.game.options, self.options, self.locale)
        if errors:
            if not self.json_mode:
                for error in errors:
                    print(f"Error: {error}")
            return False

        self.spectator = SpectatorUser(
            self.bot_names[0],
            locale=self.locale,
            json_mode=self.json_mode,
            quiet=self.quiet,
        )
        for i, name in enumerate(self.bot_names):
            user = self.spectator if i == 0 else Bot(name, locale=self.locale)
            self.game.add_player(name, user, player_id=f"ai{i + 1}")
        return True

    def run(self) -> dict[str, Any]:
        """Run the simulation to completion. Returns results dict."""
        if not self.game or not self.spectator:
            return {"error": "Game not set up"}

        if not self.json_mode and not self.quiet:
            print(f"\n=== {self.game.get_name()} ({len(self.bot_names)} bots) ===\n")

        self.game.on_start()

        tick = 0
        while self.game.game_active and tick < self.max_ticks:
            self.game.on_tick()
            tick += 1

        timed_out = self.game.status != GameStatus.GAME_OVER
        if timed_out and not self.json_mode:
            print(f"\nWarning: Game timed out after {self.max_ticks} ticks")

        return {
            "game_type": self.game.get_type(),
            "game_name": self.game.get_name(),
            "ticks": tick,
            "turns": self.game.turns_taken,
            "timed_out": timed_out,
            "winner": self.game.winner_id,
            "result": self.game.build_game_result().to_dict(),
            "messages": list(self.spectator.messages),
            "final_menu": self.spectator.menus.get("game_over", []),
        }


class TerminalSession:
    """
    Interactive loop for one human seat.

    Ticks the game while other players are to move, then prints the table and
    the turn menu and reads a numbered choice.
    """

    def __init__(
        self,
        game: CrazyEightsGame,
        user: TerminalUser,
        player_id: str = HUMAN_PLAYER_ID,
        input_fn: Callable[[str], str] = input,
        tick_delay: float = 1 / GameSoundMixin.TICKS_PER_SECOND,
    ):
        self.game = game
        self.user = user
        self.player_id = player_id
        self.input_fn = input_fn
        self.tick_delay = tick_delay

    def _awaiting_player(self) -> bool:
        if self.game.status in (GameStatus.LANDING, GameStatus.GAME_OVER):
            return True
        current = self.game.current_player
        return current is not None and current.id == self.player_id

    def run(self) -> None:
        player = self.game.get_player_by_id(self.player_id)
        if player is None:
            raise ValueError(f"No seat with id {self.player_id!r}")

        self.game.on_start()
        while True:
            if not self._awaiting_player():
                self.game.on_tick()
                if self.tick_delay:
                    time.sleep(self.tick_delay)
                continue

            action_id = self._prompt()
            if action_id is None:
                print(Localization.get(self.user.locale, "cli-goodbye"))
                return
            self.game.execute_action(player, action_id)

    def _prompt(self) -> str | None:
        """Read a menu choice. None means the player wants to quit."""
        locale = self.user.locale
        print()
        for line in self.user.render_table(self.player_id):
            print(line)

        items = self.user.get_menu()
        while True:
            print()
            for i, item in enumerate(items, 1):
                print(f"  {i}. {item.text}")
            try:
                raw = self.input_fn(Localization.get(locale, "menu-prompt") + " ")
            except EOFError:
                return None
            raw = raw.strip().lower()
            if raw in ("q", "quit", "exit"):
                return None
            if raw.isdigit() and 1 <= int(raw) <= len(items):
                return items[int(raw) - 1].id
            print(Localization.get(locale, "menu-invalid-choice"))


def cmd_play(args, input_fn: Callable[[str], str] = input) -> None:
    """Play a game at the terminal."""
    if args.seed is not None:
        random.seed(args.seed)

    game = CrazyEightsGame()
    pairs = [f"ai_count={args.ai}"] + (args.option or [])
    if args.no_landing:
        pairs.append("show_landing=false")
    errors = apply_options(game.options, pairs, args.locale)
    if errors:
        for error in errors:
            print(f"Error: {error}")
        sys.exit(1)

    user = TerminalUser(args.name, locale=args.locale)
    game.seat_players(args.name, user)
    TerminalSession(game, user, input_fn=input_fn, tick_delay=args.tick_delay).run()


def cmd_show_options(args):
    """Show the game's options."""
    described = CrazyEightsGame().options.describe(args.locale)

    if args.json:
        print(json.dumps({"game_type": CrazyEightsGame.get_type(), "options": described}, indent=2))
    else:
        print(f"Options for {CrazyEightsGame.get_type()}:\n")
        for opt in described:
            print(f"  {opt['name']} ({opt['type']})")
            print(f"    {opt['label']}")
            print(f"    Default: {opt['default']}")
            if "min" in opt:
                print(f"    Range: {opt['min']} - {opt['max']}")
            print()


def cmd_simulate(args):
    """Simulate a game with bots."""
    if args.bots.isdigit():
        num_bots = int(args.bots)
        bot_names = BOT_NAMES[:num_bots]
    else:
        bot_names = [name.strip() for name in args.bots.split(",")]

    if args.seed is not None:
        random.seed(args.seed)

    simulator = GameSimulator(
        bot_names=bot_names,
        options=args.option,
        json_mode=args.json,
        quiet=args.quiet,
        max_ticks=args.max_ticks,
        locale=args.locale,
    )

    if not simulator.setup():
        sys.exit(1)

    results = simulator.run()

    if args.json:
        print(json.dumps(results, indent=2))
    elif not args.quiet:
        print(f"\n=== Finished: {results['ticks']} ticks, {results['turns']} turns ===")
        if results.get("final_menu"):
            print("\nFinal standings:")
            for line in results["final_menu"]:
                print(f"  {line}")

    if results["timed_out"]:
        sys.exit(2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eights",
        description="Crazy Eights at the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # play command
    play_parser = subparsers.add_parser("play", help="Play against computer opponents")
    play_parser.add_argument(
        "--ai", type=int, default=3, help="Number of computer opponents, 1-3 (default: 3)"
    )
    play_parser.add_argument("--name", default="Player", help="Your name at the table")
    play_parser.add_argument("--locale", "-l", default="en", help="Message locale (en, zh)")
    play_parser.add_argument(
        "--no-landing", action="store_true", help="Skip the welcome screen"
    )
    play_parser.add_argument(
        "--option", "-o", action="append", help="Set game option (e.g., -o ai_delay_ticks=10)"
    )
    play_parser.add_argument("--seed", type=int, help="Seed the shuffle")
    play_parser.add_argument(
        "--tick-delay",
        type=float,
        default=1 / GameSoundMixin.TICKS_PER_SECOND,
        help="Seconds per tick while opponents move (default: 0.05)",
    )

    # show-options command
    options_parser = subparsers.add_parser("show-options", help="Show game options")
    options_parser.add_argument("--json", action="store_true", help="Output as JSON")
    options_parser.add_argument("--locale", "-l", default="en", help="Label locale")

    # simulate command
    sim_parser = subparsers.add_parser("simulate", help="Simulate a game with bots")
    sim_parser.add_argument(
        "--bots",
        "-b",
        default="4",
        help="Number of bots (e.g., 3) or comma-separated names (e.g., Alice,Bob)",
    )
    sim_parser.add_argument(
        "--option", "-o", action="append", help="Set game option (e.g., -o ai_delay_ticks=0)"
    )
    sim_parser.add_argument("--json", action="store_true", help="Output as JSON")
    sim_parser.add_argument(
        "--quiet", "-q", action="store_true", help="Suppress game output"
    )
    sim_parser.add_argument(
        "--max-ticks",
        type=int,
        default=1000000,
        help="Maximum ticks before timeout (default: 1000000)",
    )
    sim_parser.add_argument("--seed", type=int, help="Seed the shuffle")
    sim_parser.add_argument("--locale", "-l", default="en", help="Message locale (en, zh)")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "show-options":
        cmd_show_options(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
