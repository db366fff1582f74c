"""Base game class and player dataclass."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from mashumaro.mixins.json import DataClassJSONMixin

from ..users.base import User, MenuItem
from ..game_utils.actions import Action, ActionSet, ResolvedAction
from ..game_utils.game_communication_mixin import GameCommunicationMixin
from ..game_utils.game_result import GameResult, PlayerResult
from ..game_utils.game_sound_mixin import GameSoundMixin
from ..game_utils.turn_management_mixin import TurnManagementMixin


# Default bot names, handed out in order
BOT_NAMES = [
    "Alice",
    "Bob",
    "Charlie",
    "Diana",
    "Eve",
    "Frank",
    "Grace",
    "Henry",
]


@dataclass
class Player(DataClassJSONMixin):
    """
    A seat at the table.

    Serialized with the game state; the attached User is runtime-only and
    looked up by ``id``.
    """

    id: str
    name: str
    is_bot: bool = False
    # Bot pacing state, see BotHelper
    bot_think_ticks: int = 0
    bot_pending_action: str | None = None
    bot_pending_version: int = -1


@dataclass
class Game(
    GameSoundMixin, GameCommunicationMixin, TurnManagementMixin, ABC, DataClassJSONMixin
):
    """
    Abstract base class for turn-based table games.

    Games are dataclasses: every piece of state lives in a field, so a game
    can be dumped with ``to_json()``. They are synchronous and single-writer:
    state changes only inside action handlers and ``on_tick``, and each
    completed transition bumps ``state_version``.
    """

    players: list[Player] = field(default_factory=list)
    game_active: bool = False
    status: str = "waiting"
    state_version: int = 0
    current_music: str = ""
    turn_index: int = 0
    turn_player_ids: list[str] = field(default_factory=list)
    scheduled_sounds: list = field(default_factory=list)  # [[tick, sound, vol, pan, pitch], ...]
    sound_scheduler_tick: int = 0
    player_action_sets: dict[str, list[ActionSet]] = field(default_factory=dict)

    def __post_init__(self):
        # Runtime-only, not serialized
        self._users: dict[str, User] = {}

    # Abstract methods games must implement

    @classmethod
    @abstractmethod
    def get_name(cls) -> str:
        """Display name of this game (English fallback)."""
        ...

    @classmethod
    @abstractmethod
    def get_type(cls) -> str:
        ...

    @classmethod
    def get_min_players(cls) -> int:
        return 2

    @classmethod
    def get_max_players(cls) -> int:
        return 4

    @abstractmethod
    def on_start(self) -> None:
        """Called when the game starts."""
        ...

    def on_tick(self) -> None:
        """Called every tick (50ms). Subclasses call super().on_tick()."""
        self.process_scheduled_sounds()

    def bot_think(self, player: Player) -> str | None:
        """Action id the bot wants to take now, or None to wait."""
        return None

    # Game end

    def finish_game(self) -> GameResult:
        """Mark the game as finished and return its result."""
        self.game_active = False
        result = self.build_game_result()
        self._show_end_screen(result)
        return result

    def build_game_result(self) -> GameResult:
        return GameResult(
            game_type=self.get_type(),
            timestamp=datetime.now().isoformat(),
            duration_ticks=self.sound_scheduler_tick,
            player_results=[
                PlayerResult(player_id=p.id, player_name=p.name, is_bot=p.is_bot)
                for p in self.players
            ],
        )

    def format_end_screen(self, result: GameResult, locale: str) -> list[str]:
        return [p.player_name for p in result.player_results]

    def _show_end_screen(self, result: GameResult) -> None:
        for player in self.players:
            user = self.get_user(player)
            if user:
                lines = self.format_end_screen(result, user.locale)
                items = [MenuItem(text=line, id="score_line") for line in lines]
                user.show_menu("game_over", items)

    # Player management

    def create_player(self, player_id: str, name: str, is_bot: bool = False) -> Player:
        return Player(id=player_id, name=name, is_bot=is_bot)

    def add_player(self, name: str, user: User, player_id: str | None = None) -> Player:
        """Seat a user. Bots are detected from the user type."""
        from ..users.bot import Bot

        player = self.create_player(
            player_id or user.uuid, name, is_bot=isinstance(user, Bot)
        )
        self.players.append(player)
        self.attach_user(player.id, user)
        self.setup_player_actions(player)
        return player

    def attach_user(self, player_id: str, user: User) -> None:
        self._users[player_id] = user
        if self.current_music:
            try:
                user.play_music(self.current_music)
            except Exception:
                pass

    def get_user(self, player: Player) -> User | None:
        return self._users.get(player.id)

    def get_player_by_id(self, player_id: str) -> Player | None:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get_human_players(self) -> list[Player]:
        return [p for p in self.players if not p.is_bot]

    # Action Set System

    def create_action_sets(self, player: Player) -> list[ActionSet]:
        """Build the player's action sets, in menu order. Override in subclasses."""
        return []

    def setup_player_actions(self, player: Player) -> None:
        self.player_action_sets[player.id] = []
        for action_set in self.create_action_sets(player):
            self.add_action_set(player, action_set)

    def get_action_sets(self, player: Player) -> list[ActionSet]:
        return self.player_action_sets.get(player.id, [])

    def get_action_set(self, player: Player, name: str) -> ActionSet | None:
        for action_set in self.get_action_sets(player):
            if action_set.name == name:
                return action_set
        return None

    def add_action_set(self, player: Player, action_set: ActionSet) -> None:
        self.player_action_sets.setdefault(player.id, []).append(action_set)

    def find_action(self, player: Player, action_id: str) -> Action | None:
        for action_set in self.get_action_sets(player):
            action = action_set.get_action(action_id)
            if action:
                return action
        return None

    def resolve_action(self, player: Player, action: Action) -> ResolvedAction:
        for action_set in self.get_action_sets(player):
            if action_set.get_action(action.id):
                return action_set.resolve_action(self, player, action)
        return ResolvedAction(
            action=action,
            label=action.label,
            enabled=True,
            disabled_reason=None,
            visible=True,
        )

    def get_all_visible_actions(self, player: Player) -> list[ResolvedAction]:
        result = []
        for action_set in self.get_action_sets(player):
            result.extend(action_set.get_visible_actions(self, player))
        return result

    def execute_action(self, player: Player, action_id: str) -> bool:
        """
        Run an action for a player if it is currently allowed.

        Rejected actions leave the game untouched; the reason, if any, is
        spoken to the acting player. Returns True if the action's handler ran
        and changed the game state.
        """
        action = self.find_action(player, action_id)
        if not action:
            return False

        resolved = self.resolve_action(player, action)
        if not resolved.enabled:
            if resolved.disabled_reason:
                user = self.get_user(player)
                if user:
                    user.speak_l(resolved.disabled_reason)
            return False

        handler = getattr(self, action.handler, None)
        if not handler:
            return False

        version = self.state_version
        handler(player, action_id)
        return self.state_version != version

    # Menus

    def rebuild_player_menu(self, player: Player) -> None:
        """Show the player the actions available to them right now."""
        user = self.get_user(player)
        if not user:
            return
        items = [
            MenuItem(text=ra.label, id=ra.action.id)
            for ra in self.get_all_visible_actions(player)
        ]
        user.show_menu("turn_menu", items)

    def rebuild_all_menus(self) -> None:
        for player in self.players:
            self.rebuild_player_menu(player)
