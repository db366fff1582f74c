"""Named player intents with declarative enable/visibility callbacks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from mashumaro.mixins.json import DataClassJSONMixin

if TYPE_CHECKING:
    from ..games.base import Game, Player


class Visibility(str, Enum):
    """Whether an action is listed in a player's turn menu."""

    VISIBLE = "visible"
    HIDDEN = "hidden"


@dataclass
class Action(DataClassJSONMixin):
    """
    A move a player can ask the game to make.

    Callbacks are method names looked up on the game when the action is
    resolved, so action sets stay plain data.

    Callback signatures:
    - handler: (self, player, action_id) -> None
    - is_enabled: (self, player) -> str | None
      None when the action may run, otherwise a localization key with the reason.
    - is_hidden: (self, player) -> Visibility
    - get_label: (self, player, action_id) -> str

    Actions that share one callback for many ids (one per card, one per suit)
    set ``per_id`` and get ``action_id=`` passed to is_enabled and is_hidden.
    """

    id: str
    label: str
    handler: str
    is_enabled: str
    is_hidden: str
    get_label: str | None = None
    per_id: bool = False


@dataclass
class ResolvedAction:
    """An action with its enabled/visible state and label computed for one player."""

    action: Action
    label: str
    enabled: bool
    disabled_reason: str | None
    visible: bool


@dataclass
class ActionSet(DataClassJSONMixin):
    """An ordered, named group of actions belonging to one player."""

    name: str
    _actions: dict[str, Action] = field(default_factory=dict)
    _order: list[str] = field(default_factory=list)

    def add(self, action: Action) -> None:
        self._actions[action.id] = action
        if action.id not in self._order:
            self._order.append(action.id)

    def remove(self, action_id: str) -> None:
        self._actions.pop(action_id, None)
        if action_id in self._order:
            self._order.remove(action_id)

    def remove_by_prefix(self, prefix: str) -> None:
        for aid in [aid for aid in self._actions if aid.startswith(prefix)]:
            self.remove(aid)

    def get_action(self, action_id: str) -> Action | None:
        return self._actions.get(action_id)

    def resolve_action(
        self, game: "Game", player: "Player", action: Action
    ) -> ResolvedAction:
        kwargs = {"action_id": action.id} if action.per_id else {}

        disabled_reason: str | None = None
        method = getattr(game, action.is_enabled, None)
        if method:
            disabled_reason = method(player, **kwargs)

        visible = True
        method = getattr(game, action.is_hidden, None)
        if method:
            visible = method(player, **kwargs) == Visibility.VISIBLE

        label = action.label
        if action.get_label:
            method = getattr(game, action.get_label, None)
            if method:
                label = method(player, action.id)

        return ResolvedAction(
            action=action,
            label=label,
            enabled=disabled_reason is None,
            disabled_reason=disabled_reason,
            visible=visible,
        )

    def resolve_actions(self, game: "Game", player: "Player") -> list[ResolvedAction]:
        return [
            self.resolve_action(game, player, self._actions[aid])
            for aid in self._order
            if aid in self._actions
        ]

    def get_visible_actions(
        self, game: "Game", player: "Player"
    ) -> list[ResolvedAction]:
        """Enabled, visible actions: what goes in the turn menu."""
        return [
            ra for ra in self.resolve_actions(game, player) if ra.enabled and ra.visible
        ]
