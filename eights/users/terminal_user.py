"""Console renderer for a human player."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import User, MenuItem, generate_uuid
from ..game_utils.cards import card_name, suit_name
from ..messages.localization import Localization

if TYPE_CHECKING:
    from ..games.crazyeights.state import GameSnapshot


class TerminalUser(User):
    """
    A person at a terminal.

    Speech is printed as it arrives. The table and the turn menu are only
    stored here; the play loop asks for them when it is time to prompt.
    """

    def __init__(self, username: str, locale: str = "en", uuid: str | None = None):
        self._uuid = uuid or generate_uuid()
        self._username = username
        self._locale = locale
        self.menus: dict[str, list[MenuItem]] = {}
        self.snapshot: GameSnapshot | None = None

    @property
    def uuid(self) -> str:
        return self._uuid

    @property
    def username(self) -> str:
        return self._username

    @property
    def locale(self) -> str:
        return self._locale

    def speak(self, text: str, buffer: str = "misc") -> None:
        print(f"  {text}")

    def play_sound(
        self, name: str, volume: int = 100, pan: int = 0, pitch: int = 100
    ) -> None:
        pass  # No audio in the terminal

    def play_music(self, name: str, looping: bool = True) -> None:
        pass

    def stop_music(self) -> None:
        pass

    def show_menu(
        self, menu_id: str, items: list[MenuItem], *, position: int | None = None
    ) -> None:
        self.menus[menu_id] = list(items)
        if menu_id == "game_over":
            print()
            for item in items:
                print(f"  {item.text}")

    def remove_menu(self, menu_id: str) -> None:
        self.menus.pop(menu_id, None)

    def update_table(self, snapshot: "GameSnapshot") -> None:
        self.snapshot = snapshot

    def clear_ui(self) -> None:
        self.menus.clear()
        self.snapshot = None

    def get_menu(self, menu_id: str = "turn_menu") -> list[MenuItem]:
        return self.menus.get(menu_id, [])

    def render_table(self, player_id: str) -> list[str]:
        """The table as seen from ``player_id``'s seat."""
        snapshot = self.snapshot
        if snapshot is None:
            return []

        locale = self.locale
        lines = [Localization.get(locale, "table-title")]
        if snapshot.discard_top is not None:
            lines.append(
                Localization.get(
                    locale, "table-discard", card=card_name(snapshot.discard_top, locale)
                )
            )
        if snapshot.current_suit:
            lines.append(
                Localization.get(
                    locale, "table-active-suit", suit=suit_name(snapshot.current_suit, locale)
                )
            )
        lines.append(Localization.get(locale, "table-deck", count=snapshot.deck_count))

        opponents = [
            Localization.get(locale, "table-opponent", player=hand.name, count=len(hand.cards))
            for hand in snapshot.hands
            if hand.player_id != player_id
        ]
        if opponents:
            lines.append(
                Localization.get(
                    locale,
                    "table-opponents",
                    opponents=Localization.format_list_and(locale, opponents),
                )
            )

        own = snapshot.hand_of(player_id)
        if own is not None:
            if own.cards:
                lines.append(
                    Localization.get(
                        locale, "table-your-hand", cards=" ".join(c.short for c in own.cards)
                    )
                )
            else:
                lines.append(Localization.get(locale, "table-empty-hand"))

        if snapshot.status == "game_over":
            lines.append(Localization.get(locale, "table-game-over"))
        elif snapshot.turn is not None:
            turn_hand = snapshot.hand_of(snapshot.turn)
            name = turn_hand.name if turn_hand else snapshot.turn
            if snapshot.status == "suit_picking" and snapshot.turn != player_id:
                lines.append(Localization.get(locale, "table-choosing-suit", player=name))
            else:
                lines.append(Localization.get(locale, "table-turn", player=name))
        return lines
