"""Test user implementation for unit and play tests."""

from dataclasses import dataclass
from typing import Any

from .base import User, MenuItem, generate_uuid


@dataclass
class Message:
    """A captured message from the test user."""

    type: str
    data: dict[str, Any]


class MockUser(User):
    """
    Mock implementation of User that captures all output for assertions.

    Set ``fail_playback`` to make every sound/music call raise, which lets
    tests check that broken audio never reaches game state.
    """

    def __init__(
        self,
        username: str,
        locale: str = "en",
        uuid: str | None = None,
        fail_playback: bool = False,
    ):
        self._uuid = uuid or generate_uuid()
        self._username = username
        self._locale = locale
        self.fail_playback = fail_playback
        self.messages: list[Message] = []
        self.menus: dict[str, dict[str, Any]] = {}
        self.snapshots: list = []

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
        self.messages.append(Message("speak", {"text": text, "buffer": buffer}))

    def play_sound(
        self, name: str, volume: int = 100, pan: int = 0, pitch: int = 100
    ) -> None:
        if self.fail_playback:
            raise RuntimeError("playback refused")
        self.messages.append(
            Message(
                "play_sound",
                {"name": name, "volume": volume, "pan": pan, "pitch": pitch},
            )
        )

    def play_music(self, name: str, looping: bool = True) -> None:
        if self.fail_playback:
            raise RuntimeError("playback refused")
        self.messages.append(Message("play_music", {"name": name, "looping": looping}))

    def stop_music(self) -> None:
        self.messages.append(Message("stop_music", {}))

    def show_menu(
        self, menu_id: str, items: list[MenuItem], *, position: int | None = None
    ) -> None:
        self.menus[menu_id] = {"items": items, "position": position}
        self.messages.append(
            Message("show_menu", {"menu_id": menu_id, "items": items, "position": position})
        )

    def remove_menu(self, menu_id: str) -> None:
        self.menus.pop(menu_id, None)
        self.messages.append(Message("remove_menu", {"menu_id": menu_id}))

    def update_table(self, snapshot) -> None:
        self.snapshots.append(snapshot)

    def clear_ui(self) -> None:
        self.menus.clear()
        self.messages.append(Message("clear_ui", {}))

    # Test helper methods

    def get_spoken_messages(self) -> list[str]:
        return [m.data["text"] for m in self.messages if m.type == "speak"]

    def get_last_spoken(self) -> str | None:
        for m in reversed(self.messages):
            if m.type == "speak":
                return m.data["text"]
        return None

    def get_sounds_played(self) -> list[str]:
        return [m.data["name"] for m in self.messages if m.type == "play_sound"]

    def get_menu_ids(self, menu_id: str = "turn_menu") -> list[str | None]:
        """Action ids of the items currently shown in a menu."""
        if menu_id not in self.menus:
            return []
        return [item.id for item in self.menus[menu_id]["items"]]

    @property
    def last_snapshot(self):
        return self.snapshots[-1] if self.snapshots else None

    def clear_messages(self) -> None:
        self.messages.clear()
