"""Bot user: a seat driven by the game's bot policy."""

from .base import User, MenuItem, generate_uuid


class Bot(User):
    """
    User attached to a computer-controlled player.

    Bots do not read anything the table sends them; their moves come from
    the game's ``bot_think`` via BotHelper. Everything sent here is dropped.
    """

    def __init__(self, name: str, uuid: str | None = None, locale: str = "en"):
        self._uuid = uuid or generate_uuid()
        self._username = name
        self._locale = locale

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
        pass

    def play_sound(
        self, name: str, volume: int = 100, pan: int = 0, pitch: int = 100
    ) -> None:
        pass

    def play_music(self, name: str, looping: bool = True) -> None:
        pass

    def stop_music(self) -> None:
        pass

    def show_menu(
        self, menu_id: str, items: list[MenuItem], *, position: int | None = None
    ) -> None:
        pass

    def remove_menu(self, menu_id: str) -> None:
        pass

    def update_table(self, snapshot) -> None:
        pass

    def clear_ui(self) -> None:
        pass
