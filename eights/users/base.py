"""Abstract User class that games interact with."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING
import uuid as uuid_module

from ..messages.localization import Localization

if TYPE_CHECKING:
    from ..games.crazyeights.state import GameSnapshot


@dataclass
class MenuItem:
    """A menu item with text and optional ID."""

    text: str
    id: str | None = None


class User(ABC):
    """
    Something sitting at the table: a person behind a renderer, a bot, or a
    test double.

    Games only ever talk to this interface. Implementations include
    TerminalUser (the console renderer), MockUser (tests) and Bot.
    """

    @property
    @abstractmethod
    def uuid(self) -> str:
        ...

    @property
    @abstractmethod
    def username(self) -> str:
        ...

    @property
    @abstractmethod
    def locale(self) -> str:
        """Locale used to render messages for this user (e.g. 'en', 'zh')."""
        ...

    @abstractmethod
    def speak(self, text: str, buffer: str = "misc") -> None:
        """
        Deliver a line of text to the user.

        Args:
            text: The message text.
            buffer: Which buffer the message belongs to (misc, activity).
        """
        ...

    def speak_l(self, message_id: str, buffer: str = "misc", **kwargs) -> None:
        """Deliver a localized message, rendered in this user's locale."""
        text = Localization.get(self.locale, message_id, **kwargs)
        self.speak(text, buffer)

    @abstractmethod
    def play_sound(
        self, name: str, volume: int = 100, pan: int = 0, pitch: int = 100
    ) -> None:
        """
        Play a sound effect.

        Args:
            name: Sound filename.
            volume: Volume 0-100.
            pan: Pan -100 to 100.
            pitch: Pitch 0-200, where 100 is normal.
        """
        ...

    @abstractmethod
    def play_music(self, name: str, looping: bool = True) -> None:
        ...

    @abstractmethod
    def stop_music(self) -> None:
        ...

    @abstractmethod
    def show_menu(
        self,
        menu_id: str,
        items: list[MenuItem],
        *,
        position: int | None = None,
    ) -> None:
        """
        Display (or replace) a menu.

        Args:
            menu_id: String identifier for this menu.
            items: Menu items; ``id`` is the action to execute when chosen.
            position: 1-based position to select (None for first item).
        """
        ...

    @abstractmethod
    def remove_menu(self, menu_id: str) -> None:
        ...

    @abstractmethod
    def update_table(self, snapshot: "GameSnapshot") -> None:
        """Receive the latest full table snapshot. Called after every transition."""
        ...

    @abstractmethod
    def clear_ui(self) -> None:
        ...


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid_module.uuid4())
