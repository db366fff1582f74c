"""Mixin providing sound scheduling and playback for games."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..users.base import User


class GameSoundMixin:
    """Fire-and-forget sound for games.

    Playback never feeds back into game state: whatever a user's audio
    backend raises is dropped here.

    Expects on the Game class:
        - self.scheduled_sounds: list
        - self.sound_scheduler_tick: int
        - self.current_music: str
        - self.players: list[Player]
        - self.get_user(player) -> User | None
    """

    TICKS_PER_SECOND = 20  # 50ms per tick

    # ==========================================================================
    # Sound Scheduling
    # ==========================================================================

    def schedule_sound(
        self,
        sound: str,
        delay_ticks: int = 0,
        volume: int = 100,
        pan: int = 0,
        pitch: int = 100,
    ) -> None:
        """Queue a sound to play for everyone ``delay_ticks`` ticks from now."""
        target_tick = self.sound_scheduler_tick + delay_ticks
        self.scheduled_sounds.append([target_tick, sound, volume, pan, pitch])

    def clear_scheduled_sounds(self) -> None:
        self.scheduled_sounds.clear()

    def process_scheduled_sounds(self) -> None:
        """Play the sounds that are due, then advance the scheduler clock."""
        current_tick = self.sound_scheduler_tick
        remaining = []
        for scheduled in self.scheduled_sounds:
            tick, sound, volume, pan, pitch = scheduled
            if tick <= current_tick:
                self.play_sound(sound, volume, pan, pitch)
            else:
                remaining.append(scheduled)
        self.scheduled_sounds = remaining
        self.sound_scheduler_tick += 1

    # ==========================================================================
    # Sound Playback
    # ==========================================================================

    @staticmethod
    def play_sound_for(
        user: "User", name: str, volume: int = 100, pan: int = 0, pitch: int = 100
    ) -> None:
        """Play a sound for one user, ignoring playback failures."""
        try:
            user.play_sound(name, volume, pan, pitch)
        except Exception:
            pass

    def play_sound(
        self, name: str, volume: int = 100, pan: int = 0, pitch: int = 100
    ) -> None:
        """Play a sound for every seated user."""
        for player in self.players:
            user = self.get_user(player)
            if user:
                self.play_sound_for(user, name, volume, pan, pitch)

    def play_music(self, name: str, looping: bool = True) -> None:
        self.current_music = name
        for player in self.players:
            user = self.get_user(player)
            if not user:
                continue
            try:
                user.play_music(name, looping)
            except Exception:
                pass

    def stop_music(self) -> None:
        self.current_music = ""
        for player in self.players:
            user = self.get_user(player)
            if not user:
                continue
            try:
                user.stop_music()
            except Exception:
                pass
