"""Global volume and playback of music and sound effects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Hashable

import pygame

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1

MUSIC_DIR = Path("audio", "music")
SOUND_EFFECT_DIR = Path("audio", "sound_effects")


@dataclass
class GlobalVolume:
    """The master volume as a linear factor."""

    linear: float = 1.0

    def increase(self) -> float:
        """Raise the volume by one step, up to the maximum."""
        self.linear = min(self.linear + VOLUME_STEP, MAX_VOLUME)
        return self.linear

    def decrease(self) -> float:
        """Lower the volume by one step, down to silence."""
        self.linear = max(self.linear - VOLUME_STEP, MIN_VOLUME)
        return self.linear

    def label(self) -> str:
        """The volume as shown in the settings menu."""
        percent = 100.0 * self.linear
        return f"{percent:3.0f}%"


@dataclass
class _Track:
    path: Path
    playback_volume: float
    volume: float
    sound: pygame.mixer.Sound | None
    channel: pygame.mixer.Channel | None


class AudioPlayer:
    """Plays looping music per owner and one-shot sound effects.

    Changing the global volume affects music that is already playing only
    once apply_global_volume is called.
    """

    def __init__(self, assets_dir: str | Path, volume: GlobalVolume | None = None) -> None:
        self.assets_dir = Path(assets_dir)
        self.volume = volume if volume is not None else GlobalVolume()
        self._music: dict[Hashable, _Track] = {}
        self._cache: dict[Path, pygame.mixer.Sound] = {}
        self._mixer_failed = False

    def _resolve(self, folder: Path, name: str) -> Path:
        path = self.assets_dir / folder / name
        if not path.is_file():
            raise FileNotFoundError(f"audio asset not found: {path}")
        return path

    def _mixer_ready(self) -> bool:
        if pygame.mixer.get_init():
            return True
        if self._mixer_failed:
            return False
        try:
            pygame.mixer.init()
        except pygame.error:
            self._mixer_failed = True
            return False
        return True

    def _load(self, path: Path) -> pygame.mixer.Sound | None:
        if not self._mixer_ready():
            return None
        sound = self._cache.get(path)
        if sound is None:
            sound = pygame.mixer.Sound(str(path))
            self._cache[path] = sound
        return sound

    @staticmethod
    def _set_channel_volume(channel: pygame.mixer.Channel | None, volume: float) -> None:
        if channel is not None:
            channel.set_volume(min(max(volume, 0.0), 1.0))

    def play_music(self, name: str, owner: Hashable) -> None:
        """Loop the track ``name`` for ``owner``, replacing what it played before."""
        path = self._resolve(MUSIC_DIR, name)
        self.stop_music(owner)
        sound = self._load(path)
        channel = sound.play(loops=-1) if sound is not None else None
        volume = self.volume.linear
        self._set_channel_volume(channel, volume)
        self._music[owner] = _Track(path, 1.0, volume, sound, channel)

    def stop_music(self, owner: Hashable) -> bool:
        """Stop the music of ``owner``; return whether any was playing."""
        track = self._music.pop(owner, None)
        if track is None:
            return False
        if track.channel is not None:
            track.channel.stop()
        return True

    def music_owners(self) -> list[Hashable]:
        """Owners with music playing, in the order it was started."""
        return list(self._music)

    def music_volume(self, owner: Hashable) -> float:
        """The effective volume of the music played for ``owner``."""
        return self._music[owner].volume

    def play_sound(self, name: str) -> None:
        """Play the sound effect ``name`` once."""
        path = self._resolve(SOUND_EFFECT_DIR, name)
        sound = self._load(path)
        if sound is not None:
            self._set_channel_volume(sound.play(), self.volume.linear)

    def apply_global_volume(self) -> None:
        """Bring running music in line with the current global volume."""
        for track in self._music.values():
            track.volume = self.volume.linear * track.playback_volume
            self._set_channel_volume(track.channel, track.volume)