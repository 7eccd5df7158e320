"""Audio mixer lifetime and playable soundtracks."""

from __future__ import annotations

import pygame

from kokiri import log
from kokiri.component import Component, ComponentType

_FREQUENCY = 44100
_SAMPLE_SIZE = -16
_CHANNELS = 2
_BUFFER = 2048
_FADE_OUT_MS = 350


class Sound:
    """Starts the audio mixer and shuts it down on close."""

    def __init__(self) -> None:
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            log.error("failed to initialize audio, reason ", exc)

    @property
    def available(self) -> bool:
        """Whether the mixer is running."""
        return pygame.mixer.get_init() is not None

    def close(self) -> None:
        """Shut the mixer down."""
        log.info("destroying mixer")
        pygame.mixer.quit()


class Track(Component):
    """A soundtrack component loaded from an audio file."""

    def __init__(self, filename: str) -> None:
        super().__init__(ComponentType.SOUNDTRACK)
        self._filename = filename
        self._closed = False
        try:
            pygame.mixer.init(
                frequency=_FREQUENCY,
                size=_SAMPLE_SIZE,
                channels=_CHANNELS,
                buffer=_BUFFER,
            )
        except pygame.error as exc:
            log.error("failed to open audio device, reason ", exc)
        self._sound: pygame.mixer.Sound | None = None
        try:
            self._sound = pygame.mixer.Sound(filename)
        except (pygame.error, OSError) as exc:
            log.error("failed to open audio track ", filename, ", reason ", exc)

    @property
    def filename(self) -> str:
        """The file the track was loaded from."""
        return self._filename

    @property
    def loaded(self) -> bool:
        """Whether the audio file was loaded."""
        return self._sound is not None

    def play(self, times: int = -1) -> None:
        """Play the track times times, or forever when times is negative."""
        if self._sound is None:
            return
        loops = -1 if times < 0 else max(times, 1) - 1
        self._sound.play(loops=loops)

    def stop(self) -> None:
        """Fade the track out."""
        if self._sound is None:
            return
        self._sound.fadeout(_FADE_OUT_MS)

    def close(self) -> None:
        """Close the audio device; closing twice does nothing."""
        if self._closed:
            return
        self._closed = True
        log.info("closing audio track")
        pygame.mixer.quit()