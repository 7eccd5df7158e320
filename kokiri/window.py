"""The game window."""

from __future__ import annotations

import os
from dataclasses import dataclass

import pygame

from kokiri import log


@dataclass(frozen=True)
class WindowProperties:
    """Size, display flags and title of a window to open."""

    width: int
    height: int
    flags: int = 0
    title: str = ""


class Window:
    """A centred display window with a drawing surface."""

    def __init__(self, properties: WindowProperties) -> None:
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        try:
            if not pygame.display.get_init():
                pygame.display.init()
            surface = pygame.display.set_mode(
                (properties.width, properties.height), properties.flags
            )
        except pygame.error as exc:
            log.error("failed to initialize window, reason ", exc)
            raise RuntimeError(f"failed to initialize window: {exc}") from exc
        pygame.display.set_caption(properties.title)
        self._surface = surface
        self._width = properties.width
        self._height = properties.height
        self._title = properties.title
        self._open = True

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def surface(self) -> pygame.Surface:
        """The surface everything in the window is drawn onto."""
        return self._surface

    @property
    def width(self) -> int:
        """The width the window was opened with."""
        return self._width

    @property
    def height(self) -> int:
        """The height the window was opened with."""
        return self._height

    @property
    def title(self) -> str:
        """The window title."""
        return self._title

    @property
    def is_open(self) -> bool:
        """Whether the window has not been closed yet."""
        return self._open

    def close(self) -> None:
        """Destroy the window; closing twice does nothing."""
        if not self._open:
            return
        self._open = False
        log.info("destroying window")
        pygame.display.quit()