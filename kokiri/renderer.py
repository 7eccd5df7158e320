"""The 2D renderer bound to a window."""

from __future__ import annotations

from typing import Any

import pygame

from kokiri import log


class Renderer2D:
    """Checks image format support and keeps the window it draws into."""

    def __init__(self, window: Any) -> None:
        self.window = window
        self._extended = bool(pygame.image.get_extended())
        if not self._extended:
            log.error("failed to initialize image subsystem")

    @property
    def extended(self) -> bool:
        """Whether PNG and JPEG images can be loaded."""
        return self._extended

    @property
    def closed(self) -> bool:
        """Whether the renderer has been closed."""
        return self.window is None

    def close(self) -> None:
        """Release the window; closing twice does nothing."""
        if self.window is None:
            return
        log.info("destroying renderer")
        self.window = None