"""Image components drawn at an entity's position."""

from __future__ import annotations

from typing import Any

import pygame

from kokiri import log
from kokiri.component import Component, ComponentType


class Sprite(Component):
    """An image loaded from a file and drawn onto a window."""

    def __init__(self, window: Any, filename: str) -> None:
        super().__init__(ComponentType.SPRITE)
        self.window = window
        self._filename = filename
        try:
            image = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            log.error("failed to load image ", filename, ", reason ", exc)
            raise RuntimeError(f"failed to load image {filename}: {exc}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        self._image = image

    @property
    def filename(self) -> str:
        """The file the image was loaded from."""
        return self._filename

    @property
    def image(self) -> pygame.Surface:
        """The loaded image."""
        return self._image

    @property
    def width(self) -> int:
        """The image width in pixels."""
        return self._image.get_width()

    @property
    def height(self) -> int:
        """The image height in pixels."""
        return self._image.get_height()

    def render(self, x: int, y: int) -> None:  # type: ignore[override]
        """Draw the image with its top-left corner at (x, y)."""
        self.window.surface.blit(self._image, (x, y))