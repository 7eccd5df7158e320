"""Images cut into equally sized tiles."""

from __future__ import annotations

from typing import Any

import pygame

from kokiri.sprite import Sprite
from kokiri.vector import Vector2


class Tileset:
    """An image divided into a grid of tiles, numbered row by row."""

    def __init__(self, window: Any, tileset: str, dimension: Vector2) -> None:
        tile_width, tile_height = int(dimension.x), int(dimension.y)
        if tile_width <= 0 or tile_height <= 0:
            raise ValueError(f"tile dimension must be positive, got {dimension!r}")
        self.window = window
        self._filename = tileset
        self._sprite = Sprite(window, tileset)
        self._tile_width = tile_width
        self._tile_height = tile_height
        self._rows = self._sprite.height // tile_height
        self._columns = self._sprite.width // tile_width

    @property
    def filename(self) -> str:
        """The image file of the tileset."""
        return self._filename

    @property
    def sprite(self) -> Sprite:
        """The whole tileset image."""
        return self._sprite

    @property
    def tile_width(self) -> int:
        """The width of one tile."""
        return self._tile_width

    @property
    def tile_height(self) -> int:
        """The height of one tile."""
        return self._tile_height

    @property
    def rows(self) -> int:
        """How many whole tile rows the image holds."""
        return self._rows

    @property
    def columns(self) -> int:
        """How many whole tile columns the image holds."""
        return self._columns

    @property
    def count(self) -> int:
        """The number of tiles in the set."""
        return self._rows * self._columns

    def tile_rect(self, index: int) -> pygame.Rect:
        """The area of the image holding tile index."""
        if not 0 <= index < self.count:
            raise IndexError(f"tile index out of range: {index}")
        row, column = divmod(index, self._columns)
        return pygame.Rect(
            column * self._tile_width,
            row * self._tile_height,
            self._tile_width,
            self._tile_height,
        )

    def draw(self, index: int, x: int, y: int) -> None:
        """Draw tile index with its top-left corner at (x, y)."""
        self.window.surface.blit(self._sprite.image, (x, y), self.tile_rect(index))

    def render(self, index: int) -> None:
        """Draw tile index at the window's top-left corner."""
        self.draw(index, 0, 0)