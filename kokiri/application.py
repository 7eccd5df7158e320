"""An application: a window with the renderer chosen for it."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import pygame

from kokiri.renderer import Renderer2D
from kokiri.vector import Vector2
from kokiri.window import Window, WindowProperties


class RenderType(Enum):
    """How an application draws."""

    SDL = auto()
    OPENGL = auto()


@dataclass
class ApplicationWindow:
    """Title, size, position and rendering kind of an application window."""

    title: str
    dimension: Vector2 = field(default_factory=Vector2)
    position: Vector2 = field(default_factory=Vector2)
    render_type: RenderType = RenderType.SDL


class Application:
    """Opens a window suited to the requested render type."""

    def __init__(self, window: ApplicationWindow) -> None:
        self._render_type = window.render_type
        flags = pygame.OPENGL | pygame.DOUBLEBUF if window.render_type is RenderType.OPENGL else 0
        self._window = Window(
            WindowProperties(
                width=int(window.dimension.x),
                height=int(window.dimension.y),
                flags=flags,
                title=window.title,
            )
        )
        self._renderer: Renderer2D | None = None
        if window.render_type is RenderType.SDL:
            self._renderer = Renderer2D(self._window)

    def __enter__(self) -> Application:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def render_type(self) -> RenderType:
        """The render type the application was opened with."""
        return self._render_type

    @property
    def window(self) -> Window:
        """The application window."""
        return self._window

    @property
    def renderer(self) -> Renderer2D | None:
        """The 2D renderer, present for SDL applications."""
        return self._renderer

    def close(self) -> None:
        """Close the renderer and the window."""
        if self._renderer is not None:
            self._renderer.close()
        self._window.close()