"""The game: window, input, resources and scenes driven by a frame loop."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from kokiri import log
from kokiri.component import Component, ComponentType
from kokiri.event import Event, Key
from kokiri.renderer import Renderer2D
from kokiri.resources import Resources
from kokiri.scene import Scene
from kokiri.sound import Sound, Track
from kokiri.sprite import Sprite
from kokiri.tilemap import Tilemap
from kokiri.tileset import Tileset
from kokiri.utils import extension
from kokiri.vector import Vector2
from kokiri.window import Window, WindowProperties

_SPRITE_EXTENSIONS = frozenset({".png", ".jpg"})
_SOUND_EXTENSIONS = frozenset({".ogg", ".wav"})


@dataclass
class GameProperties:
    """Run state and frame timing of a game."""

    is_running: bool = True
    is_fullscreen: bool = False
    is_debug: bool = False
    fps: int = 0
    target_fps: int = 60
    target_frame_time: float = 1000.0 / 60
    width: int = 0
    height: int = 0


@dataclass
class Resource:
    """A file to load into the game under a name, as a kind of component."""

    name: str
    filename: str
    kind: ComponentType
    dimension: Vector2 = field(default_factory=Vector2)


class Game:
    """Owns the window and resources and runs the active scene every frame."""

    def __init__(self, title: str, width: int, height: int) -> None:
        pygame.init()
        if not pygame.display.get_init():
            log.error("failed to initialize video subsystem")
            raise RuntimeError("failed to initialize video subsystem")

        self._properties = GameProperties(width=width, height=height)
        self._sound = Sound()
        self._events = Event()
        try:
            self._window = Window(WindowProperties(width, height, 0, title))
        except RuntimeError:
            self._sound.close()
            raise
        self._resources = Resources()
        self._renderer = Renderer2D(self._window)
        self._active_scene = ""
        self._scenes: dict[str, Scene] = {}
        self._closed = False

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def properties(self) -> GameProperties:
        """The run state and frame timing."""
        return self._properties

    @property
    def window(self) -> Window:
        """The game window."""
        return self._window

    @property
    def events(self) -> Event:
        """The input state gathered each frame."""
        return self._events

    @property
    def resources(self) -> Resources:
        """The pool of loaded components."""
        return self._resources

    @property
    def scenes(self) -> dict[str, Scene]:
        """A copy of the scenes by name."""
        return dict(self._scenes)

    @property
    def active_scene(self) -> Scene | None:
        """The scene run by the loop, if one by the active name exists."""
        return self._scenes.get(self._active_scene)

    def add_scene(self, scene: Scene) -> None:
        """Add a scene; a scene with a name already present is ignored."""
        self._scenes.setdefault(scene.name, scene)

    def set_active_scene(self, name: str) -> None:
        """Choose by name the scene the loop runs."""
        self._active_scene = name

    def load(self, resource: Resource) -> bool:
        """Load a resource into the pool; return False if its name is taken."""
        suffix = extension(resource.filename)
        if suffix not in _SPRITE_EXTENSIONS and suffix not in _SOUND_EXTENSIONS:
            log.info("no available load method for ", suffix, " file type")

        component: Component
        if resource.kind is ComponentType.TILEMAP:
            tileset = Tileset(self._window, resource.filename, resource.dimension)
            component = Tilemap(self._window, resource.filename, tileset)
        elif resource.kind is ComponentType.SPRITE:
            component = Sprite(self._window, resource.filename)
        elif resource.kind is ComponentType.SOUNDTRACK:
            component = Track(resource.filename)
        else:
            raise ValueError(f"resources of kind {resource.kind.name} cannot be loaded")

        loaded = self._resources.add(resource.name, component)
        if not loaded:
            log.error("failed to load resource ", resource.filename)
        return loaded

    def retrieve(self, name: str) -> Component | None:
        """Return the loaded component called name, or None after logging."""
        try:
            return self._resources.get(name)
        except KeyError:
            log.error("failed to retrieve resource ", name, " from pool")
            return None

    def render(self) -> None:
        """Clear the window, draw the active scene and show the frame."""
        self._window.surface.fill((0, 0, 0))
        scene = self.active_scene
        if scene is not None:
            scene.render()
        pygame.display.flip()

    def event(self) -> None:
        """Gather input, handle quit and debug keys, then run the scene's events."""
        events = self._events
        events.pool()

        if events.quit():
            self._properties.is_running = False
        if events.is_key_press(Key.Q) or events.is_key_press(Key.ESC):
            self._properties.is_running = False
        if events.is_key_press(Key.F1):
            self._properties.is_debug = not self._properties.is_debug
        if self._properties.is_debug:
            log.info("event happened")

        scene = self.active_scene
        if scene is not None:
            scene.event()

    def update(self, dt: float) -> None:
        """Advance the active scene by dt milliseconds."""
        scene = self.active_scene
        if scene is not None:
            scene.update(dt)

    def loop(self) -> None:
        """Render, handle input and update until the game stops running."""
        dt = 0.0
        while self._properties.is_running:
            frame_start = pygame.time.get_ticks()

            self.render()
            self.event()
            self.update(dt)

            dt = float(pygame.time.get_ticks() - frame_start)
            if dt < self._properties.target_frame_time:
                difference = self._properties.target_frame_time - dt
                if self._properties.is_debug:
                    log.info("diff ", difference, " | dt: ", dt, "ms")
                pygame.time.delay(int(difference))

    def close(self) -> None:
        """Free the resources and shut down the window and audio."""
        if self._closed:
            return
        self._closed = True
        self._resources.free()
        self._renderer.close()
        self._window.close()
        self._sound.close()