"""Entities: named, positioned collections of components."""

from __future__ import annotations

from dataclasses import dataclass, field

from kokiri.component import Component, ComponentType
from kokiri.utils import uuid
from kokiri.vector import Vector2


@dataclass
class EntityProperties:
    """Initial name, size and position of an entity."""

    name: str
    size: Vector2 = field(default_factory=Vector2)
    position: Vector2 = field(default_factory=Vector2)


class Entity:
    """A unit of the game world that holds user-chosen components."""

    def __init__(self, properties: EntityProperties) -> None:
        self._name = properties.name
        self._x = int(properties.position.x)
        self._y = int(properties.position.y)
        self._width = int(properties.size.x)
        self._height = int(properties.size.y)
        self._uuid = uuid()
        self._components: list[Component] = []
        self._elapsed = 0.0
        self._events = 0

    @property
    def name(self) -> str:
        """The entity's name."""
        return self._name

    @property
    def uuid(self) -> str:
        """A random identifier given at creation."""
        return self._uuid

    @property
    def position(self) -> Vector2:
        """A copy of the entity's top-left position."""
        return Vector2(self._x, self._y)

    @property
    def size(self) -> Vector2:
        """A copy of the entity's width and height."""
        return Vector2(self._width, self._height)

    @property
    def components(self) -> tuple[Component, ...]:
        """The attached components, in the order they were added."""
        return tuple(self._components)

    @property
    def elapsed(self) -> float:
        """Milliseconds the entity has been advanced by through update."""
        return self._elapsed

    @property
    def events(self) -> int:
        """How many times the entity has been given an event pass."""
        return self._events

    def set_position(self, x: int | Vector2, y: int | None = None) -> None:
        """Move the entity to (x, y), or to a vector passed as x alone."""
        if isinstance(x, Vector2):
            if y is not None:
                raise TypeError("y must not be given together with a vector")
            x, y = x.x, x.y
        elif y is None:
            raise TypeError("set_position needs a vector or both x and y")
        self._x = int(x)
        self._y = int(y)

    def add_component(self, component: Component) -> None:
        """Attach a component to the entity."""
        self._components.append(component)

    def remove_component(self, component: Component) -> None:
        """Detach every occurrence of the component; absent ones are ignored."""
        self._components = [c for c in self._components if c is not component]

    def update(self, dt: float) -> None:
        """Advance the entity's clock by dt milliseconds."""
        self._elapsed += dt

    def render(self) -> None:
        """Draw every sprite component at the entity's position."""
        for component in self._components:
            if component.kind is ComponentType.SPRITE:
                component.render(self._x, self._y)  # type: ignore[call-arg]

    def event(self) -> None:
        """Record an event pass; entities have no input handling of their own."""
        self._events += 1

    def play(self, music: str = "") -> None:
        """Play the first soundtrack component attached; music is not used yet."""
        track = next(
            (c for c in self._components if c.kind is ComponentType.SOUNDTRACK),
            None,
        )
        if track is not None:
            track.play()  # type: ignore[attr-defined]