"""Base class for the parts an entity is made of."""

from __future__ import annotations

from enum import Enum, auto


class ComponentType(Enum):
    """The kind of a component."""

    SPRITE = auto()
    SOUNDTRACK = auto()
    TILEMAP = auto()
    CAMERA = auto()


class Component:
    """A part of an entity; subclasses override render and update."""

    def __init__(self, kind: ComponentType) -> None:
        if not isinstance(kind, ComponentType):
            raise TypeError(f"kind must be a ComponentType, got {kind!r}")
        self._kind = kind
        self._elapsed = 0.0

    @property
    def kind(self) -> ComponentType:
        """The kind this component was created with."""
        return self._kind

    @property
    def elapsed(self) -> float:
        """Milliseconds this component has been advanced by through update."""
        return self._elapsed

    def render(self) -> None:
        """Draw the component; does nothing by default."""

    def update(self, dt: float) -> None:
        """Advance the component by dt milliseconds."""
        self._elapsed += dt