"""A camera tied to an entity, and the camera component."""

from __future__ import annotations

from kokiri.component import Component, ComponentType
from kokiri.entity import Entity
from kokiri.vector import Vector2


class Camera:
    """A view position with a speed, attached to an entity."""

    def __init__(self, position: Vector2, speed: Vector2, entity: Entity) -> None:
        self._position = Vector2(position.x, position.y)
        self._speed = Vector2(speed.x, speed.y)
        self.entity = entity
        self._elapsed = 0.0

    @property
    def coordinates(self) -> Vector2:
        """A copy of the camera position."""
        return Vector2(self._position.x, self._position.y)

    @property
    def speed(self) -> Vector2:
        """A copy of the camera speed."""
        return Vector2(self._speed.x, self._speed.y)

    @property
    def elapsed(self) -> float:
        """Milliseconds the camera has been advanced by through update."""
        return self._elapsed

    def update(self, dt: float) -> None:
        """Advance the camera's clock by dt milliseconds; its position stays put."""
        self._elapsed += dt


class CameraFollower(Component):
    """A camera component; it draws nothing."""

    def __init__(self) -> None:
        super().__init__(ComponentType.CAMERA)

    def render(self) -> None:
        """Draw nothing; a camera has no image."""

    def update(self, dt: float) -> None:
        """Advance the component's clock by dt milliseconds."""
        super().update(dt)