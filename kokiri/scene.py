"""Scenes: named groups of entities with bound callbacks."""

from __future__ import annotations

from typing import Any

from kokiri import log
from kokiri.entity import Entity
from kokiri.functions import Callback, FunctionType


class Scene:
    """A named collection of entities and user callbacks run by the game loop."""

    def __init__(self, window: Any, name: str) -> None:
        self.window = window
        self._name = name
        self._entities: dict[str, Entity] = {}
        self._functions: dict[FunctionType, Callback] = {}

    @property
    def name(self) -> str:
        """The scene's name."""
        return self._name

    @property
    def entities(self) -> tuple[Entity, ...]:
        """The scene's entities in the order they were added."""
        return tuple(self._entities.values())

    def bind(self, kind: FunctionType, function: Callback) -> None:
        """Bind a callback to a loop stage; the first binding for a stage is kept."""
        self._functions.setdefault(kind, function)

    def add_entity(self, entity: Entity) -> None:
        """Add an entity; names must be unique within the scene."""
        if entity.name in self._entities:
            raise ValueError(f"failed to insert entity {entity.name}")
        self._entities[entity.name] = entity

    def remove_entity(self, entity: Entity) -> None:
        """Remove the entity if it is in the scene."""
        for name, held in self._entities.items():
            if held is entity:
                del self._entities[name]
                break

    def update(self, dt: float) -> None:
        """Update every entity by dt milliseconds."""
        for entity in self._entities.values():
            entity.update(dt)

    def render(self) -> None:
        """Render every entity."""
        for entity in self._entities.values():
            entity.render()

    def event(self) -> None:
        """Run the bound event callback, logging when none is bound."""
        function = self._functions.get(FunctionType.EVENT)
        if function is None:
            log.error("failed to get event function on scene ", self._name)
            return
        function()