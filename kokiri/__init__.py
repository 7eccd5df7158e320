"""A small 2D game engine on pygame with scenes, entities, components and a resource pool."""

__version__ = "0.1.0"