"""A named pool of loaded components."""

from __future__ import annotations

from typing import Iterator

from kokiri import log
from kokiri.component import Component


class Resources:
    """Holds loaded components by unique name."""

    def __init__(self) -> None:
        self._resources: dict[str, Component] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._resources

    def __len__(self) -> int:
        return len(self._resources)

    def __iter__(self) -> Iterator[str]:
        return iter(self._resources)

    def add(self, name: str, component: Component) -> bool:
        """Store a component under name; return False if the name is taken."""
        if name in self._resources:
            return False
        self._resources[name] = component
        return True

    def remove(self, name: str) -> bool:
        """Drop the component stored under name; return whether one was there."""
        return self._resources.pop(name, None) is not None

    def get(self, name: str) -> Component:
        """Return the component stored under name, raising KeyError if absent."""
        try:
            return self._resources[name]
        except KeyError:
            raise KeyError(f"no resource named {name!r}") from None

    def free(self) -> None:
        """Release every stored component and empty the pool."""
        log.info("destroying resources")
        for component in self._resources.values():
            close = getattr(component, "close", None)
            if callable(close):
                close()
        self._resources.clear()