"""Two and three dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Vector2:
    """A mutable two dimensional vector."""

    x: float = 0
    y: float = 0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, i: int) -> float:
        if i not in (0, 1):
            raise IndexError(f"Vector2 index out of range: {i!r}")
        return self.x if i == 0 else self.y

    def mag(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x**2 + self.y**2)

    def norm(self) -> None:
        """Scale the vector in place to unit length."""
        magnitude = self.mag()
        if magnitude == 0:
            raise ZeroDivisionError("cannot normalise a zero-length vector")
        self.x /= magnitude
        self.y /= magnitude

    def scale(self, n: float) -> None:
        """Multiply every component by n in place."""
        self.x *= n
        self.y *= n


@dataclass
class Vector3:
    """A mutable three dimensional vector."""

    x: float = 0
    y: float = 0
    z: float = 0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, i: int) -> float:
        if i not in (0, 1, 2):
            raise IndexError(f"Vector3 index out of range: {i!r}")
        return (self.x, self.y, self.z)[i]

    def mag(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def norm(self) -> None:
        """Scale the vector in place to unit length."""
        magnitude = self.mag()
        if magnitude == 0:
            raise ZeroDivisionError("cannot normalise a zero-length vector")
        self.x /= magnitude
        self.y /= magnitude
        self.z /= magnitude

    def scale(self, n: float) -> None:
        """Multiply every component by n in place."""
        self.x *= n
        self.y *= n
        self.z *= n