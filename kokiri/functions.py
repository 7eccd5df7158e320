"""Kinds of user callbacks a scene can hold."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable

Callback = Callable[[], None]


class FunctionType(Enum):
    """The game-loop stage a bound callback runs in."""

    RENDER = auto()
    UPDATE = auto()
    EVENT = auto()