"""Per-frame input state gathered from the event queue."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Sequence

import pygame

from kokiri.vector import Vector2


class MouseButton(IntEnum):
    """Mouse buttons by their button number."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class Key(IntEnum):
    """Keyboard keys by their scancode."""

    A = 4
    B = 5
    C = 6
    D = 7
    E = 8
    F = 9
    G = 10
    H = 11
    I = 12  # noqa: E741
    J = 13
    K = 14
    L = 15
    M = 16
    N = 17
    O = 18  # noqa: E741
    P = 19
    Q = 20
    R = 21
    S = 22
    T = 23
    U = 24
    V = 25
    W = 26
    X = 27
    Y = 28
    Z = 29
    NUM_1 = 30
    NUM_2 = 31
    NUM_3 = 32
    NUM_4 = 33
    NUM_5 = 34
    NUM_6 = 35
    NUM_7 = 36
    NUM_8 = 37
    NUM_9 = 38
    NUM_0 = 39
    ESC = 41
    F1 = 58
    F2 = 59
    F3 = 60
    F4 = 61
    F5 = 62
    F6 = 63
    F7 = 64
    F8 = 65
    F9 = 66
    F10 = 67
    F11 = 68
    F12 = 69
    RIGHT = 79
    LEFT = 80
    DOWN = 81
    UP = 82


def _pressed_by_scancode() -> Sequence[bool]:
    # Iterating the wrapper yields the raw array, which is indexed by scancode.
    return tuple(pygame.key.get_pressed())


class Event:
    """Input gathered during one frame, plus a sticky quit request."""

    def __init__(
        self,
        key_state: Callable[[], Sequence[bool]] | None = None,
        mouse_state: Callable[[], tuple[int, int]] | None = None,
    ) -> None:
        self._key_state = key_state or _pressed_by_scancode
        self._mouse_state = mouse_state or pygame.mouse.get_pos
        self._mouse_click = False
        self._mouse_move = False
        self._key_down = False
        self._quit = False
        self._mouse_button: int | None = None
        self._mouse_motion: Any = None

    @property
    def mouse_moved(self) -> bool:
        """Whether the mouse moved during this frame."""
        return self._mouse_move

    def pool(self) -> None:
        """Clear the frame state and gather every pending event."""
        self.clear()
        for event in pygame.event.get():
            self.handle(event)

    def handle(self, event: Any) -> None:
        """Record one event into the frame state."""
        if event.type == pygame.MOUSEMOTION:
            self._mouse_move = True
            self._mouse_motion = event
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._mouse_click = True
            self._mouse_button = event.button
        elif event.type == pygame.KEYDOWN:
            self._key_down = True
        elif event.type == pygame.QUIT:
            self._quit = True

    def clear(self) -> None:
        """Forget the clicks, moves and key presses of the frame."""
        self._mouse_click = False
        self._mouse_move = False
        self._key_down = False

    def is_key_press(self, key: Key) -> bool:
        """Whether a key went down this frame and key is held."""
        return self._key_down and bool(self._key_state()[int(key)])

    def is_mouse_click(self, button: MouseButton) -> bool:
        """Whether the last click of this frame was with button."""
        return self._mouse_click and self._mouse_button == button

    def quit(self) -> bool:
        """Whether a quit request has been received."""
        return self._quit

    def mouse_position(self) -> Vector2:
        """The mouse position within the window."""
        x, y = self._mouse_state()
        return Vector2(x, y)