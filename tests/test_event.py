import pygame

from kokiri.event import Event, Key, MouseButton
from kokiri.vector import Vector2


def _keys(*pressed):
    state = [False] * 512
    for key in pressed:
        state[int(key)] = True
    return lambda: state


def test_scancodes_match_sdl():
    assert Key(4) is Key.A
    assert Key(41) is Key.ESC
    assert Key(82) is Key.UP


def test_mouse_buttons():
    assert MouseButton(1) is MouseButton.LEFT
    assert MouseButton(3) is MouseButton.RIGHT
    assert list(MouseButton) == [MouseButton(1), MouseButton(2), MouseButton(3)]


def test_mouse_click_matches_button():
    event = Event(key_state=_keys())
    event.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    assert event.is_mouse_click(MouseButton.LEFT) is True
    assert event.is_mouse_click(MouseButton.RIGHT) is False


def test_key_press_needs_keydown():
    event = Event(key_state=_keys(Key.Q))
    assert event.is_key_press(Key.Q) is False
    event.handle(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q, scancode=int(Key.Q)))
    assert event.is_key_press(Key.Q) is True
    assert event.is_key_press(Key.ESC) is False


def test_clear_resets_frame_state_but_not_quit():
    event = Event(key_state=_keys(Key.F1))
    event.handle(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)))
    event.handle(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(1, 1), buttons=(0, 0, 0)))
    event.handle(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F1, scancode=int(Key.F1)))
    event.handle(pygame.event.Event(pygame.QUIT))
    assert event.mouse_moved is True
    event.clear()
    assert event.is_mouse_click(MouseButton.RIGHT) is False
    assert event.is_key_press(Key.F1) is False
    assert event.mouse_moved is False
    assert event.quit() is True


def test_quit_initially_false():
    assert Event(key_state=_keys()).quit() is False


def test_mouse_position_from_state():
    event = Event(key_state=_keys(), mouse_state=lambda: (10, 20))
    assert event.mouse_position() == Vector2(10, 20)