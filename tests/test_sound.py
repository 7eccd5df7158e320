import os

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from kokiri.component import ComponentType
from kokiri.sound import Sound, Track


def test_sound_close_stops_mixer(capsys):
    sound = Sound()
    sound.close()
    assert sound.available is False
    assert "destroying mixer" in capsys.readouterr().out


def test_missing_track_is_not_loaded(tmp_path, capsys):
    path = str(tmp_path / "missing.ogg")
    track = Track(path)
    try:
        assert track.loaded is False
        assert f"failed to open audio track {path}" in capsys.readouterr().err
    finally:
        track.close()


def test_track_kind_and_filename(tmp_path):
    path = str(tmp_path / "boom.wav")
    track = Track(path)
    try:
        assert track.kind is ComponentType.SOUNDTRACK
        assert track.filename == path
    finally:
        track.close()


def test_track_close_logs_once_and_stops_mixer(tmp_path, capsys):
    track = Track(str(tmp_path / "none.ogg"))
    track.close()
    track.close()
    assert capsys.readouterr().out.count("closing audio track") == 1
    assert pygame.mixer.get_init() is None