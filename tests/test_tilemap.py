from types import SimpleNamespace

import pygame
import pytest

from kokiri.component import ComponentType
from kokiri.tilemap import Tilemap, parse_tilemap
from kokiri.tileset import Tileset
from kokiri.vector import Vector2, Vector3

RED = pygame.Color(255, 0, 0)
BLUE = pygame.Color(0, 0, 255)
BLACK = pygame.Color(0, 0, 0)


def _tileset(tmp_path, window):
    surface = pygame.Surface((16, 8))
    surface.fill(RED, pygame.Rect(0, 0, 8, 8))
    surface.fill(BLUE, pygame.Rect(8, 0, 8, 8))
    path = tmp_path / "tiles.png"
    pygame.image.save(surface, str(path))
    return Tileset(window, str(path), Vector2(8, 8))


def _map_file(tmp_path, text):
    path = tmp_path / "level.map"
    path.write_text(text)
    return str(path)


def test_parse_header_and_rows():
    data = parse_tilemap("2,3,1\n1,2,3\n")
    assert (data.rows, data.columns, data.layers) == (2, 3, 1)
    assert data.tiles == [[2, 3, 1, 1, 2, 3]]


def test_parse_ignores_blank_lines():
    assert parse_tilemap("\n2,3,1\n\n1,2,3\n").tiles == parse_tilemap("2,3,1\n1,2,3").tiles


def test_every_layer_gets_its_own_list():
    data = parse_tilemap("1,2,2\n")
    assert data.tiles == [[1, 2, 2], [1, 2, 2]]
    data.tiles[0].append(9)
    assert data.tiles[1] == [1, 2, 2]


def test_bad_tile_is_logged_and_skipped(capsys):
    data = parse_tilemap("2,2,1\n5,x\n")
    assert data.tiles == [[2, 2, 1, 5]]
    assert "failed to convert/store tile number" in capsys.readouterr().err


def test_bad_header_raises():
    with pytest.raises(ValueError):
        parse_tilemap("a,b,c\n")


def test_empty_text_raises():
    with pytest.raises(ValueError):
        parse_tilemap("\n\n")


def test_too_few_lines_raises():
    with pytest.raises(ValueError):
        parse_tilemap("5,1,1\n1\n")


def test_tilemap_reads_file(tmp_path):
    tilemap = Tilemap(None, _map_file(tmp_path, "2,3,1\n1,2,3\n"), None)
    assert tilemap.kind is ComponentType.TILEMAP
    assert tilemap.tiles == ((2, 3, 1, 1, 2, 3),)
    assert tilemap.at(Vector3(0, 1, 0)) == 3
    assert tilemap.at(Vector3(1, 0, 0)) == 1


def test_at_out_of_range(tmp_path):
    tilemap = Tilemap(None, _map_file(tmp_path, "2,3,1\n1,2,3\n"), None)
    with pytest.raises(IndexError):
        tilemap.at(Vector3(5, 0, 0))
    with pytest.raises(IndexError):
        tilemap.at(Vector3(0, 0, 1))


def test_missing_file_raises(tmp_path, capsys):
    with pytest.raises(OSError):
        Tilemap(None, str(tmp_path / "missing.map"), None)
    assert "failed to open tilemap file" in capsys.readouterr().err


def test_render_layer_places_tiles_and_skips_unknown(tmp_path):
    window = SimpleNamespace(surface=pygame.Surface((16, 24)))
    tileset = _tileset(tmp_path, window)
    tilemap = Tilemap(window, _map_file(tmp_path, "2,2,1\n-1,0\n"), tileset)
    tilemap.render_layer(0, Vector2(0, 0))
    assert window.surface.get_at((0, 0)) == BLACK
    assert window.surface.get_at((0, 8)) == BLUE
    assert window.surface.get_at((8, 8)) == BLACK
    assert window.surface.get_at((0, 16)) == RED


def test_render_layer_accepts_vector3(tmp_path):
    window = SimpleNamespace(surface=pygame.Surface((16, 32)))
    tileset = _tileset(tmp_path, window)
    tilemap = Tilemap(window, _map_file(tmp_path, "1,1,1\n"), tileset)
    tilemap.render_layer(Vector3(8, 8, 0))
    assert window.surface.get_at((8, 8)) == BLUE
    assert window.surface.get_at((8, 24)) == BLUE
    assert window.surface.get_at((0, 0)) == BLACK


def test_render_draws_all_layers(tmp_path):
    window = SimpleNamespace(surface=pygame.Surface((8, 24)))
    tileset = _tileset(tmp_path, window)
    tilemap = Tilemap(window, _map_file(tmp_path, "1,1,1\n"), tileset)
    tilemap.render()
    assert [window.surface.get_at((0, y)) for y in (0, 8, 16)] == [BLUE] * 3


def test_render_layer_needs_position(tmp_path):
    tilemap = Tilemap(None, _map_file(tmp_path, "1,1,1\n"), None)
    with pytest.raises(TypeError):
        tilemap.render_layer(0)