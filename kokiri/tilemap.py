"""Tile maps read from comma separated text files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from kokiri import log
from kokiri.component import Component, ComponentType
from kokiri.utils import split
from kokiri.vector import Vector2, Vector3

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid tile number {text!r}")
    return int(match.group(1))


@dataclass
class TilemapData:
    """The header values and per-layer tile numbers of a tilemap."""

    rows: int
    columns: int
    layers: int
    tiles: list[list[int]]


def parse_tilemap(text: str) -> TilemapData:
    """Parse tilemap text.

    Blank lines are ignored. The first line holds rows, columns and layers;
    every layer is read from the first `rows` non-blank lines, header included.
    Tile numbers that cannot be read are logged and skipped.
    """
    lines = [line for line in text.split("\n") if line != ""]
    if not lines:
        raise ValueError("tilemap has no header line")
    header = split(lines[0], ",")
    if len(header) < 3:
        raise ValueError(f"tilemap header needs rows,columns,layers: {lines[0]!r}")
    rows, columns, layers = (_to_int(value) for value in header[:3])
    if rows > len(lines):
        raise ValueError(f"tilemap declares {rows} rows but has {len(lines)} lines")

    tiles: list[list[int]] = []
    for _ in range(layers):
        layer: list[int] = []
        for line in lines[: max(rows, 0)]:
            for tile in split(line, ","):
                try:
                    layer.append(_to_int(tile))
                except ValueError as exc:
                    log.error("failed to convert/store tile number, reason ", exc)
        tiles.append(layer)
    return TilemapData(rows=rows, columns=columns, layers=layers, tiles=tiles)


class Tilemap(Component):
    """Layers of tile numbers drawn with a tileset."""

    def __init__(self, window: Any, file: str, tileset: Any) -> None:
        super().__init__(ComponentType.TILEMAP)
        self.window = window
        self._file = file
        self._tileset = tileset
        try:
            text = Path(file).read_text()
        except OSError:
            log.error("failed to open tilemap file ", file)
            raise
        data = parse_tilemap(text)
        self._rows = data.rows
        self._columns = data.columns
        self._layers = data.layers
        self._tiles = data.tiles

    @property
    def file(self) -> str:
        """The file the map was read from."""
        return self._file

    @property
    def tileset(self) -> Any:
        """The tileset the map draws with."""
        return self._tileset

    @property
    def rows(self) -> int:
        """The row count from the header."""
        return self._rows

    @property
    def columns(self) -> int:
        """The column count from the header."""
        return self._columns

    @property
    def layers(self) -> int:
        """The layer count from the header."""
        return self._layers

    @property
    def tiles(self) -> tuple[tuple[int, ...], ...]:
        """The tile numbers of every layer."""
        return tuple(tuple(layer) for layer in self._tiles)

    def _layer(self, layer: int) -> list[int]:
        if not 0 <= layer < len(self._tiles):
            raise IndexError(f"layer out of range: {layer}")
        return self._tiles[layer]

    def at(self, position: Vector3) -> int:
        """The tile number at x, y on layer z, stored at x * columns + y."""
        x, y, z = (int(value) for value in position)
        tiles = self._layer(z)
        index = x * self._columns + y
        if not 0 <= index < len(tiles):
            raise IndexError(f"tile position out of range: {position!r}")
        return tiles[index]

    def render(self) -> None:
        """Draw every layer at the window origin, first layer first."""
        for layer in range(len(self._tiles)):
            self.render_layer(layer, Vector2())

    def render_layer(self, layer: int | Vector3, position: Vector2 | None = None) -> None:
        """Draw one layer at position, or at x, y of a vector whose z is the layer.

        Tile numbers outside the tileset are left empty.
        """
        if isinstance(layer, Vector3):
            if position is not None:
                raise TypeError("position must not be given together with a vector")
            position = Vector2(layer[0], layer[1])
            layer = int(layer[2])
        elif position is None:
            raise TypeError("render_layer needs a position")
        tiles = self._layer(layer)
        if self._columns <= 0:
            return
        width, height = self._tileset.tile_width, self._tileset.tile_height
        for index, value in enumerate(tiles):
            if not 0 <= value < self._tileset.count:
                continue
            row, column = divmod(index, self._columns)
            self._tileset.draw(
                value,
                int(position.x) + column * width,
                int(position.y) + row * height,
            )