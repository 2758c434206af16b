"""Tile maps in the JSON layout written by the map editor."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .constants import PIXELS_PER_METER

SPAWN_LAYER = "Spawns"
WALL_LAYER = "walls"
PLAYER_SPAWN_TILE = 82
ENEMY_SPAWN_TILE = 253
GIFT_SPAWN_TILE = 181


class MapError(ValueError):
    """A map file could not be read or is missing required content."""


@dataclass(frozen=True)
class Layer:
    name: str
    tiles: tuple[int, ...]


@dataclass(frozen=True)
class CollisionBox:
    """A rectangle of solid tiles, with its physics-space placement."""

    x: int
    y: int
    columns: int
    rows: int
    center: tuple[float, float]
    half_extents: tuple[float, float]


@dataclass
class TileMap:
    width: int
    height: int
    tile_width: int
    tile_height: int
    layers: list[Layer]
    player_spawn: tuple[float, float] = field(init=False, default=(0.0, 0.0))
    enemy_spawns: list[tuple[float, float]] = field(init=False, default_factory=list)
    gift_spawns: list[tuple[float, float]] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        if not self.layers:
            raise MapError("No layers found in the map JSON file")
        expected = self.width * self.height
        for layer in self.layers:
            if len(layer.tiles) != expected:
                raise MapError(
                    f"Layer {layer.name!r} has {len(layer.tiles)} tiles, expected {expected}"
                )
        self._parse_spawns()
        if not self.enemy_spawns or not self.gift_spawns:
            raise MapError("No spawn points found in the map JSON file")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TileMap:
        """Build a map from decoded JSON."""
        try:
            layers = [
                Layer(str(layer["name"]), tuple(int(t) for t in layer["data"]))
                for layer in data["layers"]
            ]
            return cls(
                width=int(data["width"]),
                height=int(data["height"]),
                tile_width=int(data["tilewidth"]),
                tile_height=int(data["tileheight"]),
                layers=layers,
            )
        except (KeyError, TypeError) as exc:
            raise MapError(f"Malformed map data: {exc}") from exc

    @classmethod
    def load(cls, path: str | Path) -> TileMap:
        """Read a map from a JSON file."""
        try:
            with open(path, encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as exc:
            raise MapError(f"Failed to open map file: {path}") from exc
        except json.JSONDecodeError as exc:
            raise MapError(f"Invalid JSON in map file: {path}") from exc
        return cls.from_dict(data)

    def layer(self, name: str) -> Layer | None:
        """The first layer with the given name, or None."""
        return next((layer for layer in self.layers if layer.name == name), None)

    def is_walkable(self, x: int, y: int) -> bool:
        """True if the wall layer has no tile at (x, y)."""
        index = y * self.width + x
        for layer in self.layers:
            if layer.name == WALL_LAYER and 0 <= index < len(layer.tiles):
                return layer.tiles[index] == 0
        return False

    def collision_boxes(self, layer_name: str) -> list[CollisionBox]:
        """Merge the solid tiles of a layer into greedy rectangles."""
        layer = self.layer(layer_name)
        if layer is None:
            return []
        width, height = self.width, self.height

        def solid(x: int, y: int) -> bool:
            return layer.tiles[y * width + x] > 0

        visited = [[False] * width for _ in range(height)]
        boxes: list[CollisionBox] = []
        for y in range(height):
            for x in range(width):
                if visited[y][x] or not solid(x, y):
                    continue
                columns = 1
                while x + columns < width and solid(x + columns, y) and not visited[y][x + columns]:
                    columns += 1
                rows = 1
                while y + rows < height and all(
                    solid(x + i, y + rows) and not visited[y + rows][x + i]
                    for i in range(columns)
                ):
                    rows += 1
                for row in visited[y:y + rows]:
                    row[x:x + columns] = [True] * columns
                boxes.append(self._make_box(x, y, columns, rows))
        return boxes

    def _make_box(self, x: int, y: int, columns: int, rows: int) -> CollisionBox:
        center = (
            (x + columns / 2.0) * self.tile_width / PIXELS_PER_METER,
            (y + rows / 2.0) * self.tile_height / PIXELS_PER_METER,
        )
        half = (
            columns * self.tile_width / 2.0 / PIXELS_PER_METER,
            rows * self.tile_height / 2.0 / PIXELS_PER_METER,
        )
        return CollisionBox(x, y, columns, rows, center, half)

    def _parse_spawns(self) -> None:
        layer = self.layer(SPAWN_LAYER)
        if layer is None:
            return
        for index, tile in enumerate(layer.tiles):
            y, x = divmod(index, self.width)
            pos = (float(x * self.tile_width), float(y * self.tile_height))
            if tile == PLAYER_SPAWN_TILE:
                self.player_spawn = pos
            elif tile == ENEMY_SPAWN_TILE:
                self.enemy_spawns.append(pos)
            elif tile == GIFT_SPAWN_TILE:
                self.gift_spawns.append(pos)