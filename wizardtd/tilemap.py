"""The play field grid: tiles, map files and path distances."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Iterable

from wizardtd.vector import Vec2

MAP_WIDTH = 20
MAP_HEIGHT = 13
BLOCK_SIZE = 64
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))
UNREACHABLE = -1
CORRUPTED_MESSAGE = "Map data is corrupted."


class MapError(ValueError):
    """Raised when map data cannot be read."""


class TileType(IntEnum):
    DIRT = 0
    FLOOR = 1
    OCCUPIED = 2


def grid_of(point: Vec2) -> tuple[int, int]:
    """The grid cell that contains a pixel position."""
    return math.floor(point.x / BLOCK_SIZE), math.floor(point.y / BLOCK_SIZE)


def cell_center(x: int, y: int) -> Vec2:
    """Pixel position of the center of a grid cell."""
    return Vec2(x * BLOCK_SIZE + BLOCK_SIZE // 2, y * BLOCK_SIZE + BLOCK_SIZE // 2)


def client_size() -> Vec2:
    """Pixel size of the play field."""
    return Vec2(MAP_WIDTH * BLOCK_SIZE, MAP_HEIGHT * BLOCK_SIZE)


@dataclass
class TileMap:
    """A grid of tiles, indexed as ``rows[y][x]``."""

    rows: list[list[TileType]]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @classmethod
    def parse(cls, text: str) -> TileMap:
        """Build a map from '0' (dirt) and '1' (floor) characters; whitespace is ignored."""
        cells: list[TileType] = []
        for char in text:
            if char.isspace():
                continue
            if char == "0":
                cells.append(TileType.DIRT)
            elif char == "1":
                cells.append(TileType.FLOOR)
            else:
                raise MapError(CORRUPTED_MESSAGE)
        if len(cells) != MAP_WIDTH * MAP_HEIGHT:
            raise MapError(CORRUPTED_MESSAGE)
        rows = [cells[y * MAP_WIDTH:(y + 1) * MAP_WIDTH] for y in range(MAP_HEIGHT)]
        return cls(rows)

    @classmethod
    def load(cls, path: str | PathLike[str]) -> TileMap:
        """Read a map file."""
        return cls.parse(Path(path).read_text())

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> TileType:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def set_tile(self, x: int, y: int, tile: TileType) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        self.rows[y][x] = tile

    def walkable_cells(self) -> list[tuple[int, int]]:
        """All dirt cells in row-major order."""
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, tile in enumerate(row)
            if tile is TileType.DIRT
        ]

    def distances_to(self, end: Iterable[float]) -> list[list[int]]:
        """Breadth-first step counts from every dirt cell to ``end``; -1 where unreachable."""
        ex, ey = (int(v) for v in end)
        distances = [[UNREACHABLE] * self.width for _ in range(self.height)]
        if not self.in_bounds(ex, ey) or self.rows[ey][ex] is not TileType.DIRT:
            return distances
        distances[ey][ex] = 0
        queue = deque([(ex, ey)])
        while queue:
            px, py = queue.popleft()
            for dx, dy in DIRECTIONS:
                nx, ny = px + dx, py + dy
                if (
                    self.in_bounds(nx, ny)
                    and distances[ny][nx] == UNREACHABLE
                    and self.rows[ny][nx] is TileType.DIRT
                ):
                    distances[ny][nx] = distances[py][px] + 1
                    queue.append((nx, ny))
        return distances