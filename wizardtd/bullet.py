"""Projectiles that fly straight until they hit a wall, an enemy or the edge."""

from __future__ import annotations

from typing import Any, Protocol

from wizardtd.tilemap import BLOCK_SIZE, TileMap, TileType, client_size
from wizardtd.vector import Vec2, circles_overlap, rects_overlap

BOOST_FACTOR = 1.5
COLLISION_RADIUS = 4.0


class World(Protocol):
    """What a bullet needs from the scene it flies in."""

    tilemap: TileMap
    enemies: list[Any]

    def earn_money(self, amount: int) -> None: ...


class Bullet:
    """A straight-flying projectile; the owning scene drops it once ``alive`` is False."""

    def __init__(
        self,
        position: Vec2,
        direction: Vec2,
        speed: float,
        damage: float,
        rotation: float = 0.0,
        boosted: bool = False,
    ) -> None:
        self.position = position
        self.speed = speed
        self.damage = damage * BOOST_FACTOR if boosted else damage
        self.velocity = direction.normalized() * speed
        self.rotation = rotation
        self.collision_radius = COLLISION_RADIUS
        self.size = Vec2()
        self.target: Any = None
        self.alive = True

    def _in_wall(self, tilemap: TileMap) -> bool:
        gx = int(self.position.x / BLOCK_SIZE)
        gy = int(self.position.y / BLOCK_SIZE)
        return tilemap.in_bounds(gx, gy) and tilemap.tile(gx, gy) is TileType.FLOOR

    def update(self, dt: float, world: World) -> None:
        """Move, then stop at a wall, on the first enemy touched, or off the field."""
        if not self.alive:
            return
        self.position = self.position + self.velocity * dt
        if self._in_wall(world.tilemap):
            self.alive = False
            return
        for enemy in list(world.enemies):
            if not enemy.visible or not enemy.alive:
                continue
            if circles_overlap(
                self.position, self.collision_radius, enemy.position, enemy.collision_radius
            ):
                enemy.hit(self.damage, world)
                self.alive = False
                return
        half = self.size / 2
        if not rects_overlap(self.position - half, self.position + half, Vec2(), client_size()):
            self.alive = False