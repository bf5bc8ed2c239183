"""Enemies: path following, damage, death effects and the special kinds."""

from __future__ import annotations

import logging
import math
import random
from typing import Any, Protocol

from wizardtd.effects import Effect, SummonEffect
from wizardtd.tilemap import (
    BLOCK_SIZE,
    DIRECTIONS,
    MAP_HEIGHT,
    MAP_WIDTH,
    UNREACHABLE,
    cell_center,
)
from wizardtd.vector import Vec2, circles_overlap

logger = logging.getLogger(__name__)

EXPLOSION_IMAGE = "play/explosion-1.png"
EXPLOSION_TIME = 0.5
DIRTY_EFFECT_COUNT = 10
SUMMON_IMAGE = "play/magic2.png"
SUMMON_EFFECT_TIME = 0.6
SUMMON_EFFECT_SCALE = 0.2
BERSERK_HP = 15
BERSERK_IMAGE = "play/explosion-3.png"
BERSERK_EFFECT_TIME = 0.3
SHADOW_INTERVAL = 0.2
_HALF_BLOCK = Vec2(BLOCK_SIZE // 2, BLOCK_SIZE // 2)


class World(Protocol):
    """What an enemy needs from the scene it lives in."""

    distances: list[list[int]]
    enemies: list[Any]
    effects: list[Effect]
    ground_effects: list[Effect]
    player: Any

    def hit(self) -> None: ...

    def earn_money(self, amount: int) -> None: ...

    def player_position(self) -> Vec2: ...


def _fading_effect(image: str, time_span: float, position: Vec2, scale: float = 1.0) -> SummonEffect:
    return SummonEffect(image=image, position=position, time_span=time_span, scale=scale)


def _cell_of(position: Vec2) -> tuple[int, int]:
    """Grid cell by truncation toward zero."""
    return int(position.x / BLOCK_SIZE), int(position.y / BLOCK_SIZE)


class Enemy:
    """A walking enemy that follows a precomputed grid path."""

    IMAGE = "play/enemy-1.png"

    def __init__(self, position: Vec2, radius: float, speed: float, hp: float, money: int) -> None:
        self.position = position
        self.velocity = Vec2()
        self.rotation = 0.0
        self.collision_radius = radius
        self.speed = speed
        self.hp = hp
        self.money = money
        self.reach_end_time = 0.0
        self.path: list[Vec2] = []
        self.visible = True
        self.alive = True
        self.locked_turrets: list[Any] = []
        self.locked_bullets: list[Any] = []
        self.rng = random.Random()

    def on_explode(self, world: World) -> None:
        """Add the explosion and scattered dirt effects."""
        world.effects.append(_fading_effect(EXPLOSION_IMAGE, EXPLOSION_TIME, self.position))
        for _ in range(DIRTY_EFFECT_COUNT):
            image = f"play/dirty-{self.rng.randint(1, 3)}.png"
            world.ground_effects.append(
                _fading_effect(image, float(self.rng.randint(1, 20)), self.position)
            )

    def hit(self, damage: float, world: World) -> None:
        """Take damage; on death explode, pay out and mark the enemy dead."""
        if not self.alive:
            return
        self.hp -= damage
        if self.hp > 0:
            return
        self.on_explode(world)
        for holder in (*self.locked_turrets, *self.locked_bullets):
            holder.target = None
        world.earn_money(self.money)
        self.alive = False

    def update_path(self, distances: list[list[int]]) -> None:
        """Build a shortest path from the current cell along decreasing distances."""
        x = min(max(math.floor(self.position.x / BLOCK_SIZE), 0), MAP_WIDTH - 1)
        y = min(max(math.floor(self.position.y / BLOCK_SIZE), 0), MAP_HEIGHT - 1)
        num = distances[y][x]
        if num == UNREACHABLE:
            num = 0
            logger.error("Enemy path finding error")
        path = [Vec2(0, 0)] * (num + 1)
        px, py = x, y
        while num != 0:
            hops = [
                (px + dx, py + dy)
                for dx, dy in DIRECTIONS
                if 0 <= px + dx < MAP_WIDTH
                and 0 <= py + dy < MAP_HEIGHT
                and distances[py + dy][px + dx] == num - 1
            ]
            if not hops:
                raise ValueError("distance map has no next step")
            px, py = self.rng.choice(hops)
            path[num] = Vec2(px, py)
            num -= 1
        self.path = path

    def _player_collides(self, world: World) -> bool:
        player = world.player
        return player is not None and circles_overlap(
            self.position, self.collision_radius, player.position, player.collision_radius
        )

    def update(self, dt: float, world: World) -> None:
        """Walk along the path; reaching its end costs the scene a life."""
        if self._player_collides(world):
            self.on_explode(world)
            self.alive = False
            return
        remain = self.speed * dt
        while remain != 0:
            if not self.path:
                self.hit(self.hp, world)
                world.hit()
                self.reach_end_time = 0.0
                return
            target = self.path[-1] * BLOCK_SIZE + _HALF_BLOCK
            vec = target - self.position
            distance = vec.magnitude()
            self.reach_end_time = (
                distance + (len(self.path) - 1) * BLOCK_SIZE - remain
            ) / self.speed
            if remain - distance > 0:
                self.position = target
                self.path.pop()
                remain -= distance
            else:
                self.velocity = vec.normalized() * remain / dt
                remain = 0
        self.rotation = math.atan2(self.velocity.y, self.velocity.x)
        self.position = self.position + self.velocity * dt


class SoldierEnemy(Enemy):
    IMAGE = "play/enemy-1.png"

    def __init__(self, position: Vec2) -> None:
        super().__init__(position, 50, 50, 5, 5)


class PlaneEnemy(Enemy):
    IMAGE = "play/enemy-2.png"

    def __init__(self, position: Vec2) -> None:
        super().__init__(position, 10, 50, 5, 5)


class TankEnemy(Enemy):
    """A tank whose head drifts toward a randomly chosen angle."""

    IMAGE = "play/enemy-3.png"
    HEAD_IMAGE = "play/enemy-3-head.png"

    def __init__(self, position: Vec2) -> None:
        super().__init__(position, 20, 20, 100, 50)
        self.head_position = position
        self.head_rotation = 0.0
        self.target_rotation = 0.0

    def update(self, dt: float, world: World) -> None:
        super().update(dt, world)
        self.head_position = self.position
        if self.rng.uniform(0.0, 4.0) < dt:
            self.target_rotation = self.rng.uniform(-math.pi, math.pi)
        self.head_rotation = (self.head_rotation + dt * self.target_rotation) / (1 + dt)


class DyyEnemy(Enemy):
    """Splits into two planes, one on each side, when it dies."""

    IMAGE = "play/enemy-4.png"

    def __init__(self, position: Vec2) -> None:
        super().__init__(position, 10, 50, 5, 5)

    def on_explode(self, world: World) -> None:
        super().on_explode(world)
        gx, gy = _cell_of(self.position)
        for nx in (gx - 1, gx + 1):
            if 0 <= nx < MAP_WIDTH:
                plane = PlaneEnemy(cell_center(nx, gy))
                plane.update_path(world.distances)
                world.enemies.append(plane)


class BossEnemy(Enemy):
    """Triples its speed once its health drops low."""

    IMAGE = "play/enemy-5.png"

    def __init__(self, position: Vec2) -> None:
        super().__init__(position, 10, 50, 30, 50)
        self.berserk = False

    def update(self, dt: float, world: World) -> None:
        if not self.berserk and self.hp <= BERSERK_HP:
            self.berserk = True
            self.speed *= 3
        super().update(dt, world)


class RobotEnemy(Enemy):
    """Chases the player; goes berserk with trailing shadows at low health."""

    IMAGE = "play/robot.png"

    def __init__(self, position: Vec2) -> None:
        super().__init__(position, 10, 10, 30, 50)
        self.berserk = False
        self.scale = 0.3
        self.shadow_cooldown = 0.0

    def update(self, dt: float, world: World) -> None:
        if not self.berserk and self.hp <= BERSERK_HP:
            self.berserk = True
            self.speed *= 5
            world.ground_effects.append(
                _fading_effect(BERSERK_IMAGE, BERSERK_EFFECT_TIME, self.position)
            )
        if self.berserk:
            self.shadow_cooldown -= dt
            if self.shadow_cooldown <= 0:
                self.shadow_cooldown = SHADOW_INTERVAL
                world.effects.append(
                    _fading_effect(BERSERK_IMAGE, BERSERK_EFFECT_TIME, self.position)
                )
        super().update(dt, world)
        if not self.alive:
            return
        vec = world.player_position() - self.position
        distance = vec.magnitude()
        self.velocity = vec / distance * self.speed if distance > 0 else Vec2()
        self.position = self.position + self.velocity * dt
        self.rotation = math.atan2(self.velocity.y, self.velocity.x)
        self.position = self.position + self.velocity * dt


class SkeletonEnemy(Enemy):
    IMAGE = "play/skeleton.png"

    def __init__(self, position: Vec2) -> None:
        super().__init__(position, 50, 50, 5, 5)
        self.scale = 0.2


class WitchEnemy(Enemy):
    """Summons skeletons beside itself when the player is near."""

    IMAGE = "play/witch.png"

    def __init__(self, position: Vec2) -> None:
        super().__init__(position, 50, 50, 100, 10)
        self.summon_range = 300.0
        self.summon_cooldown = 6.0
        self.summon_timer = 0.0
        self.scale = 0.08

    def update(self, dt: float, world: World) -> None:
        super().update(dt, world)
        distance = (world.player_position() - self.position).magnitude()
        self.summon_timer += dt
        if distance <= self.summon_range and self.summon_timer >= self.summon_cooldown:
            self.summon(world)
            self.summon_timer = 0.0

    def summon(self, world: World) -> None:
        """Place a skeleton and a magic circle in each neighbouring column."""
        gx, gy = _cell_of(self.position)
        for nx in (gx - 1, gx + 1):
            if not 0 <= nx < MAP_WIDTH:
                continue
            spot = cell_center(nx, gy)
            world.effects.append(
                _fading_effect(SUMMON_IMAGE, SUMMON_EFFECT_TIME, spot, SUMMON_EFFECT_SCALE)
            )
            skeleton = SkeletonEnemy(spot)
            skeleton.update_path(world.distances)
            world.enemies.append(skeleton)


_KINDS: dict[int, type[Enemy]] = {
    1: SoldierEnemy,
    2: PlaneEnemy,
    3: TankEnemy,
    4: DyyEnemy,
    5: BossEnemy,
    6: WitchEnemy,
    7: RobotEnemy,
}


def make_enemy(kind: int, position: Vec2) -> Enemy | None:
    """Create the enemy for a wave-file kind number, or None for an unknown kind."""
    cls = _KINDS.get(kind)
    return cls(position) if cls is not None else None