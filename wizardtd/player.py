"""The player character: movement, knockback, shooting and enemy contact."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Any, Protocol

from wizardtd.bullet import Bullet
from wizardtd.tilemap import BLOCK_SIZE, MAP_HEIGHT, MAP_WIDTH, TileMap, TileType
from wizardtd.vector import Vec2

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
HURT_TINT: Color = (255, 128, 128, 255)
COLLISION_RADIUS = 16.0
KNOCKBACK_DECAY = 0.85
KNOCKBACK_STRENGTH = 300.0
KNOCKBACK_STEP = 0.016
DAMAGE_COOLDOWN = 1.0
HIT_FLASH_TIME = 0.2
VIBRATION_AMPLITUDE = 3.5
VIBRATION_FREQUENCY = 0.6
DOUBLE_SHOT_CHANCE = 0.3
DOUBLE_SHOT_ANGLE = 0.1745


class World(Protocol):
    """What the player needs from the scene it lives in."""

    tilemap: TileMap
    enemies: list[Any]
    bullets: list[Bullet]
    potion_effect_active: bool
    enchantment_level: int

    def hit(self) -> None: ...


@dataclass
class InputState:
    """Keyboard and mouse state sampled for one frame."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    mouse: Vec2 = field(default_factory=Vec2)
    fire: bool = False
    skill_q: bool = False
    skill_e: bool = False
    skill_r: bool = False


def _walkable(tilemap: TileMap, gx: int, gy: int) -> bool:
    return (
        0 <= gx < MAP_WIDTH
        and 0 <= gy < MAP_HEIGHT
        and tilemap.tile(gx, gy) is TileType.DIRT
    )


class Player:
    """A character walking on dirt tiles, bobbing up and down and shooting on click."""

    IMAGE = "play/turret-1.png"
    BULLET_SPEED = 600.0
    BULLET_DAMAGE = 1.0

    def __init__(self, x: float, y: float, speed: float) -> None:
        self.position = Vec2(x, y)
        self.base_y = y
        self.speed = speed
        self.collision_radius = COLLISION_RADIUS
        self.size = Vec2()
        self.time_since_start = 0.0
        self.hit_timer = 0.0
        self.knockback = Vec2()
        self.damage_cooldown = 0.0
        self.flip_x = False
        self.tint: Color = WHITE
        self.enabled = True
        self.rng = random.Random()
        self._fire_was_down = False

    def _move(self, dt: float, world: World, inputs: InputState) -> None:
        velocity = Vec2(
            (inputs.right - inputs.left) * self.speed,
            (inputs.down - inputs.up) * self.speed,
        )
        if velocity.magnitude() > 0:
            velocity = velocity.normalized() * self.speed * dt
        if velocity.x < 0:
            self.flip_x = True
        elif velocity.x > 0:
            self.flip_x = False

        try_x = self.position.x + velocity.x + self.knockback.x
        try_y = self.base_y + velocity.y + self.knockback.y
        x = self.position.x
        if _walkable(world.tilemap, int(try_x / BLOCK_SIZE), int(self.base_y / BLOCK_SIZE)):
            x = try_x
        if _walkable(world.tilemap, int(x / BLOCK_SIZE), int(try_y / BLOCK_SIZE)):
            self.base_y = try_y
        self.knockback = self.knockback * KNOCKBACK_DECAY

        x = min(max(x, 0.0), float(MAP_WIDTH * BLOCK_SIZE))
        self.base_y = min(max(self.base_y, 0.0), float(MAP_HEIGHT * BLOCK_SIZE))
        bob = VIBRATION_AMPLITUDE * math.sin(
            self.time_since_start * 2 * 3.14159 * VIBRATION_FREQUENCY
        )
        self.position = Vec2(x, self.base_y + bob)

    def _shoot(self, world: World, target: Vec2) -> None:
        direction = (target - self.position).normalized()
        boosted = world.potion_effect_active
        world.bullets.append(
            Bullet(self.position, direction, self.BULLET_SPEED, self.BULLET_DAMAGE, boosted=boosted)
        )
        level = world.enchantment_level
        if level > 0:
            chance = min(DOUBLE_SHOT_CHANCE * (1 << (level - 1)), 1.0)
            if self.rng.random() < chance:
                world.bullets.append(
                    Bullet(
                        self.position,
                        direction.rotated(DOUBLE_SHOT_ANGLE),
                        self.BULLET_SPEED,
                        self.BULLET_DAMAGE,
                        boosted=boosted,
                    )
                )

    def update(self, dt: float, world: World, inputs: InputState) -> None:
        """Advance one frame: move, shoot on a fresh click, and take contact damage."""
        self.time_since_start += dt
        if self.damage_cooldown > 0:
            self.damage_cooldown -= dt

        self._move(dt, world, inputs)

        if inputs.fire and not self._fire_was_down:
            self._shoot(world, inputs.mouse)
        self._fire_was_down = inputs.fire

        for enemy in list(world.enemies):
            if not getattr(enemy, "alive", True):
                continue
            dx = self.position.x - enemy.position.x
            dy = self.base_y - enemy.position.y
            if math.hypot(dx, dy) < enemy.collision_radius + self.collision_radius:
                self.hit_by_enemy(enemy.position.x, enemy.position.y, world)

        if self.hit_timer > 0:
            self.hit_timer -= dt
            self.tint = HURT_TINT
        else:
            self.tint = WHITE

    def hit_by_enemy(self, from_x: float, from_y: float, world: World) -> None:
        """Lose a life and get pushed away, unless still recovering from the last hit."""
        if self.damage_cooldown > 0:
            return
        self.damage_cooldown = DAMAGE_COOLDOWN
        self.hit_timer = HIT_FLASH_TIME
        direction = Vec2(self.position.x - from_x, self.base_y - from_y).normalized()
        self.knockback = direction * KNOCKBACK_STRENGTH * KNOCKBACK_STEP
        world.hit()

    def shadow_ellipse(self, width: float, height: float) -> tuple[float, float, float, float]:
        """Center and radii (cx, cy, rx, ry) of the shadow under a sprite of the given size."""
        return (
            self.position.x - 2,
            self.base_y + 60,
            width * 0.6 / 2,
            height * 0.15 / 2,
        )


class Wizard(Player):
    """The playable wizard; tracks which of its skill keys are held."""

    def __init__(self, x: float, y: float, speed: float) -> None:
        super().__init__(x, y, speed)
        self.cast_skills: tuple[str, ...] = ()

    def update(self, dt: float, world: World, inputs: InputState) -> None:
        super().update(dt, world, inputs)
        held = (("Q", inputs.skill_q), ("E", inputs.skill_e), ("R", inputs.skill_r))
        self.cast_skills = tuple(name for name, down in held if down)