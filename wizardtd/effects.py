"""Short-lived visual effects."""

from __future__ import annotations

from dataclasses import dataclass, field

from wizardtd.vector import Vec2

Color = tuple[int, int, int, int]


@dataclass
class Effect:
    """A sprite-like visual effect; the owning scene drops it once ``alive`` is False."""

    image: str
    position: Vec2
    velocity: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    anchor: Vec2 = field(default_factory=lambda: Vec2(0.5, 0.5))
    tint: Color = (255, 255, 255, 255)
    alive: bool = True

    def update(self, dt: float) -> None:
        """Move by the current velocity."""
        self.position = self.position + self.velocity * dt


@dataclass
class SummonEffect(Effect):
    """A fixed-angle image that fades out linearly over ``time_span`` seconds."""

    time_span: float = 1.0
    scale: float = 1.0
    timer: float = 0.0
    alpha: float = 1.0

    def update(self, dt: float) -> None:
        self.timer += dt
        self.alpha = 1.0 - self.timer / self.time_span
        if self.alpha <= 0:
            self.alive = False
            return
        r, g, b, _ = self.tint
        self.tint = (r, g, b, int(self.alpha * 255))
        super().update(dt)

    def draw_rect(self, width: float, height: float) -> tuple[float, float, float, float]:
        """Destination rectangle (x, y, w, h) for an image of the given size."""
        scaled_w = width * self.scale
        scaled_h = height * self.scale
        return (
            self.position.x - self.anchor.x * scaled_w,
            self.position.y - self.anchor.y * scaled_h,
            scaled_w,
            scaled_h,
        )