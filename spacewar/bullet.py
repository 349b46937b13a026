"""Projectiles fired by the player and by the boss."""

from __future__ import annotations

from spacewar.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from spacewar.geometry import Body, FloatRect

BULLET_SCALE = (0.8, 0.6)


class Bullet:
    """A projectile moving at a fixed velocity, in pixels per millisecond."""

    def __init__(
        self,
        position: tuple[float, float],
        velocity: tuple[float, float],
        texture_size: tuple[float, float],
    ) -> None:
        width, height = texture_size
        self.body = Body(
            position[0],
            position[1],
            width,
            height,
            origin_x=width / 2,
            origin_y=height / 2,
            scale_x=BULLET_SCALE[0],
            scale_y=BULLET_SCALE[1],
        )
        self.velocity = velocity
        self.marked_for_removal = False

    @property
    def position(self) -> tuple[float, float]:
        return self.body.position

    def update(self, delta_time: float) -> None:
        vx, vy = self.velocity
        self.body.move(vx * delta_time, vy * delta_time)

    def draw(self, surface, image) -> None:
        self.body._blit(surface, image)

    def bounds(self) -> FloatRect:
        return self.body.bounds()

    def is_off_screen(self) -> bool:
        x, y = self.body.position
        return x < 0 or x > WINDOW_WIDTH or y < 0 or y > WINDOW_HEIGHT

    def mark_for_removal(self) -> None:
        self.marked_for_removal = True