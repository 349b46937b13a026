"""Enemy ships that drift down the screen."""

from __future__ import annotations

from spacewar.constants import WINDOW_HEIGHT
from spacewar.geometry import Body, FloatRect

ENEMY_TEXTURE_RECT = (100, 98)
ENEMY_SCALE = 0.5


class Enemy:
    """An enemy moving straight down at a fixed speed."""

    def __init__(
        self,
        position: tuple[float, float],
        speed: float,
        texture_size: tuple[float, float],
    ) -> None:
        texture_width, texture_height = texture_size
        self.body = Body(
            position[0],
            position[1],
            ENEMY_TEXTURE_RECT[0],
            ENEMY_TEXTURE_RECT[1],
            origin_x=texture_width / 2,
            origin_y=texture_height / 2,
            scale_x=ENEMY_SCALE,
            scale_y=ENEMY_SCALE,
        )
        self.velocity = (0.0, speed)
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
        return self.body.y > WINDOW_HEIGHT

    def mark_for_removal(self) -> None:
        self.marked_for_removal = True