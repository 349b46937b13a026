"""The player's fighter and its bullets."""

from __future__ import annotations

from spacewar.bullet import Bullet
from spacewar.geometry import Body, FloatRect

PLAYER_TEXTURE_RECT = (100, 50)
SHOOT_COOLDOWN = 0.25
MAX_BULLETS = 3


class Player:
    """The player's ship; fires upward with a cooldown and a bullet limit."""

    def __init__(
        self,
        position: tuple[float, float],
        speed: float,
        texture_size: tuple[float, float],
        bullet_texture_size: tuple[float, float],
        now: float = 0.0,
    ) -> None:
        texture_width, texture_height = texture_size
        self.body = Body(
            position[0],
            position[1],
            PLAYER_TEXTURE_RECT[0],
            PLAYER_TEXTURE_RECT[1],
            origin_x=texture_width / 2,
            origin_y=texture_height / 2,
        )
        self.speed = speed
        self.bullet_texture_size = bullet_texture_size
        self.shoot_cooldown = SHOOT_COOLDOWN
        self.bullets: list[Bullet] = []
        self._last_shot = now

    @property
    def position(self) -> tuple[float, float]:
        return self.body.position

    def update(self, offset: tuple[float, float], delta_time: float) -> None:
        """Move by ``offset`` scaled by speed and time, then advance bullets."""
        dx, dy = offset
        self.body.move(dx * self.speed * delta_time, dy * self.speed * delta_time)
        self.body.clamp_to_window()
        for bullet in self.bullets:
            bullet.update(delta_time)
        self.bullets = [b for b in self.bullets if not b.is_off_screen()]

    def shoot(self, now: float) -> Bullet | None:
        """Fire a bullet if the cooldown has passed and the limit allows; return it."""
        if now - self._last_shot < self.shoot_cooldown or len(self.bullets) >= MAX_BULLETS:
            return None
        bullet = Bullet(self.body.position, (0.0, -1.0), self.bullet_texture_size)
        self.bullets.append(bullet)
        self._last_shot = now
        return bullet

    def draw(self, surface, image, bullet_image) -> None:
        self.body._blit(surface, image)
        for bullet in self.bullets:
            bullet.draw(surface, bullet_image)

    def bounds(self) -> FloatRect:
        return self.body.bounds()

    def reset_position(self, position: tuple[float, float]) -> None:
        self.body.position = position