"""The boss ship: wanders, dives at the player and fires bullet fans."""

from __future__ import annotations

import math
import random
from enum import Enum, auto

from spacewar.bullet import Bullet
from spacewar.constants import SCROLL_SPEED, WINDOW_HEIGHT, WINDOW_WIDTH
from spacewar.geometry import Body, FloatRect

BOSS_TEXTURE_RECT = (200, 200)
BOSS_SCALE = 0.5
BOSS_ROTATION = 180.0
SHOOT_COOLDOWN = 3.0
BULLET_STREAMS = 3
SHOOT_ANGLE_STEP = math.radians(45.0)
MOVEMENT_CHANGE_INTERVAL = 0.2
DIVE_SPEED = 0.1
ARRIVAL_DISTANCE = 5.0
RETURN_CHANCE = 30


class Movement(Enum):
    """What the boss is currently doing."""

    HORIZONTAL = auto()
    DIVING = auto()
    RETURNING = auto()


class Boss:
    """A boss that changes its movement every few tenths of a second."""

    def __init__(
        self,
        position: tuple[float, float],
        texture_size: tuple[float, float],
        bullet_texture_size: tuple[float, float],
        now: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        texture_width, texture_height = texture_size
        self.body = Body(
            position[0],
            position[1],
            BOSS_TEXTURE_RECT[0],
            BOSS_TEXTURE_RECT[1],
            origin_x=texture_width / 2,
            origin_y=texture_height / 2,
            scale_x=BOSS_SCALE,
            scale_y=BOSS_SCALE,
            rotation=BOSS_ROTATION,
        )
        self.bullet_texture_size = bullet_texture_size
        self.bullets: list[Bullet] = []
        self.mode = Movement.HORIZONTAL
        self.horizontal_speed = 0.1
        self.dive_speed = DIVE_SPEED
        self.dive_target = (0.0, 0.0)
        self.return_target = (0.0, 0.0)
        self.movement_change_interval = MOVEMENT_CHANGE_INTERVAL
        self.shoot_cooldown = SHOOT_COOLDOWN
        self.bullet_streams = BULLET_STREAMS
        self.shoot_angle_step = SHOOT_ANGLE_STEP
        self._rng = rng if rng is not None else random.Random()
        self._movement_change_start = now
        self._last_shot = now

    @property
    def position(self) -> tuple[float, float]:
        return self.body.position

    def _return_upward(self) -> None:
        self.mode = Movement.RETURNING
        self.return_target = (self.body.x, WINDOW_HEIGHT * 0.2)

    def _choose_action(self) -> None:
        action = self._rng.randrange(4)
        if action == 0:
            self.mode = Movement.HORIZONTAL
            self.horizontal_speed = 0.0
        elif action == 1:
            self.mode = Movement.HORIZONTAL
            self.horizontal_speed = 1.0 if self._rng.randrange(2) == 0 else -1.0
        elif action == 2:
            self.mode = Movement.DIVING
            self.dive_target = (WINDOW_WIDTH / 2, WINDOW_HEIGHT * 0.7)
        elif self.mode is not Movement.DIVING:
            self._return_upward()

    def _step_toward(
        self, target: tuple[float, float], delta_time: float
    ) -> tuple[float, float] | None:
        """The step toward ``target``, or None once the boss has arrived."""
        dx = target[0] - self.body.x
        dy = target[1] - self.body.y
        distance = math.hypot(dx, dy)
        if distance <= ARRIVAL_DISTANCE:
            return None
        factor = self.dive_speed * delta_time / distance
        return (dx * factor, dy * factor)

    def update(self, delta_time: float, now: float) -> None:
        """Pick a new action when due, move, stay on screen and advance bullets."""
        if now - self._movement_change_start > self.movement_change_interval:
            self._movement_change_start = now
            self._choose_action()

        dx, dy = 0.0, SCROLL_SPEED * delta_time
        if self.mode is Movement.DIVING:
            step = self._step_toward(self.dive_target, delta_time)
            if step is None:
                self.mode = Movement.HORIZONTAL
                if self._rng.randrange(100) < RETURN_CHANCE:
                    self._return_upward()
            else:
                dx += step[0]
                dy += step[1]
        elif self.mode is Movement.RETURNING:
            step = self._step_toward(self.return_target, delta_time)
            if step is None:
                self.mode = Movement.HORIZONTAL
            else:
                dx += step[0]
                dy += step[1]
        else:
            dx = self.horizontal_speed * delta_time

        self.body.move(dx, dy)
        self.body.clamp_to_window()

        for bullet in self.bullets:
            bullet.update(delta_time)
        self.bullets = [b for b in self.bullets if not b.is_off_screen()]

    def shoot(self, now: float) -> list[Bullet]:
        """Fire a fan of bullets if the cooldown has passed; return the new ones."""
        if now - self._last_shot < self.shoot_cooldown:
            return []
        origin = self.body.position
        fired = [Bullet(origin, (0.0, 1.0), self.bullet_texture_size)]
        for i in range(1, self.bullet_streams // 2 + 1):
            angle = self.shoot_angle_step * i
            sin, cos = math.sin(angle), math.cos(angle)
            fired.append(Bullet(origin, (-sin, cos), self.bullet_texture_size))
            fired.append(Bullet(origin, (sin, cos), self.bullet_texture_size))
        self.bullets.extend(fired)
        self._last_shot = now
        return fired

    def draw(self, surface, image, bullet_image) -> None:
        self.body._blit(surface, image)
        for bullet in self.bullets:
            bullet.draw(surface, bullet_image)

    def bounds(self) -> FloatRect:
        return self.body.bounds()

    def reset_position(self, position: tuple[float, float]) -> None:
        self.body.position = position