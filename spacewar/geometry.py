"""Axis-aligned rectangles and positioned sprite bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass

from spacewar.constants import WINDOW_HEIGHT, WINDOW_WIDTH


@dataclass(frozen=True)
class FloatRect:
    """A rectangle given by its top-left corner and its size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _span(self) -> tuple[float, float, float, float]:
        return (
            min(self.left, self.right),
            min(self.top, self.bottom),
            max(self.left, self.right),
            max(self.top, self.bottom),
        )

    def intersects(self, other: FloatRect) -> bool:
        """Whether the two rectangles overlap with a non-empty area."""
        a_left, a_top, a_right, a_bottom = self._span()
        b_left, b_top, b_right, b_bottom = other._span()
        return max(a_left, b_left) < min(a_right, b_right) and max(a_top, b_top) < min(
            a_bottom, b_bottom
        )

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; right and bottom edges are excluded."""
        left, top, right, bottom = self._span()
        return left <= x < right and top <= y < bottom


@dataclass
class Body:
    """A sprite's placement: position, texture-rect size, origin, scale and rotation."""

    x: float
    y: float
    width: float
    height: float
    origin_x: float = 0.0
    origin_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    rotation: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.x, self.y = value

    def bounds(self) -> FloatRect:
        """The bounding box of the transformed sprite in window coordinates."""
        angle = math.radians(self.rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        xs, ys = [], []
        for cx, cy in ((0.0, 0.0), (self.width, 0.0), (0.0, self.height), (self.width, self.height)):
            px = (cx - self.origin_x) * self.scale_x
            py = (cy - self.origin_y) * self.scale_y
            xs.append(px * cos - py * sin + self.x)
            ys.append(px * sin + py * cos + self.y)
        left, top = min(xs), min(ys)
        return FloatRect(left, top, max(xs) - left, max(ys) - top)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def clamp_to_window(self) -> None:
        """Pull the position back inside the window.

        Each check works from the position as it was before clamping, so a
        later correction can undo an earlier one on the other axis.
        """
        x, y = self.x, self.y
        if x < 0:
            self.position = (0.0, y)
        if y < 0:
            self.position = (x, 0.0)
        if x > WINDOW_WIDTH:
            self.position = (float(WINDOW_WIDTH), y)
        if y > WINDOW_HEIGHT:
            self.position = (x, float(WINDOW_HEIGHT))

    def _blit(self, surface, image) -> None:
        """Draw ``image`` onto ``surface`` placed, scaled and rotated like this body."""
        import pygame

        image_width, image_height = image.get_size()
        region = image.subsurface(
            (0, 0, min(int(self.width), image_width), min(int(self.height), image_height))
        )
        size = (
            max(1, round(region.get_width() * abs(self.scale_x))),
            max(1, round(region.get_height() * abs(self.scale_y))),
        )
        sprite = pygame.transform.scale(region, size)
        if self.rotation:
            sprite = pygame.transform.rotate(sprite, -self.rotation)
        box = self.bounds()
        surface.blit(sprite, (round(box.left), round(box.top)))