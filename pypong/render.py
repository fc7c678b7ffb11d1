"""Drawing of paddles and the ball as white quads on a black screen."""

from __future__ import annotations

import pygame

from .objects import Ball, Paddle
from .vector import Vector2

Point = tuple[float, float]
Quad = tuple[Point, Point, Point, Point]

_BACKGROUND = (0, 0, 0)
_FOREGROUND = (255, 255, 255)


def quad_vertices(
    center: Vector2, width: int, height: int, screen_width: int, screen_height: int
) -> Quad:
    """Return the corners of a box in normalised device coordinates.

    The corners come in the order top-left, top-right, bottom-left,
    bottom-right; the screen spans -1 to 1 on both axes with y pointing up.
    """
    half_w = int(width) // 2
    half_h = int(height) // 2
    half_screen_w = int(screen_width) // 2
    half_screen_h = int(screen_height) // 2
    left = (center.x - half_w) / half_screen_w
    right = (center.x + half_w) / half_screen_w
    top = (center.y + half_h) / half_screen_h
    bottom = (center.y - half_h) / half_screen_h
    return ((left, top), (right, top), (left, bottom), (right, bottom))


def _to_pixels(point: Point, surface_width: int, surface_height: int) -> Point:
    x, y = point
    return ((x + 1.0) / 2.0 * surface_width, (1.0 - y) / 2.0 * surface_height)


class Renderer:
    """Keeps a quad for every paddle and ball and draws them all."""

    def __init__(self, width: int | None = None, height: int | None = None) -> None:
        self._screen_width = width
        self._screen_height = height
        self._quads: dict[int, Quad] = {}

    @property
    def quads(self) -> dict[int, Quad]:
        """The current quad of each object, by object id, in first-seen order."""
        return dict(self._quads)

    def set_resolution_used(self, width: int, height: int) -> None:
        """Set the resolution of the game world in screen units."""
        self._screen_width = int(width)
        self._screen_height = int(height)

    def _store(self, obj_id: int, center: Vector2, width: int, height: int) -> None:
        if self._screen_width is None or self._screen_height is None:
            raise RuntimeError("resolution must be set before objects are updated")
        self._quads[obj_id] = quad_vertices(
            center, width, height, self._screen_width, self._screen_height
        )

    def update_paddle(self, paddle: Paddle) -> None:
        """Record the current shape of ``paddle``."""
        self._store(paddle.id, paddle.position, paddle.width, paddle.height)

    def update_ball(self, ball: Ball) -> None:
        """Record the current shape of ``ball``."""
        self._store(ball.id, ball.position, ball.radius, ball.radius)

    def render(self, surface: pygame.Surface) -> None:
        """Clear ``surface`` to black and draw every recorded quad in white."""
        surface.fill(_BACKGROUND)
        width, height = surface.get_size()
        for top_left, top_right, bottom_left, bottom_right in self._quads.values():
            outline = [
                _to_pixels(corner, width, height)
                for corner in (top_left, top_right, bottom_right, bottom_left)
            ]
            pygame.draw.polygon(surface, _FOREGROUND, outline)