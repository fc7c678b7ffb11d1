"""Game objects: the paddles, the ball and the playing field."""

from __future__ import annotations

import itertools
import math
import random
from enum import Enum

from .vector import Vector2

_ids = itertools.count(1)


class CollisionType(Enum):
    """Which border of the field an object touches."""

    NONE = 0
    TOP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4


def _inside_box(center: Vector2, half_width: int, half_height: int, point: Vector2) -> bool:
    return (
        center.x - half_width <= point.x <= center.x + half_width
        and center.y - half_height <= point.y <= center.y + half_height
    )


class GameObject:
    """An object with a unique id, a position and a velocity."""

    def __init__(self) -> None:
        self.id: int = next(_ids)
        self.position = Vector2()
        self.velocity = Vector2()

    def update(self, delta_time: float) -> None:
        """Move the object along its velocity for ``delta_time`` seconds."""
        self.position = self.position + self.velocity * delta_time


class Paddle(GameObject):
    """A player's paddle."""

    SPEED = 300.0

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self._width = int(width)
        self._height = int(height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def check_collision_point(self, point: Vector2) -> bool:
        """Return True if ``point`` lies within the paddle, borders included."""
        return _inside_box(self.position, self._width // 2, self._height // 2, point)


class Ball(GameObject):
    """The ball, a square of side ``radius`` centred on its position."""

    SPEED = 450.0

    def __init__(self, radius: int, rng: random.Random | None = None) -> None:
        super().__init__()
        self._radius = int(radius)
        self._last_paddle_id_collided = 0
        self._rng = rng if rng is not None else random.Random()

    @property
    def radius(self) -> int:
        return self._radius

    @property
    def last_paddle_id_collided(self) -> int:
        """Id of the last paddle the ball touched, or 0 if none."""
        return self._last_paddle_id_collided

    def reset_last_paddle_id_collided(self) -> None:
        """Forget which paddle the ball touched last."""
        self._last_paddle_id_collided = 0

    def choose_random_direction(self) -> None:
        """Give the ball a random direction at full speed, mostly horizontal."""
        y = self._rng.random() / 2
        x = math.sqrt(1 - y * y)
        x = x if self._rng.random() <= 0.5 else -x
        y = y if self._rng.random() <= 0.5 else -y
        self.velocity = Ball.SPEED * Vector2(x, y)

    def _corners(self) -> tuple[Vector2, ...]:
        half = self._radius // 2
        px, py = self.position
        return (
            Vector2(px - half, py + half),
            Vector2(px + half, py + half),
            Vector2(px - half, py - half),
            Vector2(px + half, py - half),
        )

    def check_collision(self, paddle: Paddle) -> bool:
        """Return True if the ball touches ``paddle``, remembering the paddle."""
        if any(paddle.check_collision_point(corner) for corner in self._corners()):
            self._last_paddle_id_collided = paddle.id
            return True
        return False

    def check_collision_point(self, point: Vector2) -> bool:
        """Return True if ``point`` lies within the ball, borders included."""
        half = self._radius // 2
        return _inside_box(self.position, half, half, point)


class Field(GameObject):
    """The playing field, centred on the origin."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__()
        self._width = int(width)
        self._height = int(height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def check_border_collision(self, obj: Ball | Paddle) -> CollisionType:
        """Return which border ``obj`` touches.

        Paddles are checked against the top and bottom only; balls against
        all four borders, in the order top, bottom, right, left.
        """
        half_w = self._width // 2
        half_h = self._height // 2
        x, y = obj.position
        if isinstance(obj, Ball):
            checks = (
                (Vector2(x, half_h), CollisionType.TOP),
                (Vector2(x, -half_h), CollisionType.DOWN),
                (Vector2(half_w, y), CollisionType.RIGHT),
                (Vector2(-half_w, y), CollisionType.LEFT),
            )
        elif isinstance(obj, Paddle):
            checks = (
                (Vector2(x, half_h), CollisionType.TOP),
                (Vector2(x, -half_h), CollisionType.DOWN),
            )
        else:
            raise TypeError(f"cannot check border collision of {type(obj).__name__}")
        for point, kind in checks:
            if obj.check_collision_point(point):
                return kind
        return CollisionType.NONE