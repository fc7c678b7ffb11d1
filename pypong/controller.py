"""Controllers that move a paddle, driven by a player or by a bot."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .objects import Ball, Field, Paddle
from .vector import Vector2


class PlayerPosition(Enum):
    """Side of the field a player defends."""

    LEFT = 0
    RIGHT = 1


class MovingType(Enum):
    """How a paddle is to be moved."""

    NONE = 0
    UP = 1
    DOWN = 2


_DIRECTIONS = {
    MovingType.UP: Vector2(0.0, 1.0),
    MovingType.DOWN: Vector2(0.0, -1.0),
}


class Controller(ABC):
    """Base class of everything that steers a paddle."""

    def __init__(self, position: PlayerPosition, paddle: Paddle) -> None:
        self.position = position
        self.paddle = paddle

    @property
    def paddle_id(self) -> int:
        """Id of the paddle this controller steers."""
        return self.paddle.id

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Decide how to move the paddle for this frame."""

    def move_paddle(self, move_type: MovingType) -> None:
        """Set the paddle's velocity according to ``move_type``."""
        direction = _DIRECTIONS.get(move_type)
        if direction is None:
            self.paddle.velocity = Vector2(0.0, 0.0)
        else:
            self.paddle.velocity = Paddle.SPEED * direction


KeyQuery = Callable[[str], bool]


class PlayerController(Controller):
    """A paddle steered from the keyboard.

    ``is_pressed`` is asked whether a key is held down; keys are named
    ``"up"``, ``"down"``, ``"w"`` and ``"s"``. The left player uses the
    arrow keys, the right player uses W and S.
    """

    KEYS = {
        PlayerPosition.LEFT: ("up", "down"),
        PlayerPosition.RIGHT: ("w", "s"),
    }

    def __init__(self, position: PlayerPosition, paddle: Paddle, is_pressed: KeyQuery) -> None:
        super().__init__(position, paddle)
        self._is_pressed = is_pressed

    def update(self, delta_time: float) -> None:
        up_key, down_key = self.KEYS[self.position]
        if self._is_pressed(up_key):
            self.move_paddle(MovingType.UP)
        elif self._is_pressed(down_key):
            self.move_paddle(MovingType.DOWN)
        else:
            self.move_paddle(MovingType.NONE)


class BasicBotController(Controller):
    """A bot that follows the ball while it comes towards its side."""

    def __init__(self, position: PlayerPosition, paddle: Paddle, ball: Ball) -> None:
        super().__init__(position, paddle)
        self.ball = ball

    def update(self, delta_time: float) -> None:
        vx = self.ball.velocity.x
        incoming = (vx > 0.0 and self.position is PlayerPosition.RIGHT) or (
            vx < 0.0 and self.position is PlayerPosition.LEFT
        )
        if not incoming:
            self.move_paddle(MovingType.NONE)
            return
        half = self.paddle.height // 2
        ball_y = self.ball.position.y
        paddle_y = self.paddle.position.y
        if ball_y < paddle_y - half:
            self.move_paddle(MovingType.DOWN)
        elif ball_y > paddle_y + half:
            self.move_paddle(MovingType.UP)
        else:
            self.move_paddle(MovingType.NONE)


class BotControllerType(Enum):
    """Kinds of bot that can be created."""

    BASIC = 0


@dataclass
class BotControllerFactoryInformation:
    """Everything a bot may need to be built."""

    field: Field
    left_paddle: Paddle
    right_paddle: Paddle
    ball: Ball
    position_player: PlayerPosition = PlayerPosition.LEFT


def create_bot_controller(
    data: BotControllerFactoryInformation,
    bot_type: BotControllerType = BotControllerType.BASIC,
) -> Controller:
    """Build a bot of ``bot_type`` for the side named in ``data``."""
    if bot_type is BotControllerType.BASIC:
        paddle = data.left_paddle if data.position_player is PlayerPosition.LEFT else data.right_paddle
        return BasicBotController(data.position_player, paddle, data.ball)
    raise ValueError(f"unknown bot controller type: {bot_type!r}")