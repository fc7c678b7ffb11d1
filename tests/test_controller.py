import pytest

from pypong.controller import (
    BasicBotController,
    BotControllerFactoryInformation,
    BotControllerType,
    Controller,
    MovingType,
    PlayerController,
    PlayerPosition,
    create_bot_controller,
)
from pypong.objects import Ball, Field, Paddle
from pypong.vector import Vector2


def _keys(*pressed):
    held = set(pressed)
    return lambda key: key in held


def _bot(position, ball_pos, ball_vel, paddle_y=0.0):
    paddle = Paddle(10, 80)
    paddle.position = Vector2(0.0, paddle_y)
    ball = Ball(10)
    ball.position = ball_pos
    ball.velocity = ball_vel
    return BasicBotController(position, paddle, ball), paddle


def test_controller_is_abstract():
    with pytest.raises(TypeError):
        Controller(PlayerPosition.LEFT, Paddle(10, 80))


@pytest.mark.parametrize(
    "move, expected",
    [
        (MovingType.UP, Vector2(0.0, Paddle.SPEED)),
        (MovingType.DOWN, Vector2(0.0, -Paddle.SPEED)),
        (MovingType.NONE, Vector2(0.0, 0.0)),
    ],
)
def test_move_paddle_sets_velocity(move, expected):
    paddle = Paddle(10, 80)
    paddle.velocity = Vector2(5.0, 5.0)
    controller = PlayerController(PlayerPosition.LEFT, paddle, _keys())
    controller.move_paddle(move)
    assert paddle.velocity == expected


def test_paddle_id_matches_paddle():
    paddle = Paddle(10, 80)
    controller = PlayerController(PlayerPosition.RIGHT, paddle, _keys())
    assert controller.paddle_id == paddle.id


@pytest.mark.parametrize(
    "position, pressed, expected",
    [
        (PlayerPosition.LEFT, ("up",), Vector2(0.0, Paddle.SPEED)),
        (PlayerPosition.LEFT, ("down",), Vector2(0.0, -Paddle.SPEED)),
        (PlayerPosition.LEFT, ("w",), Vector2(0.0, 0.0)),
        (PlayerPosition.LEFT, ("s",), Vector2(0.0, 0.0)),
        (PlayerPosition.RIGHT, ("w",), Vector2(0.0, Paddle.SPEED)),
        (PlayerPosition.RIGHT, ("s",), Vector2(0.0, -Paddle.SPEED)),
        (PlayerPosition.RIGHT, ("up",), Vector2(0.0, 0.0)),
        (PlayerPosition.RIGHT, (), Vector2(0.0, 0.0)),
        (PlayerPosition.LEFT, ("up", "down"), Vector2(0.0, Paddle.SPEED)),
    ],
)
def test_player_controller_keys(position, pressed, expected):
    paddle = Paddle(10, 80)
    PlayerController(position, paddle, _keys(*pressed)).update(0.016)
    assert paddle.velocity == expected


def test_bot_follows_ball_up_when_incoming():
    bot, paddle = _bot(PlayerPosition.RIGHT, Vector2(0.0, 100.0), Vector2(1.0, 0.0))
    bot.update(0.016)
    assert paddle.velocity == Vector2(0.0, Paddle.SPEED)


def test_bot_follows_ball_down_when_incoming():
    bot, paddle = _bot(PlayerPosition.LEFT, Vector2(0.0, -100.0), Vector2(-1.0, 0.0))
    bot.update(0.016)
    assert paddle.velocity == Vector2(0.0, -Paddle.SPEED)


def test_bot_stays_when_ball_within_paddle():
    bot, paddle = _bot(PlayerPosition.RIGHT, Vector2(0.0, 40.0), Vector2(1.0, 0.0))
    paddle.velocity = Vector2(0.0, 7.0)
    bot.update(0.016)
    assert paddle.velocity == Vector2(0.0, 0.0)


@pytest.mark.parametrize(
    "position, velocity",
    [
        (PlayerPosition.RIGHT, Vector2(-1.0, 0.0)),
        (PlayerPosition.LEFT, Vector2(1.0, 0.0)),
        (PlayerPosition.LEFT, Vector2(0.0, 1.0)),
    ],
)
def test_bot_ignores_ball_moving_away(position, velocity):
    bot, paddle = _bot(position, Vector2(0.0, 200.0), velocity)
    paddle.velocity = Vector2(0.0, 7.0)
    bot.update(0.016)
    assert paddle.velocity == Vector2(0.0, 0.0)


def _info(position=PlayerPosition.LEFT):
    return BotControllerFactoryInformation(
        Field(800, 600), Paddle(10, 80), Paddle(10, 80), Ball(10), position
    )


def test_factory_default_position_is_left():
    data = BotControllerFactoryInformation(Field(800, 600), Paddle(10, 80), Paddle(10, 80), Ball(10))
    bot = create_bot_controller(data)
    assert bot.position is PlayerPosition.LEFT
    assert bot.paddle_id == data.left_paddle.id


@pytest.mark.parametrize("position", list(PlayerPosition))
def test_factory_picks_paddle_for_side(position):
    data = _info(position)
    bot = create_bot_controller(data, BotControllerType.BASIC)
    expected = data.left_paddle if position is PlayerPosition.LEFT else data.right_paddle
    assert isinstance(bot, BasicBotController)
    assert bot.paddle is expected
    assert bot.ball is data.ball
    assert bot.position is position


def test_factory_rejects_unknown_type():
    with pytest.raises(ValueError):
        create_bot_controller(_info(), "clever")