"""The Pong game: objects, players, rules and the main loop."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import TextIO

from .controller import (
    BotControllerFactoryInformation,
    Controller,
    PlayerController,
    PlayerPosition,
    create_bot_controller,
)
from .match import Match
from .objects import Ball, CollisionType, Field, Paddle
from .render import Renderer
from .vector import Vector2

WIDTH_SCREEN = 800
HEIGHT_SCREEN = 600
WIDTH_PADDLE = 10
HEIGHT_PADDLE = 80
RADIUS_BALL = 10
GOAL_SCORE = 11


class Game:
    """A Pong match between two players, each a human or a bot."""

    def __init__(
        self,
        first_player_bot: bool = False,
        second_player_bot: bool = True,
        rng: random.Random | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._out = out
        self.pressed_keys: set[str] = set()

        self.field = Field(WIDTH_SCREEN, HEIGHT_SCREEN)
        self.left_paddle = Paddle(WIDTH_PADDLE, HEIGHT_PADDLE)
        self.right_paddle = Paddle(WIDTH_PADDLE, HEIGHT_PADDLE)
        self.ball = Ball(RADIUS_BALL, rng)
        self.reset_positions()

        self.first_player = self._make_player(PlayerPosition.LEFT, first_player_bot)
        self.second_player = self._make_player(PlayerPosition.RIGHT, second_player_bot)
        self.match = Match(self.first_player, self.second_player, GOAL_SCORE)
        self.renderer = Renderer(WIDTH_SCREEN, HEIGHT_SCREEN)

    def _print(self, line: str) -> None:
        print(line, file=self._out if self._out is not None else sys.stdout)

    def _make_player(self, position: PlayerPosition, bot: bool) -> Controller:
        if bot:
            data = BotControllerFactoryInformation(
                self.field, self.left_paddle, self.right_paddle, self.ball, position
            )
            return create_bot_controller(data)
        paddle = self.left_paddle if position is PlayerPosition.LEFT else self.right_paddle
        return PlayerController(position, paddle, self.pressed_keys.__contains__)

    def reset_positions(self) -> None:
        """Put the paddles and ball at their starting places and serve."""
        self.left_paddle.position = Vector2(-0.975 * WIDTH_SCREEN / 2, 0.0)
        self.right_paddle.position = Vector2(0.975 * WIDTH_SCREEN / 2, 0.0)
        self.ball.position = Vector2(0.0, 0.0)
        self.ball.choose_random_direction()
        self.ball.reset_last_paddle_id_collided()

    def score_line(self) -> str:
        """Return the current score as a line of text."""
        first = self.match.get_score(self.first_player)
        second = self.match.get_score(self.second_player)
        return f"P1: {first}   -   {second} :P2"

    def _clamp_paddle(self, paddle: Paddle) -> None:
        collision = self.field.check_border_collision(paddle)
        if collision is CollisionType.NONE:
            return
        paddle.velocity = Vector2()
        limit = self.field.height // 2 - paddle.height // 2
        y = limit if collision is CollisionType.TOP else -limit
        paddle.position = Vector2(paddle.position.x, y)

    def check_collision_objects(self) -> None:
        """Apply scoring, bounces and paddle limits for the current positions."""
        ball = self.ball
        half_ball = ball.radius // 2
        collision = self.field.check_border_collision(ball)

        if collision in (CollisionType.LEFT, CollisionType.RIGHT):
            last = ball.last_paddle_id_collided
            if self.first_player.paddle_id == last:
                self.match.assign_point_at(self.first_player)
            elif self.second_player.paddle_id == last:
                self.match.assign_point_at(self.second_player)
            self.reset_positions()
            if last > 0:
                self._print(self.score_line())
            return

        if collision is not CollisionType.NONE:
            ball.velocity = Vector2(ball.velocity.x, -ball.velocity.y)
            if collision is CollisionType.TOP:
                distance = -abs(HEIGHT_SCREEN / 2 - (ball.position.y + half_ball))
            else:
                distance = abs(-HEIGHT_SCREEN / 2 - (ball.position.y - half_ball))
            ball.position = ball.position + Vector2(0.0, distance)

        left, right = self.left_paddle, self.right_paddle
        if ball.check_collision(left):
            direction = (Vector2(-ball.velocity.x, ball.velocity.y) + 0.2 * left.velocity).normal()
            ball.velocity = Ball.SPEED * direction
            distance = abs((left.position.x + left.width // 2) - (ball.position.x - half_ball))
            ball.position = ball.position + Vector2(distance, 0.0)
        elif ball.check_collision(right):
            direction = (Vector2(-ball.velocity.x, ball.velocity.y) + 0.2 * right.velocity).normal()
            ball.velocity = Ball.SPEED * direction
            distance = abs((right.position.x - left.width // 2) - (ball.position.x + half_ball))
            ball.position = ball.position - Vector2(distance, 0.0)

        self._clamp_paddle(left)
        self._clamp_paddle(right)

    def step(self, delta_time: float) -> None:
        """Advance the game by one frame of ``delta_time`` seconds."""
        self.check_collision_objects()
        self.first_player.update(delta_time)
        self.second_player.update(delta_time)
        self.left_paddle.update(delta_time)
        self.right_paddle.update(delta_time)
        self.ball.update(delta_time)

    def _winner_line(self) -> str:
        first = self.match.get_score(self.first_player)
        second = self.match.get_score(self.second_player)
        return f"Match ended: P{'1' if first > second else '2'} has won!"

    def run(self) -> None:
        """Open a window and play until it is closed or the match ends."""
        import pygame

        key_names = {
            pygame.K_UP: "up",
            pygame.K_DOWN: "down",
            pygame.K_w: "w",
            pygame.K_s: "s",
        }

        self._print("===== Score =====")
        self._print(self.score_line())

        pygame.init()
        try:
            screen = pygame.display.set_mode((WIDTH_SCREEN, HEIGHT_SCREEN), vsync=1)
            pygame.display.set_caption("Pong")
            clock = pygame.time.Clock()
            old_time = time.monotonic()
            closed = False
            while not closed and not self.match.is_ended():
                current_time = time.monotonic()
                delta_time = current_time - old_time

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        closed = True
                pressed = pygame.key.get_pressed()
                self.pressed_keys.clear()
                self.pressed_keys.update(
                    name for key, name in key_names.items() if pressed[key]
                )

                self.step(delta_time)

                self.renderer.update_paddle(self.left_paddle)
                self.renderer.update_paddle(self.right_paddle)
                self.renderer.update_ball(self.ball)
                self.renderer.render(screen)
                pygame.display.flip()
                clock.tick(60)

                old_time = current_time
        finally:
            pygame.quit()

        if self.match.is_ended():
            self._print(self._winner_line())


def main(argv: list[str] | None = None) -> int:
    """Start a game from the command line."""
    parser = argparse.ArgumentParser(prog="pypong", description="Play Pong.")
    parser.add_argument(
        "--first", choices=("human", "bot"), default="human",
        help="who plays the left paddle (default: human)",
    )
    parser.add_argument(
        "--second", choices=("human", "bot"), default="bot",
        help="who plays the right paddle (default: bot)",
    )
    args = parser.parse_args(argv)
    Game(args.first == "bot", args.second == "bot").run()
    return 0


if __name__ == "__main__":
    sys.exit(main())