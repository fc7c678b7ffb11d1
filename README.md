# pypong

A classic two-paddle Pong game drawn with pygame. Each side can be played by
a person at the keyboard or by a simple bot that follows the ball when it
heads its way. The first side to reach 11 points wins the match.

## Installing

```
pip install .
```

## Playing

```
pypong
```

An 800 × 600 window titled "Pong" opens and the match starts at once. The
score is printed to the terminal at the start and each time a point is won.
The winner is announced there when the match ends. Closing the window stops
the game.

By default the left paddle belongs to a human player and the right paddle to
a bot. Either side can be changed:

```
pypong --first bot --second human
pypong --first human --second human
pypong --first bot --second bot
```

`--first` sets who plays the left paddle and `--second` sets who plays the
right one. Each takes `human` or `bot`.

### Keys

| Side  | Up       | Down       |
|-------|----------|------------|
| Left  | Up arrow | Down arrow |
| Right | W        | S          |

## Rules

- The ball starts in the centre and heads in a random, mostly horizontal,
  direction.
- It bounces off the top and bottom walls and off the paddles. A paddle that
  is moving when it is hit bends the ball's path a little.
- Paddles stop at the top and bottom of the field.
- When the ball leaves through the left or right edge, the point goes to the
  player whose paddle touched it last. If no paddle touched it, nobody
  scores.
- After the ball leaves, the paddles and the ball go back to their starting
  places and the ball is served again.

## Using it as a library

The pieces of the game can also be used on their own:

- `pypong.vector.Vector2` is an immutable 2-D vector. It has `magnitude()`,
  `normal()`, `dot()`, and the `+`, `-`, unary `-` and scalar `*` operators.
- `pypong.objects` holds `Paddle`, `Ball` and `Field`, which are built on
  `GameObject`, and the `CollisionType` that
  `Field.check_border_collision()` reports. `Ball` accepts an optional
  `random.Random` so that its serves can be repeated.
- `pypong.controller` holds `PlayerController`, which reads keys through a
  callable that takes a key name (`"up"`, `"down"`, `"w"` or `"s"`), and
  `BasicBotController`. It also holds `create_bot_controller()` together
  with `BotControllerFactoryInformation`, and the enums `PlayerPosition`,
  `MovingType` and `BotControllerType`.
- `pypong.match.Match` keeps the scores and has `assign_point_at()`,
  `get_score()` and `is_ended()`.
- `pypong.render` holds `quad_vertices()` and `Renderer`. The renderer records
  a quad for each paddle and ball and draws them in white on a black pygame
  surface.
- `pypong.game.Game` is the whole game. `Game.step(delta_time)` advances it
  by one frame without opening a window, which makes it easy to simulate.
  `Game.score_line()` gives the current score as text. `Game.run()` opens the
  window and plays. `Game` also accepts an optional `random.Random` and an
  output stream for the score lines.

## What it does not do

The score is not shown in the window. It appears only in the terminal.
There is no sound, no menu and no pause. There is also no way to start a new
match without running the command again.

## Running the tests

```
pip install .[test]
pytest
```