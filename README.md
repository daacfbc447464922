# snakegame

A classic snake game that runs in an ANSI terminal. Steer the snake with the
arrow keys, eat the apples, and avoid the walls and your own tail. The snake
speeds up as it grows.

## Installing

```
pip install .
```

## Playing

```
snakegame
snakegame --seed 42
```

- The arrow keys change direction. You cannot reverse straight back into
  yourself.
- Each apple eaten adds one to your score. The snake's tick starts at 150 ms
  and gets 5 ms shorter per point, down to 50 ms. The snake reaches at most
  100 cells.
- Hitting the border or your own body ends the game. The final score is shown,
  and any key then leaves the game and restores the terminal.
- `--seed` fixes the random placement of the apples, so a game can be replayed.

The screen text ("Pontuação", "FIM DE JOGO!") is in Portuguese.

The game needs a POSIX terminal of at least 80×24 characters. While it runs,
the terminal is in raw mode with signals turned off, so Ctrl-C does not stop
it. There is no pause, no menu and no high-score storage. A game ends only when
the snake crashes.

## Using the pieces

Each module can be used on its own:

- `snakegame.screen.Screen(stream=None)` writes ANSI escape sequences to a
  stream, which is standard output by default. It has `gotoxy(x, y)`, which
  clamps to the 80×24 screen, and `set_color(fg, bg)`, which takes `Color`
  values. It also has `clear()`, `draw_borders()`, `init(draw_borders)`,
  `destroy()`, the cursor and text-mode helpers, and `update()`, which flushes
  the stream.
- `snakegame.keyboard.Keyboard(fd=0)` is a context manager. It puts a terminal
  into non-canonical, no-echo mode and restores it on exit. `key_hit()` checks
  for a waiting key without blocking. `read_char()` returns the next byte and
  raises `EOFError` at end of input.
- `snakegame.timer.Timer(clock=None)` is a millisecond interval timer. It has
  `start(delay_ms)`, `update(delay_ms)`, `stop()`, `elapsed_ms()`,
  `time_over()` and `describe()`. The clock can be replaced.
- `snakegame.game.Game(rng=None)` holds the game state: `body`, `direction`,
  `food` and `over`. Its methods are `step()` (returns `True` when food was
  eaten), `turn(key)`, `handle_input(keyboard)`, `place_food()`, `score()` and
  `delay_ms()`. The module also provides the drawing functions `draw_snake`,
  `erase_snake`, `draw_food`, `draw_score` and `draw_game_over`, plus
  `run(screen, keyboard, timer, game)` and `main(argv=None)`.

```python
import random
from snakegame.game import Game

game = Game(random.Random(1))
game.step()
print(game.score(), game.delay_ms())
```

## Running the tests

```
pip install .[test]
pytest
```