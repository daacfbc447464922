"""Terminal snake game: state, rules, drawing and the main loop."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass
from enum import IntEnum

from snakegame.keyboard import Keyboard
from snakegame.screen import MAXX, MAXY, MINX, MINY, Color, Screen
from snakegame.timer import Timer

MAX_SNAKE_LENGTH = 100
INITIAL_LENGTH = 3
INITIAL_DELAY_MS = 150
MIN_DELAY_MS = 50
DELAY_STEP_MS = 5

KEY_ESCAPE = 27
KEY_BRACKET = 91


@dataclass(frozen=True)
class Position:
    x: int
    y: int


class Direction(IntEnum):
    """Movement directions, valued by their classic scan codes."""

    UP = 72
    LEFT = 75
    DOWN = 80
    RIGHT = 77

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
    Direction.RIGHT: (1, 0),
}

# Final byte of an arrow-key escape sequence -> (new direction, blocked current)
_ARROWS = {
    65: (Direction.UP, Direction.DOWN),
    66: (Direction.DOWN, Direction.UP),
    67: (Direction.RIGHT, Direction.LEFT),
    68: (Direction.LEFT, Direction.RIGHT),
}


class Game:
    """Snake state and the rules that advance it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.body = [Position(10 - i, 10) for i in range(INITIAL_LENGTH)]
        self.direction = Direction.RIGHT
        self.over = False
        self.food = self.place_food()

    def place_food(self) -> Position:
        """Put food at a random spot inside the border and return it."""
        self.food = Position(
            MINX + 2 + self.rng.randrange(MAXX - MINX - 4),
            MINY + 2 + self.rng.randrange(MAXY - MINY - 4),
        )
        return self.food

    def step(self) -> bool:
        """Move the snake one cell; return True if it ate the food."""
        dx, dy = self.direction.delta
        head = self.body[0]
        new_head = Position(head.x + dx, head.y + dy)
        tail = self.body[-1]
        self.body = [new_head, *self.body[:-1]]

        if (
            new_head.x <= MINX
            or new_head.x >= MAXX
            or new_head.y <= MINY
            or new_head.y >= MAXY
        ):
            self.over = True
        if new_head in self.body[1:]:
            self.over = True

        if abs(new_head.x - self.food.x) <= 1 and new_head.y == self.food.y:
            if len(self.body) < MAX_SNAKE_LENGTH:
                self.body.append(tail)
            self.place_food()
            return True
        return False

    def turn(self, key: int) -> None:
        """Apply the final byte of an arrow-key sequence, forbidding reversal."""
        if key in _ARROWS:
            new, blocked = _ARROWS[key]
            if self.direction != blocked:
                self.direction = new

    def handle_input(self, keyboard) -> None:
        """Read one key; arrow-key escape sequences turn the snake."""
        key = keyboard.read_char()
        if key == KEY_ESCAPE and keyboard.key_hit():
            if keyboard.read_char() == KEY_BRACKET:
                self.turn(keyboard.read_char())

    def score(self) -> int:
        return len(self.body) - INITIAL_LENGTH

    def delay_ms(self) -> int:
        """Tick interval for the current length; shorter as the snake grows."""
        return max(MIN_DELAY_MS, INITIAL_DELAY_MS - self.score() * DELAY_STEP_MS)


def draw_snake(screen: Screen, body) -> None:
    screen.set_color(Color.GREEN, Color.DARKGRAY)
    for part in body:
        screen.gotoxy(part.x, part.y)
        screen.write("●")


def erase_snake(screen: Screen, body) -> None:
    screen.set_color(Color.DARKGRAY, Color.DARKGRAY)
    for part in body:
        screen.gotoxy(part.x, part.y)
        screen.write(" ")


def draw_food(screen: Screen, food: Position) -> None:
    screen.gotoxy(food.x, food.y)
    screen.write("🍎")


def draw_score(screen: Screen, score: int) -> None:
    screen.set_color(Color.YELLOW, Color.DARKGRAY)
    screen.gotoxy(0, 0)
    screen.write(f"Pontuação:| {score} |")


def draw_game_over(screen: Screen, score: int) -> None:
    screen.set_color(Color.RED, Color.DARKGRAY)
    screen.gotoxy(MAXX // 2 - 7, MAXY // 2)
    screen.write("FIM DE JOGO!")
    screen.gotoxy(MAXX // 2 - 7, MAXY // 2 + 1)
    screen.write(f"Pontuação Final: {score}")
    screen.update()


def run(screen: Screen, keyboard, timer, game: Game) -> int:
    """Play until the game ends, wait for a key, and return the score."""
    while not game.over:
        if keyboard.key_hit():
            game.handle_input(keyboard)
        if timer.time_over():
            erase_snake(screen, game.body)
            if game.step():
                timer.start(game.delay_ms())
            draw_snake(screen, game.body)
            draw_food(screen, game.food)
            draw_score(screen, game.score())
            screen.update()

    draw_game_over(screen, game.score())
    keyboard.read_char()
    return game.score()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="snakegame", description="Terminal snake game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    args = parser.parse_args(argv)

    screen = Screen(sys.stdout)
    screen.init(True)
    timer = Timer()
    timer.start(INITIAL_DELAY_MS)
    game = Game(random.Random(args.seed))
    try:
        with Keyboard(sys.stdin.fileno()) as keyboard:
            run(screen, keyboard, timer, game)
    finally:
        screen.destroy()
        screen.update()
        timer.stop()
    return 0