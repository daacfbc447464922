import io
import random

import pytest

from snakegame.game import (
    MAX_SNAKE_LENGTH,
    Direction,
    Game,
    Position,
    draw_food,
    draw_game_over,
    draw_score,
    draw_snake,
    erase_snake,
    run,
)
from snakegame.screen import MAXX, MAXY, MINX, MINY, Screen


class FakeKeyboard:
    def __init__(self, keys=()):
        self.keys = list(keys)
        self.final_reads = 0

    def key_hit(self):
        return bool(self.keys)

    def read_char(self):
        if self.keys:
            return self.keys.pop(0)
        self.final_reads += 1
        return 10


class FakeTimer:
    def __init__(self):
        self.starts = []

    def time_over(self):
        return True

    def start(self, delay_ms):
        self.starts.append(delay_ms)


@pytest.fixture
def game():
    return Game(random.Random(1))


def test_initial_state(game):
    assert game.body == [Position(10, 10), Position(9, 10), Position(8, 10)]
    assert game.direction is Direction.RIGHT
    assert game.score() == 0
    assert game.delay_ms() == 150
    assert not game.over


def test_food_inside_border():
    game = Game(random.Random(7))
    for _ in range(500):
        food = game.place_food()
        assert MINX + 2 <= food.x < MAXX - 2
        assert MINY + 2 <= food.y < MAXY - 2
        assert game.food == food


def test_step_moves_head_and_shifts_body(game):
    game.food = Position(40, 20)
    before = list(game.body)
    assert game.step() is False
    assert game.body[0] == Position(11, 10)
    assert game.body[1:] == before[:-1]


def test_eating_grows_and_speeds_up(game):
    game.food = Position(12, 10)
    tail = game.body[-1]
    assert game.step() is True
    assert len(game.body) == 4
    assert game.body[-1] == tail
    assert game.score() == 1
    assert game.delay_ms() < 150


def test_delay_has_floor(game):
    game.body = [Position(10, 10)] * 60
    assert game.delay_ms() == 50


def test_growth_capped(game):
    game.body = [Position(30 - i, 10) for i in range(MAX_SNAKE_LENGTH)]
    game.food = Position(31, 10)
    assert game.step() is True
    assert len(game.body) == MAX_SNAKE_LENGTH


def test_wall_collision(game):
    game.body = [Position(MAXX - 1, 5), Position(MAXX - 2, 5), Position(MAXX - 3, 5)]
    game.food = Position(5, 20)
    game.step()
    assert game.over


def test_self_collision(game):
    game.body = [
        Position(10, 10),
        Position(11, 10),
        Position(11, 11),
        Position(10, 11),
        Position(9, 11),
    ]
    game.direction = Direction.DOWN
    game.food = Position(40, 20)
    game.step()
    assert game.over


@pytest.mark.parametrize(
    "start, key, expected",
    [
        (Direction.RIGHT, 65, Direction.UP),
        (Direction.DOWN, 65, Direction.DOWN),
        (Direction.RIGHT, 66, Direction.DOWN),
        (Direction.UP, 66, Direction.UP),
        (Direction.UP, 67, Direction.RIGHT),
        (Direction.LEFT, 67, Direction.LEFT),
        (Direction.UP, 68, Direction.LEFT),
        (Direction.RIGHT, 68, Direction.RIGHT),
        (Direction.UP, 120, Direction.UP),
    ],
)
def test_turn(game, start, key, expected):
    game.direction = start
    game.turn(key)
    assert game.direction is expected


def test_handle_input_arrow_sequence(game):
    keyboard = FakeKeyboard([27, 91, 65])
    game.handle_input(keyboard)
    assert game.direction is Direction.UP
    assert keyboard.keys == []


def test_handle_input_ignores_plain_key(game):
    keyboard = FakeKeyboard([ord("w"), 91, 65])
    game.handle_input(keyboard)
    assert game.direction is Direction.RIGHT
    assert keyboard.keys == [91, 65]


def test_draw_snake_and_erase():
    screen = Screen(io.StringIO())
    body = [Position(3, 4), Position(2, 4)]
    draw_snake(screen, body)
    erase_snake(screen, body)
    text = screen.stream.getvalue()
    assert text.count("●") == 2
    assert text.startswith("\x1b[0;32;48m")
    assert "\x1b[1;30;48m" in text


def test_draw_food_and_score():
    screen = Screen(io.StringIO())
    draw_food(screen, Position(5, 6))
    draw_score(screen, 5)
    text = screen.stream.getvalue()
    assert text.startswith("\x1b[f\x1b[6B\x1b[5C🍎")
    assert text.endswith("Pontuação:| 5 |")


def test_draw_game_over():
    screen = Screen(io.StringIO())
    draw_game_over(screen, 4)
    text = screen.stream.getvalue()
    assert "FIM DE JOGO!" in text
    assert text.endswith("Pontuação Final: 4")


def test_run_until_wall():
    screen = Screen(io.StringIO())
    keyboard = FakeKeyboard()
    timer = FakeTimer()
    game = Game(random.Random(3))
    score = run(screen, keyboard, timer, game)
    assert game.over
    assert score == game.score()
    assert keyboard.final_reads == 1
    assert len(timer.starts) == score
    assert "FIM DE JOGO!" in screen.stream.getvalue()


def test_run_turns_up_into_top_wall():
    screen = Screen(io.StringIO())
    keyboard = FakeKeyboard([27, 91, 65])
    game = Game(random.Random(5))
    run(screen, keyboard, FakeTimer(), game)
    assert game.body[0] == Position(10, MINY)
    assert game.direction is Direction.UP