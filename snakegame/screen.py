"""ANSI terminal drawing: cursor control, colours and box borders."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

ESC = "\033"
NORMAL_TEXT = "[0m"
BOLD_TEXT = "[1m"
ITALIC_TEXT = "[3m"
BLINK_TEXT = "[5m"
REVERSE_TEXT = "[7m"
HOME_CURSOR = "[f"
SHOW_CURSOR = "[?25h"
HIDE_CURSOR = "[?25l"
CLEAR_SCREEN = "[2J"

BOX_ENABLE = "(0"
BOX_DISABLE = "(B"
BOX_VLINE = chr(0x78)
BOX_HLINE = chr(0x71)
BOX_UPLEFT = chr(0x6C)
BOX_UPRIGHT = chr(0x6B)
BOX_DWNLEFT = chr(0x6D)
BOX_DWNRIGHT = chr(0x6A)
BOX_CROSS = chr(0x6E)
BOX_TLEFT = chr(0x74)
BOX_TRIGHT = chr(0x75)
BOX_TUP = chr(0x77)
BOX_TDOWN = chr(0x76)
BOX_DIAMOND = chr(0x60)
BOX_BLOCK = chr(0x61)
BOX_DOT = chr(0x7E)

SCRSTARTX = 3
SCRENDX = 75
SCRSTARTY = 1
SCRENDY = 23

MINX = 1
MINY = 1
MAXX = 80
MAXY = 24


class Color(IntEnum):
    """Terminal colours in ANSI order; values above LIGHTGRAY are bright."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTRED = 9
    LIGHTGREEN = 10
    YELLOW = 11
    LIGHTBLUE = 12
    LIGHTMAGENTA = 13
    LIGHTCYAN = 14
    WHITE = 15


class Screen:
    """Writes ANSI control sequences and text to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def _control(self, sequence: str) -> None:
        self.write(ESC + sequence)

    def home_cursor(self) -> None:
        self._control(HOME_CURSOR)

    def show_cursor(self) -> None:
        self._control(SHOW_CURSOR)

    def hide_cursor(self) -> None:
        self._control(HIDE_CURSOR)

    def clear(self) -> None:
        self.home_cursor()
        self._control(CLEAR_SCREEN)

    def update(self) -> None:
        """Flush pending output to the terminal."""
        self.stream.flush()

    def set_normal(self) -> None:
        self._control(NORMAL_TEXT)

    def set_bold(self) -> None:
        self._control(BOLD_TEXT)

    def set_blink(self) -> None:
        self._control(BLINK_TEXT)

    def set_reverse(self) -> None:
        self._control(REVERSE_TEXT)

    def box_enable(self) -> None:
        self._control(BOX_ENABLE)

    def box_disable(self) -> None:
        self._control(BOX_DISABLE)

    def _put(self, x: int, y: int, char: str) -> None:
        self.gotoxy(x, y)
        self.write(char)

    def draw_borders(self) -> None:
        """Clear the screen and frame it with line-drawing characters."""
        self.clear()
        self.box_enable()

        self._put(MINX, MINY, BOX_UPLEFT)
        for x in range(MINX + 1, MAXX):
            self._put(x, MINY, BOX_HLINE)
        self._put(MAXX, MINY, BOX_UPRIGHT)

        for y in range(MINY + 1, MAXY):
            self._put(MINX, y, BOX_VLINE)
            self._put(MAXX, y, BOX_VLINE)

        self._put(MINX, MAXY, BOX_DWNLEFT)
        for x in range(MINX + 1, MAXX):
            self._put(x, MAXY, BOX_HLINE)
        self._put(MAXX, MAXY, BOX_DWNRIGHT)

        self.box_disable()

    def init(self, draw_borders: bool) -> None:
        """Clear the screen, optionally draw borders, and hide the cursor."""
        self.clear()
        if draw_borders:
            self.draw_borders()
        self.home_cursor()
        self.hide_cursor()

    def destroy(self) -> None:
        """Reset colours and attributes, clear and show the cursor."""
        self.write(f"{ESC}[0;39;49m")
        self.set_normal()
        self.clear()
        self.home_cursor()
        self.show_cursor()

    def gotoxy(self, x: int, y: int) -> None:
        """Move the cursor to (x, y), clamped to the screen."""
        x = 0 if x < 0 else MAXX - 1 if x >= MAXX else x
        y = 0 if y < 0 else MAXY if y > MAXY else y
        self.write(f"{ESC}[f{ESC}[{y}B{ESC}[{x}C")

    def set_color(self, fg: Color | int, bg: Color | int) -> None:
        """Set foreground and background colours."""
        fg = int(fg)
        bright = "0"
        if fg > Color.LIGHTGRAY:
            bright = "1"
            fg -= 8
        self.write(f"{ESC}[{bright};{fg + 30};{int(bg) + 40}m")