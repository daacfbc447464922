"""Non-blocking single-key input from a terminal."""

from __future__ import annotations

import os
import termios


class Keyboard:
    """Puts a terminal in raw, no-echo mode and reads keys one byte at a time."""

    def __init__(self, fd: int = 0) -> None:
        self.fd = fd
        self._saved: list | None = None
        self._settings: list | None = None
        self._peek: int | None = None

    def __enter__(self) -> "Keyboard":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        """Switch the terminal to non-canonical, no-echo, no-signal mode."""
        saved = termios.tcgetattr(self.fd)
        settings = [*saved[:6], list(saved[6])]
        settings[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        settings[6][termios.VMIN] = 1
        settings[6][termios.VTIME] = 0
        termios.tcsetattr(self.fd, termios.TCSANOW, settings)
        self._saved = saved
        self._settings = settings

    def close(self) -> None:
        """Restore the terminal settings saved by open()."""
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._saved)
            self._saved = None
            self._settings = None

    def _set_min_chars(self, count: int) -> None:
        if self._settings is None:
            raise RuntimeError("keyboard is not open")
        self._settings[6][termios.VMIN] = count
        termios.tcsetattr(self.fd, termios.TCSANOW, self._settings)

    def key_hit(self) -> bool:
        """Return True if a key is waiting, without blocking."""
        if self._peek is not None:
            return True
        self._set_min_chars(0)
        try:
            data = os.read(self.fd, 1)
        finally:
            self._set_min_chars(1)
        if data:
            self._peek = data[0]
            return True
        return False

    def read_char(self) -> int:
        """Return the next key byte, blocking until one arrives."""
        if self._peek is not None:
            char, self._peek = self._peek, None
            return char
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError("no more input")
        return data[0]