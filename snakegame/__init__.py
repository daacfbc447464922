"""Terminal snake game with ANSI screen, raw keyboard and interval timer helpers."""

__version__ = "1.0.0"
__all__ = ["screen", "keyboard", "timer", "game"]