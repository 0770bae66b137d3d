"""
Buffered terminal printing.

To print:

    screen.print(...)
    screen.printf(...)
    screen.println(...)

To clear the terminal screen:

    screen.clear()

The terminal is not actually updated until screen.update() is called. These functions share one
process-wide ScreenBuffer; code that wants a buffer of its own should create a ScreenBuffer and pass it around.
"""

from typing import Optional

from .errors import Error, StaleWriterError, UpdateError
from .screenbuffer import BufferWriter, ScreenBuffer

__all__ = (
    "BufferWriter",
    "Error",
    "ScreenBuffer",
    "StaleWriterError",
    "UpdateError",
    "clear",
    "default_screen",
    "print",
    "printf",
    "println",
    "set_default_screen",
    "update",
    "writer",
)

_default_screen: Optional[ScreenBuffer] = None


def default_screen() -> ScreenBuffer:
    global _default_screen

    if _default_screen is None:
        _default_screen = ScreenBuffer()
    return _default_screen


def set_default_screen(screen: Optional[ScreenBuffer]):
    global _default_screen
    _default_screen = screen


def print(*values) -> int:
    return default_screen().print(*values)


def printf(format: str, *values) -> int:
    return default_screen().printf(format, *values)


def println(*values) -> int:
    return default_screen().println(*values)


def clear():
    default_screen().clear()


def update():
    default_screen().update()


def writer() -> BufferWriter:
    return default_screen().writer()
