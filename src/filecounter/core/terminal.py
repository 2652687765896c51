"""Terminal input handling: raw mode and keystroke sources."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import logging
import sys
from typing import Protocol, TextIO

import readchar

from .exceptions import TerminalError


logger = logging.getLogger(__name__)


class KeySource(Protocol):
    """Blocking supplier of keystrokes, one per call, in arrival order."""

    interactive: bool

    def read_key(self) -> str:
        """Return the next keystroke, raising ``EOFError`` once input is exhausted."""
        ...


class StreamKeys:
    """Read keystrokes character by character from a non-interactive stream."""

    interactive = False

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def read_key(self) -> str:
        char = self._stream.read(1)
        if not char:
            raise EOFError("end of keystroke input")
        return char


class TerminalKeys(StreamKeys):
    """Read keystrokes from a terminal already held in raw mode.

    Keys queued while the previous one is being handled stay in the tty buffer
    and are delivered in order.
    """

    interactive = True

    def read_key(self) -> str:
        if sys.platform == "win32":
            return readchar.readkey()
        return super().read_key()


def is_terminal(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def raw_mode(stream: TextIO) -> Iterator[None]:
    """Disable line buffering and echo on ``stream`` for the duration of the block.

    The previous terminal attributes are restored on every exit path. Signal
    generation is off as well, so ctrl-c arrives as a ``\\x03`` keystroke.
    """
    if sys.platform == "win32":
        # Console reads through msvcrt are unbuffered already.
        yield
        return

    import termios

    try:
        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
        raw = termios.tcgetattr(fd)
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSADRAIN, raw)
    except (OSError, ValueError, IndexError, termios.error) as exc:
        raise TerminalError(f"Unable to switch the terminal to raw mode: {exc}") from exc
    logger.debug("Terminal switched to raw mode (fd=%d)", fd)

    try:
        yield
    finally:
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        except (OSError, termios.error) as exc:
            raise TerminalError(f"Unable to restore the terminal mode: {exc}") from exc
        logger.debug("Terminal mode restored (fd=%d)", fd)


@contextmanager
def open_key_source(stream: TextIO | None = None) -> Iterator[KeySource]:
    """Yield the key source suited to ``stream`` (standard input by default).

    A terminal is held in raw mode until the block exits; any other stream is
    consumed as a plain sequence of keystrokes.
    """
    stream = sys.stdin if stream is None else stream
    if stream is None or stream.closed:
        raise TerminalError("Standard input is not available.")
    if not is_terminal(stream):
        yield StreamKeys(stream)
        return
    with raw_mode(stream):
        yield TerminalKeys(stream)


__all__ = [
    "KeySource",
    "StreamKeys",
    "TerminalKeys",
    "is_terminal",
    "open_key_source",
    "raw_mode",
]
