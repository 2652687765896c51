"""Keystroke bindings for the interactive counter."""

from __future__ import annotations

from enum import Enum

from readchar import key


class Action(Enum):
    """What a keystroke asks the counter to do."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    QUIT = "quit"
    IGNORE = "ignore"


KEY_BINDINGS: dict[str, Action] = {
    "+": Action.INCREMENT,
    "=": Action.INCREMENT,  # '+' without shift
    key.SPACE: Action.INCREMENT,
    "-": Action.DECREMENT,
    "_": Action.DECREMENT,  # '-' with shift
    "\x7f": Action.DECREMENT,  # backspace (POSIX)
    "\x08": Action.DECREMENT,  # backspace (Windows)
    "q": Action.QUIT,
    "Q": Action.QUIT,
    key.CTRL_C: Action.QUIT,
}

KEY_HINT = "[+/-/q]"


def classify(keystroke: str) -> Action:
    """Map a keystroke to its action, ignoring anything unbound."""
    return KEY_BINDINGS.get(keystroke, Action.IGNORE)


__all__ = ["KEY_BINDINGS", "KEY_HINT", "Action", "classify"]
