"""Keystroke loop driving a counter until a quit trigger arrives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import logging

from .counter import Counter
from .keys import Action, classify
from .terminal import KeySource


logger = logging.getLogger(__name__)


class SessionState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class CounterSession:
    """Apply keystrokes from ``keys`` to ``counter``.

    The session starts ``RUNNING``; create it once the key source is ready.
    ``on_change`` is called with the new value after each persisted change.
    Ctrl-c (as a keystroke or as ``KeyboardInterrupt`` during the read) and the
    end of input both count as quit triggers.
    """

    counter: Counter
    keys: KeySource
    on_change: Callable[[int], None] | None = None
    state: SessionState = SessionState.RUNNING

    def next_action(self) -> Action:
        try:
            keystroke = self.keys.read_key()
        except (KeyboardInterrupt, EOFError):
            return Action.QUIT
        return classify(keystroke)

    def dispatch(self, action: Action) -> None:
        if action is Action.QUIT:
            self.state = SessionState.TERMINATED
            return
        if action is Action.INCREMENT:
            value = self.counter.increment()
        elif action is Action.DECREMENT:
            value = self.counter.decrement()
        else:
            return
        logger.debug("%s -> %d", action.value, value)
        if self.on_change is not None:
            self.on_change(value)

    def run(self) -> int:
        """Process keystrokes until quit and return the final value."""
        while self.state is SessionState.RUNNING:
            self.dispatch(self.next_action())
        return self.counter.value


__all__ = ["CounterSession", "SessionState"]
