"""File-backed interactive tally counter."""

from __future__ import annotations

from filecounter.core import (
    Counter,
    CounterError,
    CounterSession,
    CounterSettings,
    CounterStore,
    LoadParseError,
    PersistError,
    StorageError,
    TerminalError,
)
from filecounter.version import get_version


__version__ = get_version()

__all__ = [
    "Counter",
    "CounterError",
    "CounterSession",
    "CounterSettings",
    "CounterStore",
    "LoadParseError",
    "PersistError",
    "StorageError",
    "TerminalError",
    "__version__",
    "get_version",
]
