"""Core building blocks of the file-backed counter."""

from __future__ import annotations

from .config import CounterSettings
from .counter import Counter
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import (
    CounterError,
    LoadParseError,
    PersistError,
    StorageError,
    TerminalError,
)
from .keys import KEY_BINDINGS, KEY_HINT, Action, classify
from .session import CounterSession, SessionState
from .store import CounterStore, format_count, parse_count
from .terminal import KeySource, StreamKeys, TerminalKeys, open_key_source, raw_mode


__all__ = [
    "KEY_BINDINGS",
    "KEY_HINT",
    "Action",
    "Counter",
    "CounterError",
    "CounterSession",
    "CounterSettings",
    "CounterStore",
    "DiagnosticEmitter",
    "KeySource",
    "LoadParseError",
    "NullEmitter",
    "PersistError",
    "SessionState",
    "StorageError",
    "StreamKeys",
    "TerminalError",
    "TerminalKeys",
    "classify",
    "format_count",
    "open_key_source",
    "parse_count",
    "raw_mode",
]
