"""Public CLI exports for filecounter."""

from __future__ import annotations

from .app import app, main
from .commands import count
from .state import debug_enabled, emit_error, emit_warning, get_cli_state


__all__ = [
    "app",
    "count",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "get_cli_state",
    "main",
]
