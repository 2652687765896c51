"""Exception hierarchy for the counter core."""

from __future__ import annotations

from pathlib import Path


class CounterError(RuntimeError):
    """Base exception for counter failures."""


class StorageError(CounterError):
    """Raised when the backing file cannot be read."""


class LoadParseError(StorageError):
    """Raised when the backing file holds something other than an integer."""

    def __init__(self, path: Path, content: str) -> None:
        self.path = path
        self.content = content
        preview = content.splitlines()[0] if content.splitlines() else content
        if len(preview) > 40:
            preview = preview[:37] + "..."
        super().__init__(f"File '{path}' does not contain a counter value: {preview!r}")


class PersistError(StorageError):
    """Raised when the counter value cannot be written to its file."""


class TerminalError(CounterError):
    """Raised when the terminal cannot be switched to or from raw mode."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "CounterError",
    "LoadParseError",
    "PersistError",
    "StorageError",
    "TerminalError",
    "exception_messages",
]
