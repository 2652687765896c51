"""Runtime settings for a counter session.

CounterSettings

`path` (`Path`)
: File backing the counter. Created on the first write when it does not
  exist, and overwritten in full on every change.

`start_value` (`int | None`)
: Value to start from instead of the file content. When set, it is written
  to `path` as soon as the session opens.

`sync` (`bool`)
: Flush each write to stable storage with `fsync`. Disable it on slow media
  where losing the last keystroke after a crash is acceptable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CounterSettings:
    """Options resolved from the command line."""

    path: Path
    start_value: int | None = None
    sync: bool = True


__all__ = ["CounterSettings"]
