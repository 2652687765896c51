"""Plain text persistence for the counter value."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
import re

from .exceptions import LoadParseError, PersistError, StorageError


logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_count(content: str) -> int | None:
    """Return the integer held on the first line of ``content``.

    Empty content yields ``0``. ``None`` signals content that is not a counter
    value; trailing whitespace on the first line is tolerated, anything else is
    not.
    """
    if not content:
        return 0
    first_line = content.splitlines()[0].rstrip()
    if _INTEGER_PATTERN.fullmatch(first_line) is None:
        return None
    return int(first_line)


def format_count(value: int) -> str:
    """Serialise a counter value the way it is stored on disk."""
    return str(value)


@dataclass(slots=True)
class CounterStore:
    """Read and overwrite the integer stored at ``path``."""

    path: Path
    sync: bool = True

    def load(self) -> int:
        """Return the stored value, ``0`` when the file does not exist yet."""
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Counter file %s does not exist, starting at 0", self.path)
            return 0
        except UnicodeDecodeError as exc:
            raise LoadParseError(self.path, "<binary data>") from exc
        except OSError as exc:
            raise StorageError(
                f"Unable to read counter file '{self.path}': {exc.strerror or exc}"
            ) from exc

        value = parse_count(content)
        if value is None:
            raise LoadParseError(self.path, content)
        logger.debug("Loaded counter value %d from %s", value, self.path)
        return value

    def persist(self, value: int) -> None:
        """Replace the file content with ``value``."""
        payload = format_count(value)
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                if self.sync:
                    os.fsync(handle.fileno())
        except OSError as exc:
            raise PersistError(
                f"Unable to write counter file '{self.path}': {exc.strerror or exc}"
            ) from exc
        logger.debug("Persisted counter value %s to %s", payload, self.path)


__all__ = ["CounterStore", "format_count", "parse_count"]
