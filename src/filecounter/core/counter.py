"""In-memory counter bound to its backing file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import CounterSettings
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import LoadParseError
from .store import CounterStore


@dataclass(slots=True)
class Counter:
    """A tally whose every change is written through to ``store``."""

    store: CounterStore
    value: int = 0

    @classmethod
    def open(
        cls,
        store: CounterStore,
        *,
        start_value: int | None = None,
        emitter: DiagnosticEmitter | None = None,
    ) -> Counter:
        """Create a counter from ``start_value`` or from the file content.

        An explicit ``start_value`` wins and is persisted right away. Content
        that is not an integer is reported through ``emitter`` and replaced by
        ``0``; it is only overwritten once the value changes.
        """
        emitter = emitter or NullEmitter()
        if start_value is not None:
            counter = cls(store, start_value)
            store.persist(counter.value)
            return counter

        try:
            value = store.load()
        except LoadParseError as exc:
            emitter.warning(
                f"Ignoring non-counter data in '{exc.path}', starting at 0. "
                "The file will be overwritten on the first change.",
                exc,
            )
            value = 0
        return cls(store, value)

    @classmethod
    def from_settings(
        cls, settings: CounterSettings, *, emitter: DiagnosticEmitter | None = None
    ) -> Counter:
        store = CounterStore(settings.path, sync=settings.sync)
        return cls.open(store, start_value=settings.start_value, emitter=emitter)

    @property
    def path(self) -> Path:
        return self.store.path

    def increment(self) -> int:
        self.value += 1
        self.store.persist(self.value)
        return self.value

    def decrement(self) -> int:
        self.value -= 1
        self.store.persist(self.value)
        return self.value


__all__ = ["Counter"]
