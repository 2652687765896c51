"""Implementation of the ``counter`` CLI command."""

from __future__ import annotations

import typer

from filecounter.core.config import CounterSettings
from filecounter.core.counter import Counter
from filecounter.core.exceptions import CounterError
from filecounter.core.session import CounterSession
from filecounter.core.terminal import open_key_source

from .._options import (
    DebugOption,
    NoSyncOption,
    PathArgument,
    StartValueArgument,
    VerboseOption,
    VersionOption,
)
from ..diagnostics import CliEmitter
from ..display import CountDisplay
from ..state import CLIState, configure_logging, debug_enabled, set_cli_state


def run_counter(settings: CounterSettings, state: CLIState) -> int:
    """Open the counter described by ``settings`` and run the keystroke loop.

    Returns the final value. Errors raised by the core propagate unchanged;
    the terminal mode is restored before they reach the caller.
    """
    emitter = CliEmitter(state)
    counter = Counter.from_settings(settings, emitter=emitter)
    display = CountDisplay(state.console)
    with open_key_source() as keys, display:
        session = CounterSession(counter, keys, on_change=display.render)
        display.render(counter.value)
        return session.run()


def count(
    path: PathArgument,
    start_value: StartValueArgument = None,
    no_sync: NoSyncOption = False,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
    version: VersionOption = None,
) -> None:
    """Tally counter with file-backed storage.

    Press + (or = / space) to increment, - (or _ / backspace) to decrement
    and q (or ctrl-c) to quit. Every change is written to PATH immediately.
    """
    _ = version
    state = set_cli_state(verbosity=verbose, debug=debug)
    configure_logging(state)
    settings = CounterSettings(path=path, start_value=start_value, sync=not no_sync)

    try:
        run_counter(settings, state)
    except CounterError as exc:
        if debug_enabled():
            raise
        CliEmitter(state).error(str(exc), exc)
        raise typer.Exit(code=1) from exc


__all__ = ["count", "run_counter"]
