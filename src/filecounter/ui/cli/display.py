"""Single-line rendering of the counter value."""

from __future__ import annotations

from types import TracebackType
from typing import TYPE_CHECKING

from filecounter.core.keys import KEY_HINT
from filecounter.core.store import format_count


if TYPE_CHECKING:
    from rich.console import Console
    from rich.text import Text


def count_line(value: int) -> Text:
    """Return the status line shown for ``value``."""
    from rich.text import Text

    return Text.assemble(
        ("Count: ", "bold"),
        (format_count(value), "bold cyan"),
        (f"    {KEY_HINT}", "dim"),
    )


class CountDisplay:
    """Keep the count on one terminal line, redrawn in place.

    When the console is not a terminal each redraw is printed on its own line
    instead, which keeps captured output readable.
    """

    def __init__(self, console: Console) -> None:
        self._console = console
        self._inline = console.is_terminal

    def __enter__(self) -> CountDisplay:
        if self._inline:
            self._console.show_cursor(False)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._inline:
            self._console.show_cursor(True)
            self._console.line()

    def render(self, value: int) -> None:
        line = count_line(value)
        if self._inline:
            from rich.control import Control, ControlType

            self._console.control(
                Control.move_to_column(0),
                Control((ControlType.ERASE_IN_LINE, 2)),
            )
            self._console.print(line, end="")
        else:
            self._console.print(line)


__all__ = ["CountDisplay", "count_line"]
