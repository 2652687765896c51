"""CLI command implementations exposed via ``filecounter.ui.cli``."""

from __future__ import annotations

from .count import count, run_counter


__all__ = ["count", "run_counter"]
