"""CLI command implementations exposed via `pagelingo.ui.cli`."""

from __future__ import annotations

from .explain import explain
from .localize import localize


__all__ = ["explain", "localize"]
