"""Public CLI exports for pagelingo."""

from __future__ import annotations

from .app import app, main
from .commands import explain, localize
from .state import debug_enabled, emit_error, emit_warning, get_cli_state


__all__ = [
    "app",
    "debug_enabled",
    "emit_error",
    "emit_warning",
    "explain",
    "get_cli_state",
    "localize",
    "main",
]
