"""Selection of the per-page override applying to a path."""

from __future__ import annotations

from collections.abc import Sequence

from pagelingo.core.config import PageOptions


def resolve_page_options(path: str, pages: Sequence[PageOptions]) -> PageOptions | None:
    """Return the first override whose ``match_path`` matches *path*.

    Declaration order wins; there is no specificity ranking.
    """
    for options in pages:
        if options.pattern.matches(path):
            return options
    return None


__all__ = ["resolve_page_options"]
