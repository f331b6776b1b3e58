"""Client-side match patterns for dynamic routes and the not-found page."""

from __future__ import annotations

from collections.abc import Sequence
import re


NOT_FOUND_PATTERN = re.compile(r"/404/?$")


class DynamicRouteMatcher:
    """Compute the wildcard match pattern of canonical and alternate pages."""

    def __init__(self, dynamic_pages: Sequence[str]) -> None:
        self._names = tuple(dynamic_pages)
        self._compiled: dict[str, list[tuple[str, re.Pattern[str]]]] = {}

    def _rules(self, prefix: str) -> list[tuple[str, re.Pattern[str]]]:
        rules = self._compiled.get(prefix)
        if rules is None:
            rules = [
                (name, re.compile(f"^{re.escape(prefix)}/{re.escape(name)}"))
                for name in self._names
            ]
            self._compiled[prefix] = rules
        return rules

    def dynamic_page(self, path: str, prefix: str = "") -> str | None:
        """Return the first dynamic route name rooted at ``prefix + "/"``."""
        for name, regex in self._rules(prefix):
            if regex.match(path):
                return name
        return None

    @staticmethod
    def is_not_found(path: str) -> bool:
        return NOT_FOUND_PATTERN.search(path) is not None

    def match_path(self, path: str, prefix: str = "", fallback: str | None = None) -> str | None:
        """Return the match pattern of a page at *path*.

        *prefix* is empty for the canonical page and the language code for an
        alternate. The not-found rule is applied last and wins.
        """
        result = fallback
        name = self.dynamic_page(path, prefix)
        if name is not None:
            result = f"{prefix}/{name}/*"
        if self.is_not_found(path):
            result = f"/{prefix}/*" if prefix else "/*"
        return result


__all__ = ["NOT_FOUND_PATTERN", "DynamicRouteMatcher"]
