"""Path templates used to select per-page options and detect languages.

The syntax mirrors the route templates understood by most static-site
pipelines:

``/blog/:slug``
: Named parameter matching a single non-empty segment.

``/:lang?/about``
: Optional named parameter. The slash preceding it is optional as well, so
  both ``/about`` and ``/fr/about`` match.

``/docs/*``
: Wildcard matching any remainder, including further slashes. The captured
  text is exposed under the ``"*"`` key.

Matching is anchored, case-insensitive, and tolerant to a single trailing
slash. Parameter values are returned exactly as they appear in the path,
without percent-decoding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import re
from typing import Any

from pagelingo.core.exceptions import PatternSyntaxError


WILDCARD_KEY = "*"
_NAME_CHARS = re.compile(r"[A-Za-z0-9_]")
_SEGMENT = r"[^/#?]+?"


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Outcome of a successful pattern match."""

    path: str
    params: dict[str, str] = field(default_factory=dict)

    def get(self, name: str, default: Any = None) -> Any:
        return self.params.get(name, default)


@dataclass(frozen=True, slots=True)
class PathPattern:
    """Compiled path template."""

    source: str
    regex: re.Pattern[str] = field(repr=False, compare=False)
    groups: tuple[tuple[str, str], ...] = field(default=(), repr=False, compare=False)

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.groups)

    def match(self, path: str) -> PatternMatch | None:
        """Return the extracted parameters when *path* conforms to the template."""
        found = self.regex.match(path)
        if found is None:
            return None
        params: dict[str, str] = {}
        for name, group in self.groups:
            value = found.group(group)
            if value is not None:
                params[name] = value
        return PatternMatch(path=path, params=params)

    def matches(self, path: str) -> bool:
        return self.regex.match(path) is not None


def _read_name(pattern: str, start: int) -> tuple[str, int]:
    end = start
    while end < len(pattern) and _NAME_CHARS.match(pattern[end]):
        end += 1
    if end == start:
        raise PatternSyntaxError(pattern, f"missing parameter name at offset {start - 1}")
    return pattern[start:end], end


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> PathPattern:
    """Compile *pattern* into a :class:`PathPattern`.

    Raises:
        PatternSyntaxError: if the template is empty, declares a parameter
            without a name, or reuses a parameter name.
    """
    if not isinstance(pattern, str) or not pattern:
        raise PatternSyntaxError(str(pattern), "pattern must be a non-empty string")

    parts: list[str] = []
    groups: list[tuple[str, str]] = []
    seen: set[str] = set()
    literal = ""
    index = 0

    def flush() -> None:
        nonlocal literal
        if literal:
            parts.append(re.escape(literal))
            literal = ""

    while index < len(pattern):
        char = pattern[index]
        if char == ":":
            name, index = _read_name(pattern, index + 1)
            if name in seen:
                raise PatternSyntaxError(pattern, f"duplicate parameter '{name}'")
            seen.add(name)
            group = f"p{len(groups)}"
            groups.append((name, group))
            optional = index < len(pattern) and pattern[index] == "?"
            if optional:
                index += 1
                lead = ""
                if literal.endswith("/"):
                    literal = literal[:-1]
                    lead = "/"
                flush()
                parts.append(f"(?:{re.escape(lead)}(?P<{group}>{_SEGMENT}))?")
            else:
                flush()
                parts.append(f"(?P<{group}>{_SEGMENT})")
            continue
        if char == "*":
            wildcards = sum(1 for name, _ in groups if name.startswith(WILDCARD_KEY))
            name = WILDCARD_KEY if not wildcards else f"{WILDCARD_KEY}{wildcards}"
            group = f"p{len(groups)}"
            groups.append((name, group))
            flush()
            parts.append(f"(?P<{group}>.*)")
            index += 1
            continue
        literal += char
        index += 1

    if literal.endswith("/") and (parts or len(literal) > 1):
        literal = literal[:-1]
    elif literal == "/":
        literal = ""
    flush()

    body = "".join(parts)
    regex = re.compile(rf"^{body}/?$", re.IGNORECASE)
    return PathPattern(source=pattern, regex=regex, groups=tuple(groups))


def match_path(pattern: str, path: str) -> PatternMatch | None:
    """Shortcut compiling *pattern* (cached) and matching it against *path*."""
    return compile_pattern(pattern).match(path)


__all__ = [
    "WILDCARD_KEY",
    "PathPattern",
    "PatternMatch",
    "compile_pattern",
    "match_path",
]
