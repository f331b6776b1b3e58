"""Language selection for canonical and alternate pages."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging

from pagelingo.core.config import PageOptions
from pagelingo.core.exceptions import LanguagePatternMismatch


logger = logging.getLogger(__name__)

LANGUAGE_PARAM = "lang"


@dataclass(frozen=True, slots=True)
class LanguageDetection:
    """Language information read from a page URL."""

    language: str
    routed: bool
    original_path: str
    suppress_alternates: bool


def _without(languages: Sequence[str], excluded: str) -> tuple[str, ...]:
    return tuple(lng for lng in languages if lng != excluded)


def build_alternate_languages(
    languages: Sequence[str],
    default_language: str,
    generate_default_language_page: bool,
    options: PageOptions | None = None,
) -> tuple[str, ...]:
    """Return the ordered languages needing an alternate page.

    A ``languages`` override on *options* replaces the result entirely,
    discarding any ``exclude_languages`` filtering applied before it.
    """
    if generate_default_language_page:
        alternates = tuple(languages)
    else:
        alternates = _without(languages, default_language)

    if options is not None and options.exclude_languages is not None:
        excluded = set(options.exclude_languages)
        alternates = tuple(lng for lng in alternates if lng not in excluded)

    if options is not None and options.languages is not None:
        if generate_default_language_page:
            alternates = tuple(options.languages)
        else:
            alternates = _without(options.languages, default_language)

    return alternates


def detect_language(
    path: str,
    options: PageOptions,
    languages: Sequence[str],
    default_language: str,
) -> LanguageDetection:
    """Read the language from the ``:lang`` parameter of ``options.match_path``.

    Raises:
        LanguagePatternMismatch: when *path* does not satisfy the pattern.
    """
    found = options.pattern.match(path)
    if found is None:
        raise LanguagePatternMismatch(path, options.match_path)

    requested = found.get(LANGUAGE_PARAM)
    language = requested if requested in languages else default_language
    routed = bool(requested)
    original_path = path.replace(f"/{language}", "", 1)
    if requested and language != requested:
        logger.debug(
            "Unknown language '%s' in %s, falling back to '%s'", requested, path, language
        )

    return LanguageDetection(
        language=language,
        routed=routed,
        original_path=original_path,
        suppress_alternates=routed or options.exclude_languages is None,
    )


__all__ = [
    "LANGUAGE_PARAM",
    "LanguageDetection",
    "build_alternate_languages",
    "detect_language",
]
