"""Exception hierarchy for the page localization pipeline."""

from __future__ import annotations


class PagelingoError(RuntimeError):
    """Base exception for localization failures."""


class ConfigurationError(PagelingoError):
    """Raised when the plugin configuration cannot be loaded or validated."""


class PatternSyntaxError(ConfigurationError):
    """Raised when a path template is malformed."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid path pattern '{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


class LocalizationSkipped(PagelingoError):
    """Signal that a page must be left untouched by the localizer."""


class LanguagePatternMismatch(LocalizationSkipped):
    """Raised when a page path does not satisfy its language-detection pattern."""

    def __init__(self, path: str, pattern: str) -> None:
        super().__init__(f"Path '{path}' does not match language pattern '{pattern}'")
        self.path = path
        self.pattern = pattern


class PageNotFoundError(PagelingoError):
    """Raised when a host is asked to delete a page it does not know."""


__all__ = [
    "ConfigurationError",
    "LanguagePatternMismatch",
    "LocalizationSkipped",
    "PageNotFoundError",
    "PagelingoError",
    "PatternSyntaxError",
]
