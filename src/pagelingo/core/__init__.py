"""Core page localization primitives."""

from __future__ import annotations

from .config import (
    PageOptions,
    PluginConfiguration,
    build_configuration,
    load_configuration,
    load_pages,
)
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .dynamic import DynamicRouteMatcher
from .exceptions import (
    ConfigurationError,
    LanguagePatternMismatch,
    LocalizationSkipped,
    PageNotFoundError,
    PagelingoError,
    PatternSyntaxError,
)
from .languages import LanguageDetection, build_alternate_languages, detect_language
from .localizer import PageActions, PageLocalizer, localize_page
from .models import (
    I18N_CONTEXT_KEY,
    DeletionOutcome,
    LocalizationContext,
    LocalizationOutcome,
    LocalizationResult,
    PageDescriptor,
)
from .options import resolve_page_options
from .patterns import PathPattern, PatternMatch, compile_pattern, match_path
from .registry import PageRegistry


__all__ = [
    "I18N_CONTEXT_KEY",
    "ConfigurationError",
    "DeletionOutcome",
    "DiagnosticEmitter",
    "DynamicRouteMatcher",
    "LanguageDetection",
    "LanguagePatternMismatch",
    "LocalizationContext",
    "LocalizationOutcome",
    "LocalizationResult",
    "LocalizationSkipped",
    "LoggingEmitter",
    "NullEmitter",
    "PageActions",
    "PageDescriptor",
    "PageLocalizer",
    "PageNotFoundError",
    "PageOptions",
    "PageRegistry",
    "PagelingoError",
    "PathPattern",
    "PatternMatch",
    "PatternSyntaxError",
    "PluginConfiguration",
    "build_alternate_languages",
    "build_configuration",
    "compile_pattern",
    "detect_language",
    "load_configuration",
    "load_pages",
    "localize_page",
    "match_path",
    "resolve_page_options",
]
