"""Primary public API for pagelingo."""

from __future__ import annotations

from pagelingo.core.config import (
    PageOptions,
    PluginConfiguration,
    build_configuration,
    load_configuration,
    load_pages,
)
from pagelingo.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from pagelingo.core.exceptions import (
    ConfigurationError,
    LanguagePatternMismatch,
    LocalizationSkipped,
    PagelingoError,
    PatternSyntaxError,
)
from pagelingo.core.localizer import PageActions, PageLocalizer, localize_page
from pagelingo.core.models import (
    I18N_CONTEXT_KEY,
    LocalizationContext,
    LocalizationOutcome,
    LocalizationResult,
    PageDescriptor,
)
from pagelingo.core.registry import PageRegistry
from pagelingo.version import get_version


__version__ = get_version()


__all__ = [
    "I18N_CONTEXT_KEY",
    "ConfigurationError",
    "DiagnosticEmitter",
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
    "PageOptions",
    "PageRegistry",
    "PagelingoError",
    "PatternSyntaxError",
    "PluginConfiguration",
    "__version__",
    "build_configuration",
    "load_configuration",
    "load_pages",
    "localize_page",
]
