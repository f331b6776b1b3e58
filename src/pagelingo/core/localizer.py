"""Multiply one page into a canonical page and its language alternates."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol, runtime_checkable

from pagelingo.core.config import PageOptions, PluginConfiguration
from pagelingo.core.diagnostics import DiagnosticEmitter, NullEmitter
from pagelingo.core.dynamic import DynamicRouteMatcher
from pagelingo.core.exceptions import LocalizationSkipped
from pagelingo.core.languages import build_alternate_languages, detect_language
from pagelingo.core.models import (
    DeletionOutcome,
    LocalizationContext,
    LocalizationOutcome,
    LocalizationResult,
    PageDescriptor,
)
from pagelingo.core.options import resolve_page_options


logger = logging.getLogger(__name__)


@runtime_checkable
class PageActions(Protocol):
    """Page registration primitives exposed by the host pipeline."""

    def create_page(self, page: PageDescriptor) -> None: ...

    def delete_page(self, page: PageDescriptor) -> None: ...


@dataclass(frozen=True, slots=True)
class _Plan:
    """Values resolved once per page before any page is emitted."""

    options: PageOptions | None
    language: str
    routed: bool
    original_path: str
    alternates: tuple[str, ...]


class PageLocalizer:
    """Page-creation hook producing localized variants of each page."""

    def __init__(
        self,
        config: PluginConfiguration | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.config = config or PluginConfiguration()
        self.emitter: DiagnosticEmitter = emitter or NullEmitter()
        self._routes = DynamicRouteMatcher(self.config.dynamic_pages)

    def __call__(self, page: PageDescriptor, actions: PageActions) -> LocalizationResult:
        return self.apply(self.localize(page), actions)

    # -- planning ---------------------------------------------------------

    def _plan(self, page: PageDescriptor) -> _Plan:
        config = self.config
        options = resolve_page_options(page.path, config.pages)
        alternates = build_alternate_languages(
            config.languages,
            config.default_language,
            config.generate_default_language_page,
            options,
        )

        if options is not None and options.get_language_from_path:
            detection = detect_language(
                page.path, options, config.languages, config.default_language
            )
            return _Plan(
                options=options,
                language=detection.language,
                routed=detection.routed,
                original_path=detection.original_path,
                alternates=() if detection.suppress_alternates else alternates,
            )

        return _Plan(
            options=options,
            language=config.default_language,
            routed=False,
            original_path=page.path,
            alternates=alternates,
        )

    def _context(
        self,
        *,
        language: str,
        languages: tuple[str, ...],
        routed: bool,
        original_path: str,
        path: str,
    ) -> LocalizationContext:
        return LocalizationContext(
            language=language,
            languages=languages,
            default_language=self.config.default_language,
            generate_default_language_page=self.config.generate_default_language_page,
            routed=routed,
            original_path=original_path,
            path=path,
        )

    def localize(self, page: PageDescriptor) -> LocalizationResult:
        """Compute the directives for *page* without touching any host."""
        if page.is_localized:
            return LocalizationResult.unchanged(page, LocalizationOutcome.ALREADY_LOCALIZED)

        try:
            plan = self._plan(page)
        except LocalizationSkipped as exc:
            self.emitter.event("page_skipped", {"path": page.path, "reason": str(exc)})
            return LocalizationResult.unchanged(page, LocalizationOutcome.SKIPPED, str(exc))

        global_languages = tuple(self.config.languages)
        canonical_languages = global_languages
        if plan.options is not None and plan.options.languages is not None:
            canonical_languages = tuple(plan.options.languages)

        canonical = page.with_localization(
            self._context(
                language=plan.language,
                languages=canonical_languages,
                routed=plan.routed,
                original_path=plan.original_path,
                path=page.path,
            ),
            match_path=self._routes.match_path(page.path, "", page.match_path),
        )

        created = [canonical]
        for lng in plan.alternates:
            path = f"{lng}{page.path}"
            created.append(
                page.with_localization(
                    self._context(
                        language=lng,
                        languages=global_languages,
                        routed=True,
                        original_path=plan.original_path,
                        path=path,
                    ),
                    match_path=self._routes.match_path(path, lng, page.match_path),
                )
            )

        self.emitter.event(
            "page_localized",
            {"path": page.path, "language": plan.language, "alternates": plan.alternates},
        )
        return LocalizationResult(
            outcome=LocalizationOutcome.LOCALIZED,
            source=page,
            delete=page,
            create=tuple(created),
        )

    # -- host side effects ------------------------------------------------

    def delete_best_effort(self, page: PageDescriptor, actions: PageActions) -> DeletionOutcome:
        """Ask *actions* to drop *page*, recording rather than raising failures."""
        try:
            actions.delete_page(page)
        except Exception as exc:
            logger.debug("Ignoring failed deletion of %s: %s", page.path, exc)
            if self.emitter.debug_enabled:
                self.emitter.warning(f"Unable to delete source page {page.path}", exc)
            self.emitter.event("page_delete_failed", {"path": page.path, "error": str(exc)})
            return DeletionOutcome(page=page, deleted=False, error=exc)
        return DeletionOutcome(page=page, deleted=True)

    def apply(self, result: LocalizationResult, actions: PageActions) -> LocalizationResult:
        """Apply *result* to the host: delete the source, then create every page."""
        if result.delete is not None:
            self.delete_best_effort(result.delete, actions)
        for page in result.create:
            actions.create_page(page)
        return result


def localize_page(
    page: PageDescriptor, config: PluginConfiguration | None = None
) -> LocalizationResult:
    """Functional shortcut around :meth:`PageLocalizer.localize`."""
    return PageLocalizer(config).localize(page)


__all__ = ["PageActions", "PageLocalizer", "localize_page"]
