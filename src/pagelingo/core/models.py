"""Page descriptors exchanged with the host build pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


I18N_CONTEXT_KEY = "i18n"
LANGUAGE_CONTEXT_KEY = "language"


@dataclass(frozen=True, slots=True)
class LocalizationContext:
    """Routing metadata attached to every page emitted by the localizer.

    Its presence in a page context marks the page as already processed.
    """

    language: str
    languages: tuple[str, ...]
    default_language: str
    generate_default_language_page: bool
    routed: bool
    original_path: str
    path: str

    def as_dict(self) -> dict[str, Any]:
        """Serialise using the keys consumed by front-end routers."""
        return {
            "language": self.language,
            "languages": list(self.languages),
            "defaultLanguage": self.default_language,
            "generateDefaultLanguagePage": self.generate_default_language_page,
            "routed": self.routed,
            "originalPath": self.original_path,
            "path": self.path,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LocalizationContext:
        """Rebuild a context from its serialised form (camelCase or snake_case)."""

        def pick(camel: str, snake: str, default: Any = None) -> Any:
            if camel in data:
                return data[camel]
            return data.get(snake, default)

        return cls(
            language=str(data.get("language", "")),
            languages=tuple(data.get("languages") or ()),
            default_language=str(pick("defaultLanguage", "default_language", "")),
            generate_default_language_page=bool(
                pick("generateDefaultLanguagePage", "generate_default_language_page", False)
            ),
            routed=bool(data.get("routed", False)),
            original_path=str(pick("originalPath", "original_path", "")),
            path=str(data.get("path", "")),
        )


def _freeze(context: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(context or {}))


@dataclass(frozen=True, slots=True)
class PageDescriptor:
    """One page as known to the build pipeline.

    Descriptors are immutable; the localizer always returns new instances.
    """

    path: str
    match_path: str | None = None
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", _freeze(self.context))

    @property
    def localization(self) -> LocalizationContext | None:
        """Return the embedded localization marker, if any."""
        marker = self.context.get(I18N_CONTEXT_KEY)
        if isinstance(marker, LocalizationContext):
            return marker
        if isinstance(marker, Mapping):
            return LocalizationContext.from_mapping(marker)
        return None

    @property
    def is_localized(self) -> bool:
        """Whether the context carries the marker; an explicit ``None`` counts."""
        if I18N_CONTEXT_KEY not in self.context:
            return False
        marker = self.context[I18N_CONTEXT_KEY]
        return marker is None or isinstance(marker, (LocalizationContext, Mapping))

    @property
    def language(self) -> str | None:
        localization = self.localization
        return localization.language if localization is not None else None

    def with_localization(
        self,
        localization: LocalizationContext,
        *,
        match_path: str | None,
    ) -> PageDescriptor:
        """Return a copy routed to ``localization.path`` and carrying the marker."""
        context = dict(self.context)
        context[LANGUAGE_CONTEXT_KEY] = localization.language
        context[I18N_CONTEXT_KEY] = localization
        return PageDescriptor(path=localization.path, match_path=match_path, context=context)

    def to_dict(self) -> dict[str, Any]:
        context: dict[str, Any] = {}
        for key, value in self.context.items():
            if isinstance(value, LocalizationContext):
                value = value.as_dict()
            context[key] = value
        return {"path": self.path, "matchPath": self.match_path, "context": context}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PageDescriptor:
        if "path" not in data:
            raise ValueError("Page entries require a 'path' value.")
        match_path = data.get("matchPath", data.get("match_path"))
        return cls(
            path=str(data["path"]),
            match_path=str(match_path) if match_path is not None else None,
            context=dict(data.get("context") or {}),
        )


class LocalizationOutcome(str, Enum):
    """Terminal state reached by one localizer invocation."""

    LOCALIZED = "localized"
    ALREADY_LOCALIZED = "already-localized"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class LocalizationResult:
    """Directives returned by the localizer for a single page."""

    outcome: LocalizationOutcome
    source: PageDescriptor
    delete: PageDescriptor | None = None
    create: tuple[PageDescriptor, ...] = ()
    reason: str | None = None

    @property
    def canonical(self) -> PageDescriptor | None:
        return self.create[0] if self.create else None

    @property
    def alternates(self) -> tuple[PageDescriptor, ...]:
        return self.create[1:]

    @classmethod
    def unchanged(
        cls, page: PageDescriptor, outcome: LocalizationOutcome, reason: str | None = None
    ) -> LocalizationResult:
        return cls(outcome=outcome, source=page, reason=reason)


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    """Result of a best-effort deletion; callers are free to discard it."""

    page: PageDescriptor
    deleted: bool
    error: BaseException | None = None


__all__ = [
    "I18N_CONTEXT_KEY",
    "LANGUAGE_CONTEXT_KEY",
    "DeletionOutcome",
    "LocalizationContext",
    "LocalizationOutcome",
    "LocalizationResult",
    "PageDescriptor",
]
