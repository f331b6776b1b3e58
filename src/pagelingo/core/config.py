"""Configuration models consumed by the page localizer.

PluginConfiguration

`default_language` (`str`, alias `defaultLanguage`)
: Language served by the canonical page when the language is not read from
  the URL. Defaults to `en`.

`generate_default_language_page` (`bool`, alias `generateDefaultLanguagePage`)
: Also emit a prefixed alternate page for the default language. When `False`
  the canonical page stands in for it.

`languages` (`list[str]`)
: Ordered set of supported language codes. Duplicates are dropped.

`pages` (`list[PageOptions]`)
: Per-page overrides, tried in declaration order. The first whose
  `matchPath` matches a page path applies.

`dynamic_pages` (`list[str]`, alias `dynamicPages`)
: Route names whose pages are rendered client-side under a wildcard match
  pattern (e.g. `blog` yields `/blog/*`).

PageOptions

`match_path` (`str`, alias `matchPath`)
: Path template selecting the pages this override applies to.

`languages` (`list[str] | None`)
: Replace the global language list for matching pages.

`exclude_languages` (`list[str] | None`, alias `excludeLanguages`)
: Languages for which no alternate page is generated.

`get_language_from_path` (`bool`, alias `getLanguageFromPath`)
: Read the language from the `:lang` parameter of `match_path` instead of
  assigning the default language.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
import yaml

from pagelingo.core.exceptions import ConfigurationError, PatternSyntaxError
from pagelingo.core.models import PageDescriptor
from pagelingo.core.patterns import PathPattern, compile_pattern


CONFIG_SECTION = "pagelingo"


def _ordered_unique(values: Iterable[Any]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for value in values:
        text = str(value).strip()
        if not text or text in seen:
            continue
        seen.add(text)
        ordered.append(text)
    return ordered


class PageOptions(BaseModel):
    """Per-pattern override of the global localization settings."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    match_path: str = Field(alias="matchPath")
    languages: list[str] | None = None
    exclude_languages: list[str] | None = Field(default=None, alias="excludeLanguages")
    get_language_from_path: bool = Field(default=False, alias="getLanguageFromPath")

    @field_validator("match_path")
    @classmethod
    def _validate_pattern(cls, value: str) -> str:
        try:
            compile_pattern(value)
        except PatternSyntaxError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("languages", "exclude_languages")
    @classmethod
    def _dedupe(cls, value: list[str] | None) -> list[str] | None:
        return None if value is None else _ordered_unique(value)

    @property
    def pattern(self) -> PathPattern:
        return compile_pattern(self.match_path)


class PluginConfiguration(BaseModel):
    """Global localization settings shared by every page."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    default_language: str = Field(default="en", alias="defaultLanguage")
    generate_default_language_page: bool = Field(
        default=False, alias="generateDefaultLanguagePage"
    )
    languages: list[str] = Field(default_factory=lambda: ["en"])
    pages: list[PageOptions] = Field(default_factory=list)
    dynamic_pages: list[str] = Field(default_factory=list, alias="dynamicPages")

    @field_validator("default_language")
    @classmethod
    def _strip_default(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default language must not be empty")
        return value

    @field_validator("languages", "dynamic_pages")
    @classmethod
    def _dedupe(cls, value: list[str]) -> list[str]:
        return _ordered_unique(value)


def build_configuration(data: Mapping[str, Any] | None) -> PluginConfiguration:
    """Validate raw settings, raising :class:`ConfigurationError` on failure."""
    payload = dict(data or {})
    try:
        return PluginConfiguration.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc


def _format_validation_error(exc: ValidationError) -> str:
    lines = ["Invalid localization settings:"]
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        lines.append(f"  {location}: {error.get('msg', 'invalid value')}")
    return "\n".join(lines)


def _read_document(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read '{path}': {exc}") from exc
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unable to parse '{path}': {exc}") from exc


def load_configuration(path: Path | str) -> PluginConfiguration:
    """Load a YAML or JSON settings file.

    Settings may sit at the document root or under a ``pagelingo`` key.
    """
    source = Path(path)
    document = _read_document(source)
    if document is None:
        document = {}
    if not isinstance(document, Mapping):
        raise ConfigurationError(f"Settings in '{source}' must be a mapping.")
    section = document.get(CONFIG_SECTION, document)
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"'{CONFIG_SECTION}' in '{source}' must be a mapping.")
    return build_configuration(section)


def load_pages(path: Path | str) -> list[PageDescriptor]:
    """Load a page manifest: a list of pages or a mapping with a ``pages`` key."""
    source = Path(path)
    document = _read_document(source)
    if isinstance(document, Mapping):
        document = document.get("pages")
    if not isinstance(document, list):
        raise ConfigurationError(f"Page manifest '{source}' must contain a list of pages.")
    pages: list[PageDescriptor] = []
    for position, entry in enumerate(document):
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"Page #{position} in '{source}' must be a mapping.")
        try:
            pages.append(PageDescriptor.from_mapping(entry))
        except ValueError as exc:
            raise ConfigurationError(f"Page #{position} in '{source}': {exc}") from exc
    return pages


__all__ = [
    "CONFIG_SECTION",
    "PageOptions",
    "PluginConfiguration",
    "build_configuration",
    "load_configuration",
    "load_pages",
]
