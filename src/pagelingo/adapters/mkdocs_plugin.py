"""MkDocs plugin emitting one localized copy of each page per language."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import unquote

from mkdocs.config import config_options
from mkdocs.config.defaults import MkDocsConfig
from mkdocs.exceptions import PluginError
from mkdocs.plugins import BasePlugin
from mkdocs.structure.files import File, Files, InclusionLevel
from mkdocs.structure.nav import Navigation
from mkdocs.structure.pages import Page

from pagelingo.core.config import PluginConfiguration, build_configuration
from pagelingo.core.diagnostics import LoggingEmitter
from pagelingo.core.exceptions import ConfigurationError, PageNotFoundError
from pagelingo.core.localizer import PageLocalizer
from pagelingo.core.models import (
    I18N_CONTEXT_KEY,
    LANGUAGE_CONTEXT_KEY,
    LocalizationContext,
    PageDescriptor,
)


log = logging.getLogger("mkdocs.plugins.pagelingo")

SRC_URI_KEY = "src_uri"
MATCH_PATH_KEY = "match_path"


def page_path(url: str) -> str:
    """Return the site-absolute path of a page from its MkDocs URL."""
    url = unquote(url or "")
    if url in {".", "./"}:
        url = ""
    elif url.startswith("./"):
        url = url[2:]
    return "/" + url.lstrip("/")


def dest_uri_for(path: str, use_directory_urls: bool) -> str:
    """Return the output file that serves *path*."""
    relative = path.lstrip("/")
    if not relative or relative.endswith("/"):
        return f"{relative}index.html"
    if relative.endswith(".html"):
        return relative
    return f"{relative}/index.html" if use_directory_urls else f"{relative}.html"


class _FilesActions:
    """Apply localizer directives for one source file to the MkDocs file set."""

    def __init__(
        self,
        plugin: LocalizedPagesPlugin,
        files: Files,
        source: File,
        path: str,
        config: MkDocsConfig,
    ) -> None:
        self._plugin = plugin
        self._files = files
        self._source = source
        self._path = path
        self._config = config
        self._pending_removal = False

    def delete_page(self, page: PageDescriptor) -> None:
        if page.path != self._path:
            raise PageNotFoundError(f"No MkDocs file serves '{page.path}'")
        self._pending_removal = True

    def create_page(self, page: PageDescriptor) -> None:
        localization = page.localization
        if page.path == self._path:
            self._pending_removal = False
            self._plugin.remember(self._source, page)
            return

        if localization is not None:
            language = localization.language
        else:
            language = page.path.split("/", 1)[0]
        generated = File.generated(
            self._config,
            f"{language}/{self._source.src_uri}",
            abs_src_path=self._source.abs_src_path,
            inclusion=InclusionLevel.NOT_IN_NAV,
        )
        generated.dest_uri = dest_uri_for(page.path, bool(self._config.use_directory_urls))
        self._files.append(generated)
        self._plugin.remember(generated, page)

    def finalize(self) -> None:
        if self._pending_removal:
            self._files.remove(self._source)


class LocalizedPagesPlugin(BasePlugin):
    """Generate a language-prefixed copy of every documentation page."""

    config_scheme = (
        ("default_language", config_options.Type(str, default="en")),
        ("generate_default_language_page", config_options.Type(bool, default=False)),
        ("languages", config_options.Type(list, default=["en"])),
        ("pages", config_options.Type(list, default=[])),
        ("dynamic_pages", config_options.Type(list, default=[])),
    )

    def __init__(self) -> None:
        self._settings: PluginConfiguration | None = None
        self._localizer: PageLocalizer | None = None
        self._pages: dict[str, PageDescriptor] = {}

    # -- MkDocs lifecycle -------------------------------------------------

    def on_config(self, config: MkDocsConfig) -> MkDocsConfig:
        """Validate the localization settings before the build starts."""
        raw = {key: self.config.get(key) for key, _ in self.config_scheme}
        raw = {key: value for key, value in raw.items() if value is not None}
        try:
            self._settings = build_configuration(raw)
        except ConfigurationError as exc:
            raise PluginError(str(exc)) from exc
        self._localizer = PageLocalizer(
            self._settings, emitter=LoggingEmitter(logger_obj=log)
        )
        self._pages.clear()
        return config

    def on_files(self, files: Files, *, config: MkDocsConfig) -> Files:
        """Localize every documentation page known to MkDocs."""
        if self._localizer is None:
            self.on_config(config)
        localizer = self._localizer
        if localizer is None:
            return files

        for source in list(files.documentation_pages()):
            path = page_path(source.url)
            descriptor = PageDescriptor(path=path, context={SRC_URI_KEY: source.src_uri})
            actions = _FilesActions(self, files, source, path, config)
            localizer(descriptor, actions)
            actions.finalize()

        log.debug("pagelingo: %d localized page(s) registered", len(self._pages))
        return files

    def on_page_context(
        self,
        context: dict[str, Any],
        *,
        page: Page,
        config: MkDocsConfig,
        nav: Navigation,
    ) -> dict[str, Any]:
        """Expose the localization metadata to theme templates."""
        del config, nav
        descriptor = self._pages.get(page.file.src_uri)
        if descriptor is None:
            return context
        localization = descriptor.localization
        if localization is not None:
            context[I18N_CONTEXT_KEY] = localization.as_dict()
            context[LANGUAGE_CONTEXT_KEY] = localization.language
        context[MATCH_PATH_KEY] = descriptor.match_path
        return context

    # -- helpers ----------------------------------------------------------

    def remember(self, file: File, page: PageDescriptor) -> None:
        self._pages[file.src_uri] = page

    def localization_for(self, src_uri: str) -> LocalizationContext | None:
        descriptor = self._pages.get(src_uri)
        return descriptor.localization if descriptor is not None else None


__all__ = ["LocalizedPagesPlugin", "dest_uri_for", "page_path"]
