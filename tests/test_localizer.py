from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from pagelingo.core import localizer as localizer_module
from pagelingo.core.config import PageOptions, build_configuration
from pagelingo.core.exceptions import PageNotFoundError
from pagelingo.core.localizer import PageLocalizer, localize_page
from pagelingo.core.models import (
    I18N_CONTEXT_KEY,
    LocalizationContext,
    LocalizationOutcome,
    PageDescriptor,
)


class RecordingActions:
    def __init__(self, *, fail_delete: bool = False) -> None:
        self.created: list[PageDescriptor] = []
        self.deleted: list[PageDescriptor] = []
        self.fail_delete = fail_delete

    def create_page(self, page: PageDescriptor) -> None:
        self.created.append(page)

    def delete_page(self, page: PageDescriptor) -> None:
        if self.fail_delete:
            raise PageNotFoundError(page.path)
        self.deleted.append(page)


class RecordingEmitter:
    def __init__(self, *, debug_enabled: bool = False) -> None:
        self.debug_enabled = debug_enabled
        self.events: list[tuple[str, dict[str, Any]]] = []
        self.warnings: list[tuple[str, BaseException | None]] = []

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        self.warnings.append((message, exc))

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        self.events.append((name, dict(payload)))


def _localizer(**settings: Any) -> PageLocalizer:
    settings.setdefault("languages", ["en", "fr", "de"])
    return PageLocalizer(build_configuration(settings))


def test_canonical_page_keeps_path_and_carries_context() -> None:
    page = PageDescriptor(path="/about", context={"slug": "about"})

    result = _localizer().localize(page)

    assert result.outcome is LocalizationOutcome.LOCALIZED
    assert result.delete is page
    canonical = result.canonical
    assert canonical is not None
    assert canonical.path == "/about"
    assert canonical.context["slug"] == "about"
    assert canonical.context["language"] == "en"
    assert canonical.localization == LocalizationContext(
        language="en",
        languages=("en", "fr", "de"),
        default_language="en",
        generate_default_language_page=False,
        routed=False,
        original_path="/about",
        path="/about",
    )


def test_source_page_is_not_modified() -> None:
    page = PageDescriptor(path="/about", context={"slug": "about"})

    _localizer().localize(page)

    assert dict(page.context) == {"slug": "about"}
    assert not page.is_localized


def test_already_localized_page_is_a_noop() -> None:
    actions = RecordingActions()
    localizer = _localizer()
    first = localizer(PageDescriptor(path="/about"), actions)

    for page in first.create:
        again = localizer(page, actions)
        assert again.outcome is LocalizationOutcome.ALREADY_LOCALIZED
        assert again.delete is None
        assert again.create == ()

    assert len(actions.created) == len(first.create)
    assert len(actions.deleted) == 1


def test_serialised_marker_also_counts_as_processed() -> None:
    page = PageDescriptor(path="/about", context={I18N_CONTEXT_KEY: {"language": "fr"}})

    result = _localizer().localize(page)

    assert result.outcome is LocalizationOutcome.ALREADY_LOCALIZED


def test_null_marker_counts_as_processed() -> None:
    page = PageDescriptor(path="/about", context={I18N_CONTEXT_KEY: None})

    result = _localizer().localize(page)

    assert result.outcome is LocalizationOutcome.ALREADY_LOCALIZED
    assert result.create == ()


def test_alternates_cover_every_configured_language() -> None:
    result = _localizer().localize(PageDescriptor(path="/about"))

    languages = [page.language for page in result.create]
    assert set(languages) == {"en", "fr", "de"}
    assert languages[0] == "en"
    assert len(languages) == 3


def test_excluded_language_gets_no_alternate() -> None:
    localizer = _localizer(pages=[{"matchPath": "/legal", "excludeLanguages": ["fr"]}])

    result = localizer.localize(PageDescriptor(path="/legal"))

    assert [page.language for page in result.alternates] == ["de"]


def test_languages_override_ignores_exclusions() -> None:
    # Documented quirk carried over for compatibility: exclusions are dropped
    # when the same options also list languages.
    localizer = _localizer(
        languages=["en", "fr", "de", "es"],
        pages=[{"matchPath": "/promo", "languages": ["de", "es"], "excludeLanguages": ["de"]}],
    )

    result = localizer.localize(PageDescriptor(path="/promo"))

    assert [page.language for page in result.alternates] == ["de", "es"]
    canonical = result.canonical
    assert canonical is not None and canonical.localization is not None
    assert canonical.localization.languages == ("de", "es")
    for alternate in result.alternates:
        assert alternate.localization is not None
        assert alternate.localization.languages == ("en", "fr", "de", "es")


def test_alternate_path_is_a_literal_concatenation() -> None:
    result = _localizer().localize(PageDescriptor(path="/about"))

    by_language = {page.language: page for page in result.alternates}
    assert by_language["fr"].path == "fr" + "/about"
    assert by_language["fr"].path == "fr/about"
    localization = by_language["fr"].localization
    assert localization is not None
    assert localization.routed is True
    assert localization.original_path == "/about"
    assert localization.path == "fr/about"


def test_not_found_page_gets_catch_all_patterns() -> None:
    localizer = _localizer(dynamicPages=["404"])

    result = localizer.localize(PageDescriptor(path="/404/"))

    assert [page.match_path for page in result.create] == ["/*", "/fr/*", "/de/*"]


def test_detection_mismatch_leaves_page_untouched(monkeypatch: pytest.MonkeyPatch) -> None:
    options = PageOptions.model_validate(
        {"matchPath": "/:lang/blog/:uid", "getLanguageFromPath": True}
    )
    monkeypatch.setattr(localizer_module, "resolve_page_options", lambda path, pages: options)
    emitter = RecordingEmitter()
    localizer = PageLocalizer(build_configuration({"languages": ["en", "fr"]}), emitter=emitter)
    actions = RecordingActions()

    result = localizer(PageDescriptor(path="/about"), actions)

    assert result.outcome is LocalizationOutcome.SKIPPED
    assert result.create == ()
    assert result.delete is None
    assert actions.created == []
    assert actions.deleted == []
    assert emitter.events[0][0] == "page_skipped"


def test_detection_mismatch_is_stable_across_invocations(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    options = PageOptions.model_validate(
        {"matchPath": "/:lang/blog/:uid", "getLanguageFromPath": True}
    )
    monkeypatch.setattr(localizer_module, "resolve_page_options", lambda path, pages: options)
    localizer = _localizer()
    page = PageDescriptor(path="/about")

    outcomes = {localizer.localize(page).outcome for _ in range(3)}

    assert outcomes == {LocalizationOutcome.SKIPPED}


def test_dynamic_route_rewrite() -> None:
    localizer = _localizer(languages=["en", "es"], dynamicPages=["blog"])

    result = localizer.localize(PageDescriptor(path="/blog/my-post"))

    canonical = result.canonical
    assert canonical is not None
    assert canonical.match_path == "/blog/*"
    (alternate,) = result.alternates
    assert alternate.path == "es/blog/my-post"
    assert alternate.match_path == "es/blog/*"


def test_existing_match_path_is_propagated() -> None:
    result = _localizer().localize(PageDescriptor(path="/app/", match_path="/app/*"))

    assert {page.match_path for page in result.create} == {"/app/*"}


def test_language_detected_from_path_suppresses_alternates() -> None:
    localizer = _localizer(
        pages=[{"matchPath": "/:lang?/blog/:uid", "getLanguageFromPath": True}]
    )

    result = localizer.localize(PageDescriptor(path="/fr/blog/post"))

    assert result.alternates == ()
    canonical = result.canonical
    assert canonical is not None
    assert canonical.path == "/fr/blog/post"
    localization = canonical.localization
    assert localization is not None
    assert localization.language == "fr"
    assert localization.routed is True
    assert localization.original_path == "/blog/post"


def test_unrouted_page_with_exclusions_keeps_alternates() -> None:
    localizer = _localizer(
        pages=[
            {
                "matchPath": "/:lang?/blog/:uid",
                "getLanguageFromPath": True,
                "excludeLanguages": ["de"],
            }
        ]
    )

    result = localizer.localize(PageDescriptor(path="/blog/post"))

    assert [page.path for page in result.alternates] == ["fr/blog/post"]
    assert result.alternates[0].localization is not None
    assert result.alternates[0].localization.original_path == "/blog/post"


def test_deletion_failure_is_swallowed() -> None:
    actions = RecordingActions(fail_delete=True)
    emitter = RecordingEmitter()
    localizer = PageLocalizer(build_configuration({"languages": ["en", "fr"]}), emitter=emitter)

    result = localizer(PageDescriptor(path="/about"), actions)

    assert [page.path for page in actions.created] == ["/about", "fr/about"]
    assert result.outcome is LocalizationOutcome.LOCALIZED
    assert ("page_delete_failed", {"path": "/about", "error": "/about"}) in emitter.events


def test_delete_best_effort_reports_outcome() -> None:
    localizer = _localizer()
    page = PageDescriptor(path="/about")

    ok = localizer.delete_best_effort(page, RecordingActions())
    failed = localizer.delete_best_effort(page, RecordingActions(fail_delete=True))

    assert ok.deleted is True and ok.error is None
    assert failed.deleted is False
    assert isinstance(failed.error, PageNotFoundError)


def test_localized_event_lists_alternates() -> None:
    emitter = RecordingEmitter()
    localizer = PageLocalizer(build_configuration({"languages": ["en", "fr"]}), emitter=emitter)

    localizer.localize(PageDescriptor(path="/about"))

    assert emitter.events == [
        ("page_localized", {"path": "/about", "language": "en", "alternates": ("fr",)})
    ]


def test_localize_page_uses_default_configuration() -> None:
    result = localize_page(PageDescriptor(path="/"))

    assert [page.path for page in result.create] == ["/"]
    assert result.alternates == ()


@pytest.mark.parametrize("debug_enabled", [False, True])
def test_deletion_failure_warns_only_when_debugging(debug_enabled: bool) -> None:
    emitter = RecordingEmitter(debug_enabled=debug_enabled)
    localizer = PageLocalizer(build_configuration({"languages": ["en"]}), emitter=emitter)

    outcome = localizer.delete_best_effort(
        PageDescriptor(path="/about"), RecordingActions(fail_delete=True)
    )

    if debug_enabled:
        assert emitter.warnings == [("Unable to delete source page /about", outcome.error)]
    else:
        assert emitter.warnings == []
