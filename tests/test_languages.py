from __future__ import annotations

import pytest

from pagelingo.core.config import PageOptions
from pagelingo.core.exceptions import LanguagePatternMismatch, LocalizationSkipped
from pagelingo.core.languages import build_alternate_languages, detect_language
from pagelingo.core.options import resolve_page_options


LANGUAGES = ("en", "fr", "de")


def _options(**kwargs: object) -> PageOptions:
    return PageOptions.model_validate(kwargs)


def test_first_matching_options_win() -> None:
    broad = _options(matchPath="/blog/*")
    narrow = _options(matchPath="/blog/:slug", languages=["fr"])

    assert resolve_page_options("/blog/post", [broad, narrow]) is broad
    assert resolve_page_options("/blog/post", [narrow, broad]) is narrow


def test_no_matching_options() -> None:
    assert resolve_page_options("/about", [_options(matchPath="/blog/*")]) is None
    assert resolve_page_options("/about", []) is None


def test_default_language_is_left_to_the_canonical_page() -> None:
    assert build_alternate_languages(LANGUAGES, "en", False) == ("fr", "de")


def test_default_language_page_can_be_generated() -> None:
    assert build_alternate_languages(LANGUAGES, "en", True) == ("en", "fr", "de")


def test_excluded_languages_are_dropped() -> None:
    options = _options(matchPath="/legal", excludeLanguages=["fr"])

    assert build_alternate_languages(LANGUAGES, "en", False, options) == ("de",)


def test_languages_override_replaces_the_global_list() -> None:
    options = _options(matchPath="/promo", languages=["en", "es"])

    assert build_alternate_languages(LANGUAGES, "en", False, options) == ("es",)
    assert build_alternate_languages(LANGUAGES, "en", True, options) == ("en", "es")


def test_languages_override_discards_exclusions() -> None:
    # Documented quirk: the override runs after the exclusion and ignores it.
    options = _options(matchPath="/promo", languages=["de", "es"], excludeLanguages=["de"])

    assert build_alternate_languages(LANGUAGES, "en", False, options) == ("de", "es")


def test_alternate_set_may_be_empty() -> None:
    assert build_alternate_languages(("en",), "en", False) == ()


DETECT = _options(matchPath="/:lang?/blog/:uid", getLanguageFromPath=True)


def test_detect_language_from_prefix() -> None:
    detection = detect_language("/fr/blog/post", DETECT, LANGUAGES, "en")

    assert detection.language == "fr"
    assert detection.routed is True
    assert detection.original_path == "/blog/post"
    assert detection.suppress_alternates is True


def test_detect_language_without_prefix_uses_default() -> None:
    detection = detect_language("/blog/post", DETECT, LANGUAGES, "en")

    assert detection.language == "en"
    assert detection.routed is False
    assert detection.original_path == "/blog/post"
    assert detection.suppress_alternates is True


def test_unknown_language_falls_back_but_stays_routed() -> None:
    detection = detect_language("/xx/blog/post", DETECT, LANGUAGES, "en")

    assert detection.language == "en"
    assert detection.routed is True
    assert detection.original_path == "/xx/blog/post"


def test_exclusions_keep_alternates_for_unrouted_pages() -> None:
    options = _options(
        matchPath="/:lang?/blog/:uid", getLanguageFromPath=True, excludeLanguages=[]
    )

    unrouted = detect_language("/blog/post", options, LANGUAGES, "en")
    routed = detect_language("/de/blog/post", options, LANGUAGES, "en")

    assert unrouted.suppress_alternates is False
    assert routed.suppress_alternates is True


def test_only_first_language_segment_is_stripped() -> None:
    detection = detect_language("/fr/blog/fr", DETECT, LANGUAGES, "en")

    assert detection.original_path == "/blog/fr"


def test_percent_encoded_prefix_is_not_a_known_language() -> None:
    detection = detect_language("/%66r/blog/post", DETECT, LANGUAGES, "en")

    assert detection.language == "en"
    assert detection.routed is True
    assert detection.original_path == "/%66r/blog/post"


def test_pattern_mismatch_is_a_recoverable_skip() -> None:
    with pytest.raises(LanguagePatternMismatch) as excinfo:
        detect_language("/docs/post", DETECT, LANGUAGES, "en")

    assert isinstance(excinfo.value, LocalizationSkipped)
    assert excinfo.value.path == "/docs/post"
