"""In-memory page registry standing in for a build pipeline."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
import logging

from pagelingo.core.exceptions import PageNotFoundError
from pagelingo.core.models import PageDescriptor


logger = logging.getLogger(__name__)

CreateHook = Callable[[PageDescriptor, "PageRegistry"], object]


class PageRegistry:
    """Ordered collection of pages keyed by path.

    ``on_create`` fires for every page registered, including pages created
    from inside the hook itself, the way a pipeline's page-creation hook does.
    """

    def __init__(self, on_create: CreateHook | None = None) -> None:
        self._pages: dict[str, PageDescriptor] = {}
        self._on_create = on_create

    def __contains__(self, path: object) -> bool:
        return path in self._pages

    def __iter__(self) -> Iterator[PageDescriptor]:
        return iter(list(self._pages.values()))

    def __len__(self) -> int:
        return len(self._pages)

    def get(self, path: str) -> PageDescriptor | None:
        return self._pages.get(path)

    @property
    def pages(self) -> list[PageDescriptor]:
        return list(self._pages.values())

    def create_page(self, page: PageDescriptor) -> None:
        if page.path in self._pages:
            logger.debug("Replacing registered page %s", page.path)
        self._pages[page.path] = page
        if self._on_create is not None:
            self._on_create(page, self)

    def delete_page(self, page: PageDescriptor) -> None:
        if page.path not in self._pages:
            raise PageNotFoundError(f"No page registered at '{page.path}'")
        del self._pages[page.path]

    def build(self, pages: Iterable[PageDescriptor]) -> list[PageDescriptor]:
        """Register *pages* in order and return the resulting page set."""
        for page in pages:
            self.create_page(page)
        return self.pages


__all__ = ["CreateHook", "PageRegistry"]
