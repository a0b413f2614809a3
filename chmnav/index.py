"""The keyword index panel: builds the index tree and navigates it."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from chmnav.treeitems import IndexItem, build_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexEntry:
    """One keyword of a book's index, as read from the book."""

    name: str
    urls: tuple[str, ...] = field(default_factory=tuple)
    seealso: str = ""
    indent: int = 0


def _first_url(urls: list[str]) -> str:
    return urls[0] if urls else ""


class IndexTab:
    """Holds the index tree, the keyword selection and lazy loading of the index."""

    def __init__(
        self,
        provider: Callable[[], Iterable[IndexEntry]] | None = None,
        activate_url: Callable[[str], None] | None = None,
        open_page: Callable[[str], None] | None = None,
        chooser: Callable[[list[str]], str] | None = None,
    ) -> None:
        self.provider = provider
        self.activate_url = activate_url
        self.open_page = open_page if open_page is not None else activate_url
        self.chooser = chooser or _first_url
        self.items: list[IndexItem] = []
        self.selected: IndexItem | None = None
        self.text = ""
        self.filled = False

    def refill(self, entries: Iterable[IndexEntry]) -> list[IndexItem]:
        """Rebuild the tree from entries; an empty list leaves the tree untouched."""
        data = list(entries)
        if not data:
            logger.warning("Index present but is empty; wrong parsing?")
            return self.items

        def make(entry: IndexEntry) -> IndexItem:
            return IndexItem(
                name=entry.name,
                urls=list(entry.urls),
                see_also=entry.seealso,
                expanded=True,
            )

        self.items = build_tree(data, make)
        return self.items

    def text_changed(self, text: str) -> IndexItem | None:
        """Select the first top-level keyword starting with text."""
        prefix = text.casefold()
        self.selected = next(
            (item for item in self.items if item.name.casefold().startswith(prefix)),
            None,
        )
        return self.selected

    def return_pressed(self) -> None:
        """Open the page of the selected keyword, if any."""
        if self.selected is None:
            return
        url = self.selected.get_url(self.chooser)
        if self.activate_url is not None:
            self.activate_url(url)

    def activate(self, item: IndexItem | None) -> None:
        """Open a keyword's page, or jump to the keyword it refers to."""
        if item is None:
            return
        url = item.get_url(self.chooser)
        if not url:
            return
        if item.is_see_also():
            target = item.see_also.casefold()
            self.selected = next(
                (i for i in self.items if i.name.casefold() == target), None
            )
        elif self.open_page is not None:
            self.open_page(url)

    def invalidate(self) -> None:
        """Forget the loaded index and the selection."""
        self.items = []
        self.filled = False
        self.selected = None

    def search(self, text: str) -> IndexItem | None:
        """Load the index if needed, then select the keyword starting with text."""
        if self.provider is None:
            return None
        if not self.filled:
            self.filled = True
            self.refill(self.provider())
        self.text = text
        return self.text_changed(text)