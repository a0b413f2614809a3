"""The table of contents panel: builds the contents tree and navigates it."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from fnmatch import fnmatchcase

from chmnav.treeitems import TocImage, TocItem, build_tree, walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TocEntry:
    """One line of a book's table of contents, as read from the book."""

    name: str
    url: str
    indent: int = 0
    iconid: int = TocImage.NONE


class ContentsTab:
    """Holds the contents tree and turns user actions into page requests."""

    def __init__(
        self,
        activate_url: Callable[[str], None] | None = None,
        open_all_entries: bool = False,
    ) -> None:
        self.activate_url = activate_url
        self.open_all_entries = open_all_entries
        self.items: list[TocItem] = []
        self.current: TocItem | None = None

    def refill(self, entries: Iterable[TocEntry]) -> list[TocItem]:
        """Rebuild the tree from entries; an empty list leaves the tree untouched."""
        data = list(entries)
        if not data:
            logger.warning("Table of contents is present but is empty; wrong parsing?")
            return self.items

        def make(entry: TocEntry) -> TocItem:
            return TocItem(
                name=entry.name,
                url=entry.url,
                image=entry.iconid,
                expanded=self.open_all_entries,
            )

        self.items = build_tree(data, make)
        self.current = None
        return self.items

    def find_item(self, url: str) -> TocItem | None:
        """Find the entry for url, first matching fragments, then paths only."""
        for ignore_fragment in (False, True):
            found = next(
                (item for item in walk(self.items) if item.contains_url(url, ignore_fragment)),
                None,
            )
            if found is not None:
                return found
        return None

    def show_item(self, item: TocItem) -> None:
        """Make item the current entry."""
        self.current = item

    def search(self, text: str) -> TocItem | None:
        """Activate the first entry whose name matches the wildcard pattern text."""
        pattern = text.casefold()
        found = next(
            (item for item in walk(self.items) if fnmatchcase(item.name.casefold(), pattern)),
            None,
        )
        if found is not None:
            self.activate(found)
        return found

    def activate(self, item: TocItem | None) -> None:
        """Open the page an entry points at."""
        if item is None:
            return
        if self.activate_url is not None:
            self.activate_url(item.url)