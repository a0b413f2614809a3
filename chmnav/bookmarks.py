"""The bookmarks panel: named positions in pages of the open book."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Protocol


@dataclass
class Bookmark:
    """A named page position."""

    name: str
    url: str
    scroll_y: int = 0


class Browser(Protocol):
    """What the bookmarks panel needs from a view window."""

    url: str

    def set_auto_scroll(self, position: int) -> None: ...

    def set_scroll_top(self, position: int) -> None: ...


class BookmarksTab:
    """Keeps the bookmark list and opens bookmarked positions."""

    def __init__(self, open_page: Callable[[str], None] | None = None) -> None:
        self.open_page = open_page
        self.bookmarks: list[Bookmark] = []
        self.changed = False

    def __len__(self) -> int:
        return len(self.bookmarks)

    def add(self, name: str, url: str, scroll_y: int = 0) -> Bookmark | None:
        """Add a bookmark; an empty name adds nothing and returns None."""
        if not name:
            return None
        bookmark = Bookmark(name, url, scroll_y)
        self.bookmarks.append(bookmark)
        self.changed = True
        return bookmark

    def remove(self, index: int) -> Bookmark:
        """Remove and return the bookmark at index."""
        bookmark = self.bookmarks.pop(index)
        self.changed = True
        return bookmark

    def rename(self, index: int, name: str) -> bool:
        """Give the bookmark at index a new name; an empty name is refused."""
        bookmark = self.bookmarks[index]
        if not name:
            return False
        bookmark.name = name
        self.changed = True
        return True

    def restore_settings(self, bookmarks: Iterable[Bookmark]) -> None:
        """Append stored bookmarks to the list."""
        self.bookmarks.extend(
            Bookmark(b.name, b.url, b.scroll_y) for b in bookmarks
        )

    def save_settings(self) -> list[Bookmark]:
        """Copies of all bookmarks, in order, for storing."""
        return [Bookmark(b.name, b.url, b.scroll_y) for b in self.bookmarks]

    def invalidate(self) -> None:
        """Forget every bookmark."""
        self.bookmarks.clear()

    def activate(self, bookmark: Bookmark | None, browser: Browser) -> None:
        """Show the bookmarked position in browser, loading the page if needed."""
        if bookmark is None:
            return
        if browser.url != bookmark.url:
            if self.open_page is not None:
                self.open_page(bookmark.url)
            browser.set_auto_scroll(bookmark.scroll_y)
        else:
            # The page is not reloaded, so scroll right away.
            browser.set_scroll_top(bookmark.scroll_y)