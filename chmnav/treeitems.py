"""Tree items for the table of contents and the keyword index, and tree building."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Protocol, TypeVar
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


class TreeBuildError(ValueError):
    """Raised when indented entries cannot be arranged into a tree."""


class TocImage(IntEnum):
    """Special image numbers of a table-of-contents entry."""

    NONE = -1
    AUTO = -2


class Highlight(Enum):
    """How an index entry is coloured."""

    NONE = "none"
    MULTIPLE = "red"
    SEE_ALSO = "lightgray"


@dataclass(eq=False)
class TocItem:
    """An entry in the table of contents tree."""

    name: str
    url: str
    image: int = TocImage.NONE
    children: list[TocItem] = field(default_factory=list)
    expanded: bool = False

    def contains_url(self, url: str, ignore_fragment: bool) -> bool:
        """Whether this entry points at url, optionally comparing paths only."""
        if not ignore_fragment:
            return url == self.url
        return _rooted_path(url) == _rooted_path(self.url)

    def icon_number(self) -> int | None:
        """The icon to show for this entry, or None if it has no icon."""
        if self.image == TocImage.NONE:
            return None
        auto = self.image == TocImage.AUTO
        if self.children:
            if self.expanded:
                return 1 if auto else self.image
            return 0 if auto else self.image + 1
        return 10 if auto else self.image


def _rooted_path(url: str) -> str:
    path = urlsplit(url).path
    return path if path.startswith("/") else "/" + path


@dataclass(eq=False)
class IndexItem:
    """An entry in the keyword index tree."""

    name: str
    urls: list[str] = field(default_factory=list)
    see_also: str = ""
    children: list[IndexItem] = field(default_factory=list)
    expanded: bool = False

    def is_see_also(self) -> bool:
        """Whether the entry refers to another keyword instead of a page."""
        return bool(self.see_also)

    def contains_url(self, url: str) -> bool:
        """Whether url is one of this entry's targets."""
        return url in self.urls

    def get_url(self, chooser: Callable[[list[str]], str]) -> str:
        """Return the single target, or let chooser pick one of several."""
        if len(self.urls) == 1:
            return self.urls[0]
        return chooser(list(self.urls))

    def highlight(self) -> Highlight:
        """The colour hint for this entry."""
        if len(self.urls) > 1:
            return Highlight.MULTIPLE
        if self.is_see_also():
            return Highlight.SEE_ALSO
        return Highlight.NONE


class _Node(Protocol):
    children: list[Any]


class _Indented(Protocol):
    indent: int


N = TypeVar("N", bound=_Node)


def build_tree(entries: Iterable[_Indented], factory: Callable[[Any], N]) -> list[N]:
    """Arrange indented entries into a tree of items made by factory.

    Indentation that jumps more than one level is tolerated: the missing
    levels reuse the nearest ancestor. Returns the top-level items.
    """
    roots: list[N] = []
    parents: list[N | None] = []
    warned = False

    for entry in entries:
        indent = entry.indent
        if indent >= len(parents):
            max_indent = len(parents) - 1
            if indent > 0 and max_indent < 0:
                raise TreeBuildError(
                    "Invalid first indent (first entry has no root entry)"
                )
            parents.extend([None] * (indent + 1 - len(parents)))
            if indent - max_indent > 1:
                if not warned:
                    logger.warning(
                        "Invalid indent step, applying workaround. Results may vary."
                    )
                    warned = True
                for level in range(max_indent, indent):
                    parents[level + 1] = parents[level]
            parents[indent] = None

        item = factory(entry)
        if indent == 0:
            roots.append(item)
        else:
            parent = parents[indent - 1]
            if parent is None:
                raise TreeBuildError(
                    f"Child entry indented as {indent} with no root entry"
                )
            parent.children.append(item)
        parents[indent] = item

    return roots


def walk(items: Sequence[N]) -> Iterable[N]:
    """Yield items and all their descendants depth-first."""
    for item in items:
        yield item
        yield from walk(item.children)