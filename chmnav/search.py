"""The full-text search panel: prepares the search index and runs queries."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Protocol

GENERATING_MESSAGE = "Generating search index..."
READING_MESSAGE = "Reading dictionary..."


class SearchError(RuntimeError):
    """Raised when a search cannot be carried out."""


@dataclass(frozen=True)
class SearchResult:
    """One page found by a search."""

    title: str
    url: str


class SearchEngine(Protocol):
    """What the search panel needs from a full-text search engine."""

    def load_index(self, stream: BinaryIO) -> bool: ...

    def generate_index(
        self, stream: BinaryIO, progress: Callable[[int, str], None]
    ) -> None: ...

    def has_index(self) -> bool: ...

    def search_query(self, query: str) -> list[str] | None: ...


class SearchTab:
    """Keeps the query history and results, building the index on first use."""

    def __init__(
        self,
        engine: SearchEngine,
        index_file: str | Path,
        topic_for_url: Callable[[str], str] | None = None,
        status: Callable[[str], None] | None = None,
    ) -> None:
        self.engine = engine
        self.index_file = Path(index_file)
        self.topic_for_url = topic_for_url
        self._status = status
        self.status_message = ""
        self.history: list[str] = []
        self.results: list[SearchResult] = []
        self.progress: tuple[int, str] | None = None
        self.ready = False

    def _show(self, message: str) -> None:
        self.status_message = message
        if self._status is not None:
            self._status(message)

    def _title(self, url: str) -> str:
        if self.topic_for_url is None:
            return ""
        return self.topic_for_url(url)

    def invalidate(self) -> None:
        """Forget results, history and the loaded index."""
        self.results = []
        self.history = []
        self.progress = None
        self.ready = False

    def restore_settings(self, history: Iterable[str]) -> None:
        """Append stored queries to the history."""
        self.history.extend(history)

    def save_settings(self) -> list[str]:
        """The query history, for storing."""
        return list(self.history)

    def _init_engine(self) -> None:
        try:
            with self.index_file.open("rb") as stream:
                self._show(READING_MESSAGE)
                if self.engine.load_index(stream):
                    self.ready = True
                    return
        except OSError:
            pass

        self.progress = (0, GENERATING_MESSAGE)
        self._show(GENERATING_MESSAGE)
        try:
            stream = self.index_file.open("wb")
        except OSError as exc:
            self.progress = None
            raise SearchError(
                f"The index cannot be saved into file {self.index_file}"
            ) from exc
        try:
            with stream:
                self.engine.generate_index(stream, self.on_progress)
        finally:
            self.progress = None

        self.ready = self.engine.has_index()
        if not self.ready:
            raise SearchError("The search index could not be generated")

    def search_query(self, query: str) -> list[str]:
        """Return the URLs of pages holding every term of query."""
        if not self.ready:
            self._init_engine()
        if not self.engine.has_index():
            raise SearchError("The index is not present")
        if not query:
            raise SearchError("The query is empty")
        urls = self.engine.search_query(query)
        if urls is None:
            raise SearchError("Search failed")
        return list(urls)

    def run_query(self, query: str) -> list[SearchResult] | None:
        """Run query as the user typed it and report the outcome in the status."""
        if not query:
            return None
        if query not in self.history:
            self.history.append(query)
        self.results = []
        try:
            urls = self.search_query(query)
        except SearchError:
            self._show("Search failed")
            return None
        self.results = [SearchResult(self._title(url), url) for url in urls]
        if self.results:
            self._show(f"Search returned {len(self.results)} result(s)")
        else:
            self._show("Search returned no results")
        return self.results

    def on_progress(self, value: int, step_name: str) -> None:
        """Record index generation progress while it is running."""
        if self.progress is not None:
            self.progress = (value, step_name)