"""Tabbed view windows: opening, closing, naming and searching browser tabs."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Protocol

from chmnav.browser import BrowserSettings, OpenMode

MAX_TITLE_LENGTH = 25
SHORT_TITLE_LENGTH = 22
MAX_SHORTCUTS = 9


class ViewWindow(Protocol):
    """What the window manager needs from a browser view."""

    url: str
    title: str
    scroll_top: int
    zoom_factor: float

    def load(self, url: str) -> None: ...

    def set_auto_scroll(self, position: int) -> None: ...

    def set_zoom_factor(self, zoom: float) -> None: ...

    def find_text(
        self,
        text: str,
        backward: bool,
        case_sensitive: bool,
        highlight: bool,
        callback: Callable[[bool, bool], None],
    ) -> None: ...


@dataclass
class SavedWindow:
    """The stored state of one tab between sessions."""

    url: str
    scroll_y: int = 0
    zoom: float = 1.0


@dataclass(eq=False)
class Tab:
    """A tab holding one browser, with its title and menu shortcut."""

    browser: Any
    title: str = ""
    shortcut: str | None = None


def shorten_title(title: str) -> str:
    """Strip a page title and cut it down to fit on a tab."""
    title = title.strip()
    if len(title) > MAX_TITLE_LENGTH:
        return title[:SHORT_TITLE_LENGTH] + "..."
    return title


def _shortcut(number: int) -> str:
    return f"Alt+{number}"


def _nothing(*args: Any) -> None:
    return None


class ViewWindowManager:
    """Keeps the browser tabs, the current tab and the find-in-page state."""

    def __init__(
        self,
        browser_factory: Callable[[], Any],
        settings: BrowserSettings | None = None,
        *,
        on_url_changed: Callable[[str], None] | None = None,
        on_history_changed: Callable[[], None] | None = None,
        on_browser_changed: Callable[[Any], None] | None = None,
        on_load_finished: Callable[[Any, bool], None] | None = None,
        on_link_clicked: Callable[[Any, str, OpenMode], None] | None = None,
        open_page: Callable[[str, OpenMode], None] | None = None,
    ) -> None:
        self.browser_factory = browser_factory
        self.settings = settings or BrowserSettings()
        self.on_url_changed = on_url_changed or _nothing
        self.on_history_changed = on_history_changed or _nothing
        self.on_browser_changed = on_browser_changed or _nothing
        self.on_load_finished = on_load_finished or _nothing
        self.on_link_clicked = on_link_clicked or _nothing
        self.open_page = open_page or _nothing
        self.tabs: list[Tab] = []
        self._current = -1
        self.tabs_closable = False
        self.find_visible = False
        self.wrapped_shown = False
        self.find_failed = False

    # Tab lookup

    def _tab_for_browser(self, browser: Any) -> Tab | None:
        return next((tab for tab in self.tabs if tab.browser is browser), None)

    def _tab_at(self, index: int) -> Tab | None:
        if 0 <= index < len(self.tabs):
            return self.tabs[index]
        return None

    def current(self) -> Any:
        """The browser of the current tab; raises LookupError if there is none."""
        tab = self._tab_at(self._current)
        if tab is None:
            raise LookupError("there is no current view window")
        return tab.browser

    def current_page_index(self) -> int:
        """Index of the current tab, or -1 when there are no tabs."""
        return self._current

    def _change_current(self, index: int) -> None:
        previous = self._tab_at(self._current)
        self._current = index
        tab = self._tab_at(index)
        if tab is None or tab is previous:
            return
        self.on_history_changed()
        self.on_url_changed(tab.browser.url)
        self.on_browser_changed(tab.browser)

    def set_current_page(self, index: int) -> None:
        """Switch to the tab at index; an invalid index is ignored."""
        if self._tab_at(index) is not None:
            self._change_current(index)

    # Opening and closing

    def add_new_tab(self, set_active: bool) -> Any:
        """Create a browser in a new tab and return it."""
        browser = self.browser_factory()
        tab = Tab(browser=browser, title="")
        self.tabs.append(tab)
        if len(self.tabs) <= MAX_SHORTCUTS:
            tab.shortcut = _shortcut(len(self.tabs))
        if set_active or len(self.tabs) == 1:
            self._change_current(len(self.tabs) - 1)
        return browser

    def _update_close_buttons(self) -> None:
        self.tabs_closable = len(self.tabs) > 1

    def _close_tab(self, tab: Tab) -> None:
        index = self.tabs.index(tab)
        previous = self._tab_at(self._current)
        del self.tabs[index]

        if not self.tabs:
            self._current = -1
        elif index < self._current:
            self._current -= 1
        elif index == self._current:
            new_index = min(index, len(self.tabs) - 1)
            self._current = -1
            self._change_current(new_index)
        if previous is not None and previous is not tab:
            self._current = self.tabs.index(previous)

        self._update_close_buttons()
        for number, remaining in enumerate(self.tabs[:MAX_SHORTCUTS], start=1):
            remaining.shortcut = _shortcut(number)

    def _close_all(self) -> None:
        while self.tabs:
            self._close_tab(self.tabs[0])

    def close_current_window(self) -> None:
        """Close the current tab, unless it is the only one."""
        if len(self.tabs) == 1:
            return
        tab = self._tab_at(self._current)
        if tab is not None:
            self._close_tab(tab)

    def close_window(self, index: int) -> None:
        """Close the tab at index, unless it is the only one; bad indexes are ignored."""
        if len(self.tabs) == 1:
            return
        tab = self._tab_at(index)
        if tab is not None:
            self._close_tab(tab)

    def invalidate(self) -> None:
        """Close every tab and open one empty, active tab."""
        self._close_all()
        self.add_new_tab(True)

    def set_tab_name(self, browser: Any) -> None:
        """Name the browser's tab after its page title; unknown browsers are ignored."""
        tab = self._tab_for_browser(browser)
        if tab is None:
            return
        tab.title = shorten_title(browser.title)
        self._update_close_buttons()

    def activate_shortcut(self, shortcut: str) -> bool:
        """Switch to the tab bound to shortcut; returns whether one was found."""
        for index, tab in enumerate(self.tabs):
            if tab.shortcut == shortcut:
                self._change_current(index)
                return True
        return False

    # Settings

    def restore_settings(self, saved: Iterable[SavedWindow]) -> None:
        """Replace the automatically created tab with the stored ones."""
        if self.tabs:
            self._close_tab(self.tabs[0])
        for window in saved:
            browser = self.add_new_tab(False)
            browser.load(window.url)
            browser.set_auto_scroll(window.scroll_y)
            browser.set_zoom_factor(window.zoom)

    def save_settings(self) -> list[SavedWindow]:
        """The state of every tab, in tab order."""
        return [
            SavedWindow(tab.browser.url, tab.browser.scroll_top, tab.browser.zoom_factor)
            for tab in self.tabs
        ]

    # Browser events

    def browser_url_changed(self, browser: Any, url: str) -> None:
        """Report a URL change, if it happened in the current tab."""
        if self.tabs and browser is self.current():
            self.on_url_changed(url)
            self.on_history_changed()

    def browser_load_finished(self, browser: Any, success: bool) -> None:
        """Rename the browser's tab and report that loading finished."""
        self.set_tab_name(browser)
        self.on_load_finished(browser, success)

    def browser_link_clicked(self, browser: Any, url: str, mode: OpenMode) -> None:
        """Pass on a link followed in a browser."""
        self.on_link_clicked(browser, url, mode)

    def open_new_tab(self) -> None:
        """Open the current page again in a new tab."""
        self.open_page(self.current().url, OpenMode.OPEN_IN_NEW)

    def current_url(self) -> str:
        """The URL of the current page."""
        return self.current().url

    # Find in page

    def open_find(self) -> None:
        """Show the find bar."""
        self.find_visible = True
        self.wrapped_shown = False

    def close_search(self) -> None:
        """Hide the find bar."""
        self.find_visible = False

    def _find_result(self, found: bool, wrapped: bool) -> None:
        self.find_visible = True
        if wrapped:
            self.wrapped_shown = True
        self.find_failed = not found

    def find(self, text: str, backward: bool = False, case_sensitive: bool = False) -> None:
        """Search the current page for text and record the outcome."""
        self.wrapped_shown = False
        self.current().find_text(
            text,
            backward,
            case_sensitive,
            self.settings.highlight_search_results,
            self._find_result,
        )