import pytest

from chmnav.browser import BrowserSettings, OpenMode
from chmnav.windows import SavedWindow, ViewWindowManager, shorten_title


class FakeBrowser:
    def __init__(self):
        self.url = ""
        self.title = ""
        self.scroll_top = 0
        self.zoom_factor = 1.0
        self.find_reply = (True, False)
        self.find_calls = []

    def load(self, url):
        self.url = url

    def set_auto_scroll(self, position):
        self.scroll_top = position

    def set_zoom_factor(self, zoom):
        self.zoom_factor = zoom

    def find_text(self, text, backward, case_sensitive, highlight, callback):
        self.find_calls.append((text, backward, case_sensitive, highlight))
        callback(*self.find_reply)


def make_manager(**kwargs):
    return ViewWindowManager(FakeBrowser, **kwargs)


def test_shorten_title_strips_short_titles():
    assert shorten_title("  Intro  ") == "Intro"


def test_shorten_title_cuts_long_titles():
    title = "x" * 40
    result = shorten_title(title)
    assert result == "x" * 22 + "..."
    assert len(result) == 25


def test_shorten_title_keeps_exact_limit():
    title = "y" * 25
    assert shorten_title(title) == title


def test_current_without_tabs_raises():
    with pytest.raises(LookupError):
        make_manager().current()


def test_first_tab_becomes_current_even_if_not_active():
    manager = make_manager()
    browser = manager.add_new_tab(False)
    assert manager.current() is browser
    second = manager.add_new_tab(False)
    assert manager.current() is browser
    assert manager.current_page_index() == 0
    third = manager.add_new_tab(True)
    assert manager.current() is third
    assert second is not third


def test_shortcuts_only_for_first_nine_tabs():
    manager = make_manager()
    for _ in range(10):
        manager.add_new_tab(False)
    assert manager.tabs[0].shortcut == "Alt+1"
    assert manager.tabs[8].shortcut == "Alt+9"
    assert manager.tabs[9].shortcut is None


def test_last_window_cannot_be_closed():
    manager = make_manager()
    manager.invalidate()
    manager.close_current_window()
    manager.close_window(0)
    assert len(manager.tabs) == 1
    assert manager.tabs_closable is False


def test_closing_middle_tab_renumbers_shortcuts():
    manager = make_manager()
    browsers = [manager.add_new_tab(False) for _ in range(3)]
    manager.close_window(1)
    assert [tab.browser for tab in manager.tabs] == [browsers[0], browsers[2]]
    assert [tab.shortcut for tab in manager.tabs] == ["Alt+1", "Alt+2"]
    assert manager.tabs_closable is True


def test_close_invalid_index_is_ignored():
    manager = make_manager()
    manager.add_new_tab(False)
    manager.add_new_tab(False)
    manager.close_window(7)
    assert len(manager.tabs) == 2


def test_closing_current_tab_selects_right_neighbour():
    manager = make_manager()
    browsers = [manager.add_new_tab(False) for _ in range(3)]
    manager.set_current_page(1)
    manager.close_current_window()
    assert manager.current() is browsers[2]


def test_closing_tab_before_current_keeps_current_browser():
    manager = make_manager()
    browsers = [manager.add_new_tab(False) for _ in range(3)]
    manager.set_current_page(2)
    manager.close_window(0)
    assert manager.current() is browsers[2]
    assert manager.current_page_index() == 1


def test_invalidate_leaves_single_fresh_tab():
    manager = make_manager()
    old = [manager.add_new_tab(False) for _ in range(4)]
    manager.invalidate()
    assert len(manager.tabs) == 1
    assert manager.current() not in old


def test_save_restore_round_trip():
    manager = make_manager()
    manager.invalidate()
    saved = [SavedWindow("/a.htm", 10, 1.5), SavedWindow("/b.htm#x", 0, 0.75)]
    manager.restore_settings(saved)
    assert len(manager.tabs) == 2
    assert manager.save_settings() == saved
    assert manager.current().url == "/a.htm"


def test_set_tab_name_uses_shortened_title():
    manager = make_manager()
    browser = manager.add_new_tab(True)
    browser.title = "  " + "t" * 30 + "  "
    manager.set_tab_name(browser)
    assert manager.tabs[0].title == "t" * 22 + "..."


def test_set_tab_name_ignores_unknown_browser():
    manager = make_manager()
    manager.add_new_tab(True)
    stranger = FakeBrowser()
    stranger.title = "Other"
    manager.set_tab_name(stranger)
    assert manager.tabs[0].title == ""


def test_activate_shortcut_switches_tab():
    manager = make_manager()
    browsers = [manager.add_new_tab(False) for _ in range(3)]
    assert manager.activate_shortcut("Alt+3") is True
    assert manager.current() is browsers[2]
    assert manager.activate_shortcut("Alt+8") is False
    assert manager.current() is browsers[2]


def test_tab_change_notifies():
    events = []
    manager = make_manager(
        on_url_changed=lambda url: events.append(("url", url)),
        on_history_changed=lambda: events.append(("history",)),
        on_browser_changed=lambda b: events.append(("browser", b)),
    )
    manager.add_new_tab(False)
    second = manager.add_new_tab(False)
    second.url = "/two.htm"
    events.clear()
    manager.set_current_page(1)
    assert events == [("history",), ("url", "/two.htm"), ("browser", second)]


def test_url_change_reported_only_for_current():
    urls = []
    manager = make_manager(on_url_changed=urls.append)
    first = manager.add_new_tab(False)
    second = manager.add_new_tab(False)
    urls.clear()
    manager.browser_url_changed(second, "/hidden.htm")
    manager.browser_url_changed(first, "/shown.htm")
    assert urls == ["/shown.htm"]


def test_load_finished_names_tab_and_reports():
    finished = []
    manager = make_manager(on_load_finished=lambda b, ok: finished.append((b, ok)))
    browser = manager.add_new_tab(True)
    browser.title = "Chapter"
    manager.browser_load_finished(browser, True)
    assert manager.tabs[0].title == "Chapter"
    assert finished == [(browser, True)]


def test_open_new_tab_requests_current_url():
    opened = []
    manager = make_manager(open_page=lambda url, mode: opened.append((url, mode)))
    browser = manager.add_new_tab(True)
    browser.url = "/page.htm"
    manager.open_new_tab()
    assert opened == [("/page.htm", OpenMode.OPEN_IN_NEW)]


def test_find_records_failure_and_wrap():
    manager = make_manager(settings=BrowserSettings(highlight_search_results=True))
    browser = manager.add_new_tab(True)
    browser.find_reply = (False, True)
    manager.find("word", backward=True, case_sensitive=True)
    assert browser.find_calls == [("word", True, True, True)]
    assert manager.find_visible is True
    assert manager.wrapped_shown is True
    assert manager.find_failed is True


def test_find_success_clears_wrap():
    manager = make_manager()
    browser = manager.add_new_tab(True)
    browser.find_reply = (False, True)
    manager.find("a")
    browser.find_reply = (True, False)
    manager.find("ab")
    assert manager.wrapped_shown is False
    assert manager.find_failed is False
    manager.close_search()
    assert manager.find_visible is False