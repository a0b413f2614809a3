from dataclasses import replace

from chmnav.browser import BrowserSettings, OpenMode


def test_open_modes_are_three_distinct_members():
    modes = [OpenMode(mode.value) for mode in OpenMode]
    assert modes == [
        OpenMode.OPEN_IN_CURRENT,
        OpenMode.OPEN_IN_NEW,
        OpenMode.OPEN_IN_BACKGROUND,
    ]
    assert len({m.value for m in modes}) == 3


def test_open_mode_lookup_by_value_round_trips():
    for mode in OpenMode:
        assert OpenMode(mode.value) is mode


def test_browser_settings_default_all_disabled():
    settings = BrowserSettings()
    assert settings == BrowserSettings(
        enable_js=False,
        enable_java=False,
        enable_plugins=False,
        enable_images=False,
        enable_offline_storage=False,
        enable_local_storage=False,
        highlight_search_results=False,
    )


def test_browser_settings_replace_changes_only_one_field():
    base = BrowserSettings(enable_images=True)
    changed = replace(base, enable_js=True)
    assert changed.enable_js is True
    assert changed.enable_images is True
    assert base.enable_js is False