# chmnav

Toolkit-independent navigation models for viewers of compiled help (CHM)
and EPUB books. Each model keeps only state and behaviour. The book data,
the page rendering and the user interface are supplied by the caller
through callbacks and small protocols.

## Modules

- `chmnav.browser`: `OpenMode` (`OPEN_IN_CURRENT`, `OPEN_IN_NEW`,
  `OPEN_IN_BACKGROUND`) and `BrowserSettings`, a dataclass of switches
  (JavaScript, Java, plugins, images, offline and local storage, search
  highlighting), all off by default.
- `chmnav.textencodings`: the table of supported text encodings.
  `supported_encodings()` returns them in display order as `TextEncoding`
  entries (`language`, `codec`). `language_for_codec(codec)` returns the
  language group for a codec name, or `"Unknown"` when the name is not in
  the table.
- `chmnav.treeitems`: the `TocItem` and `IndexItem` tree nodes, with
  `TocImage` and `Highlight`. `build_tree(entries, factory)` arranges a
  flat list of indented entries into a tree. When the indentation jumps
  more than one level, it logs a warning and reuses the nearest ancestor.
  It raises `TreeBuildError` when an entry has no parent.
  `TocItem.icon_number()` picks the icon for open, closed and leaf
  entries. `IndexItem.get_url(chooser)` lets the caller choose when a
  keyword has several targets.
- `chmnav.contents`: `ContentsTab`. `refill` builds the tree from
  `TocEntry` values. `find_item` finds the entry for a URL, first
  comparing the whole URL and then the path only. `search` activates the
  first entry whose name matches a case-insensitive wildcard pattern.
- `chmnav.index`: `IndexTab`. It builds the keyword tree from
  `IndexEntry` values and loads it from a provider the first time
  `search` is called. `text_changed` selects the first top-level keyword
  that starts with the typed text, ignoring case. `activate` opens a
  keyword's page or, for a "see also" keyword, selects the keyword it
  refers to.
- `chmnav.toolbars`: `Action`, `Toolbar`, `ActionListModel`,
  `ToolbarEditor` and `ToolbarManager`. `ToolbarManager.save` and `load`
  store toolbar contents as lists of action names in any mapping, under
  keys made of the settings root (default `"/tooolbars"`) and the toolbar
  name. Separators are stored as `".separator."`. The editor works on a
  list of available actions and a list of chosen actions for each
  toolbar, with drag-and-drop style `mime_data` and `drop_mime_data`.
  `ToolbarManager.apply_editor` applies the editor's result.
- `chmnav.bookmarks`: `BookmarksTab` with `Bookmark` entries (name, URL,
  scroll position). It adds, renames, removes, saves and restores
  bookmarks. `activate` loads the page with a pending scroll, or scrolls
  at once when the page is already shown.
- `chmnav.search`: `SearchTab`. It loads the full-text index from a file,
  or generates it and writes it there. It runs queries, keeps the query
  history, reports the outcome as a status message and returns
  `SearchResult` entries. Failures raise `SearchError`.
- `chmnav.windows`: `ViewWindowManager` with `Tab` and `SavedWindow`.
  It opens and closes tabs and never closes the last one. The first nine
  tabs get the shortcuts `Alt+1` to `Alt+9`. Tabs are named after page
  titles, cut down by `shorten_title` to 22 characters plus `...` when a
  title is longer than 25. The manager also saves and restores tabs
  between sessions and runs find-in-page on the current tab.
- `chmnav.app`: `FileOpenDispatcher`. It hands a file path to the main
  window's `open_recent_file`. If no window is available yet, it retries
  every 0.25 seconds, at most 30 times.

## Example

```python
from chmnav.contents import ContentsTab, TocEntry
from chmnav.textencodings import language_for_codec

language_for_codec("CP1251")    # "Cyrillic"
language_for_codec("nonsense")  # "Unknown"

tab = ContentsTab(activate_url=print)
tab.refill([
    TocEntry("Introduction", "intro.htm"),
    TocEntry("Chapter 1", "ch1.htm", indent=1),
])
tab.find_item("ch1.htm#part2").name  # "Chapter 1"
tab.search("chap*")                   # prints "ch1.htm"
```

## What it does not do

The package reads no book files. Tables of contents, index entries and
page titles must come from the caller. It contains no full-text search
engine: `SearchTab` drives any object that offers `load_index`,
`generate_index`, `has_index` and `search_query`. It renders no pages:
`ViewWindowManager` and `BookmarksTab` drive browser objects the caller
creates. It has no user interface and no command to run. Settings are
read from and written to mappings and lists the caller stores.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```