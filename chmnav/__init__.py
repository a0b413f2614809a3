"""Navigation models for compiled help and e-book viewers: contents, index, bookmarks, search, toolbars and tabbed windows."""

__version__ = "8.4"