"""Browser-level types shared by the viewer: link open modes and view settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

APP_VERSION = "8.4"


class OpenMode(Enum):
    """Where a followed link should be opened."""

    OPEN_IN_CURRENT = "current"
    """The link opens in the current tab."""
    OPEN_IN_NEW = "new"
    """The link opens in a new foreground tab."""
    OPEN_IN_BACKGROUND = "background"
    """The link opens in a new background tab."""


@dataclass
class BrowserSettings:
    """Settings applied to every view window."""

    enable_js: bool = False
    enable_java: bool = False
    enable_plugins: bool = False
    enable_images: bool = False
    enable_offline_storage: bool = False
    enable_local_storage: bool = False
    highlight_search_results: bool = False