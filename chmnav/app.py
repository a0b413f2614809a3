"""Delivery of file-open requests that may arrive before the main window exists."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

RETRY_DELAY = 0.25
MAX_RESENDS = 30


def _timer(delay: float, callback: Callable[[], Any]) -> None:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()


class FileOpenDispatcher:
    """Hands a file to the main window, retrying until the window is available.

    The main window must offer open_recent_file(path).
    """

    def __init__(
        self,
        find_window: Callable[[], Any | None],
        schedule: Callable[[float, Callable[[], Any]], None] | None = None,
    ) -> None:
        self.find_window = find_window
        self.schedule = schedule or _timer
        self.file_path = ""
        self.resends = 0

    def open_file(self, path: str) -> bool:
        """Start delivering path; returns whether it was opened at once."""
        self.resends = 0
        self.file_path = path
        return self.retry()

    def retry(self) -> bool:
        """Try to deliver the pending file; schedules another try if it cannot."""
        window = self.find_window()
        if window is not None:
            window.open_recent_file(self.file_path)
            return True

        logger.warning("resending %s", self.file_path)
        if self.resends >= MAX_RESENDS:
            logger.warning("aborting loading of %s", self.file_path)
            return False
        self.schedule(RETRY_DELAY, self.retry)
        self.resends += 1
        return False