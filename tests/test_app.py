from chmnav.app import MAX_RESENDS, RETRY_DELAY, FileOpenDispatcher


class FakeWindow:
    def __init__(self):
        self.opened = []

    def open_recent_file(self, path):
        self.opened.append(path)


class ManualScheduler:
    def __init__(self):
        self.pending = []

    def __call__(self, delay, callback):
        self.pending.append((delay, callback))

    def run_one(self):
        delay, callback = self.pending.pop(0)
        return callback()


def test_opens_immediately_when_window_exists():
    window = FakeWindow()
    scheduler = ManualScheduler()
    dispatcher = FileOpenDispatcher(lambda: window, scheduler)
    assert dispatcher.open_file("/books/manual.chm") is True
    assert window.opened == ["/books/manual.chm"]
    assert scheduler.pending == []


def test_retries_until_window_appears():
    window = FakeWindow()
    holder = {"window": None}
    scheduler = ManualScheduler()
    dispatcher = FileOpenDispatcher(lambda: holder["window"], scheduler)

    assert dispatcher.open_file("/books/guide.epub") is False
    assert len(scheduler.pending) == 1
    assert scheduler.pending[0][0] == RETRY_DELAY
    assert dispatcher.resends == 1

    holder["window"] = window
    assert scheduler.run_one() is True
    assert window.opened == ["/books/guide.epub"]
    assert scheduler.pending == []


def test_gives_up_after_max_resends():
    scheduler = ManualScheduler()
    dispatcher = FileOpenDispatcher(lambda: None, scheduler)
    dispatcher.open_file("/books/lost.chm")
    attempts = 1
    while scheduler.pending:
        assert scheduler.run_one() is False
        attempts += 1
    assert dispatcher.resends == MAX_RESENDS
    assert attempts == MAX_RESENDS + 1


def test_new_file_resets_resend_count():
    holder = {"window": None}
    scheduler = ManualScheduler()
    dispatcher = FileOpenDispatcher(lambda: holder["window"], scheduler)
    dispatcher.open_file("/books/first.chm")
    scheduler.run_one()
    assert dispatcher.resends == 2

    window = FakeWindow()
    holder["window"] = window
    assert dispatcher.open_file("/books/second.chm") is True
    assert dispatcher.resends == 0
    assert window.opened == ["/books/second.chm"]