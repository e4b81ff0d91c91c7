# Area: Test Support
"""Shared fixtures and fakes for the Word Duel tests."""

import io
import threading

import pytest

from word_duel._shared.console import ConsoleOutput
from word_duel._shared.localization import Language, Localizer


class ScriptedLineSource:
    """
    Line source that replays a fixed script.

    Once the script runs out, reads block like a player who never
    answers, until ``release()`` is called.
    """

    def __init__(self, lines):
        self._lines = list(lines)
        self._lock = threading.Lock()
        self._release = threading.Event()
        self.reads = 0

    @property
    def exhausted(self):
        with self._lock:
            return not self._lines

    def read_line(self):
        with self._lock:
            if self._lines:
                self.reads += 1
                return self._lines.pop(0)
        self._release.wait()
        return ""

    def release(self):
        self._release.set()


class FakeTimer:
    """Stand-in for ``threading.Timer`` that only fires when told to."""

    def __init__(self, interval, function, args=()):
        self.interval = interval
        self.function = function
        self.args = args
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function(*self.args)


class ManualTimerFactory:
    """Creates FakeTimers and remembers them so tests can fire them."""

    def __init__(self):
        self.timers = []

    def __call__(self, interval, function, args=()):
        timer = FakeTimer(interval, function, args)
        self.timers.append(timer)
        return timer

    @property
    def last(self):
        return self.timers[-1]


class ScriptedTimerFactory(ManualTimerFactory):
    """Timers that expire on start once the scripted player has gone silent."""

    def __init__(self, source):
        super().__init__()
        self.source = source

    def __call__(self, interval, function, args=()):
        timer = super().__call__(interval, function, args)
        source = self.source

        def start():
            timer.started = True
            if source.exhausted:
                timer.fire()

        timer.start = start
        return timer


@pytest.fixture
def english_output():
    """ConsoleOutput in English writing to an in-memory buffer."""
    return ConsoleOutput(Localizer(Language.ENGLISH), stream=io.StringIO())


@pytest.fixture
def stats_path(tmp_path):
    return tmp_path / "game_stats.json"


def output_text(output):
    return output.stream.getvalue()
