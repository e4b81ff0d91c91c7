# Area: Turn
"""
word_duel._turn.line_race - Racing a blocking read against the turn timer
=========================================================================

The blocking ``read_line()`` runs on a daemon thread while the round
engine polls two flags at a short interval: the timer handle's expiry
and the read's completion.

Tie-break
---------
Each poll cycle checks the timer first. When the deadline and the read
land in the same cycle the turn counts as timed out, even though the
line may have arrived a few milliseconds before the deadline. Players
answering right at the limit are slightly disadvantaged; the game has
always behaved this way.

A read that loses the race is not abandoned. It stays pending inside
``BackgroundLineReader`` and is handed to the next caller, so only one
thread ever blocks on the input source.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .turn_timer import TimerHandle

logger = logging.getLogger("word_duel.turn.race")

DEFAULT_POLL_INTERVAL = 0.1


class PendingRead:
    """One ``read_line()`` call running on its own daemon thread."""

    def __init__(self, read_line: Callable[[], str]):
        self._read_line = read_line
        self._done = threading.Event()
        self._line: Optional[str] = None
        self._error: Optional[BaseException] = None
        self._thread = threading.Thread(
            target=self._run, name="word-duel-reader", daemon=True
        )
        self._thread.start()

    def _run(self) -> None:
        try:
            self._line = self._read_line()
        except BaseException as exc:  # handed back to the polling thread
            self._error = exc
        finally:
            self._done.set()

    @property
    def done(self) -> bool:
        return self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._done.wait(timeout)

    def result(self) -> str:
        """Return the line, re-raising whatever the reader raised."""
        if self._error is not None:
            raise self._error
        return self._line if self._line is not None else ""


class BackgroundLineReader:
    """Hands out at most one outstanding ``PendingRead`` at a time."""

    def __init__(self, read_line: Callable[[], str]):
        self._read_line = read_line
        self._pending: Optional[PendingRead] = None

    @property
    def pending(self) -> Optional[PendingRead]:
        return self._pending

    def request(self) -> PendingRead:
        """Return the unconsumed read if there is one, else start a new one."""
        if self._pending is None:
            self._pending = PendingRead(self._read_line)
        return self._pending

    def consume(self, read: PendingRead) -> str:
        """Take the finished ``read`` out of the reader and return its line."""
        if read is self._pending:
            self._pending = None
        return read.result()


@dataclass(frozen=True)
class RaceResult:
    """Outcome of one race: either a line or a timeout."""
    timed_out: bool
    line: Optional[str] = None


def race_line(
    reader: BackgroundLineReader,
    handle: TimerHandle,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    sleep: Callable[[float], None] = time.sleep,
) -> RaceResult:
    """
    Wait for a line or for ``handle`` to expire, whichever is seen first.

    The caller owns the timer: it should cancel ``handle`` once a line
    is returned.
    """
    pending = reader.request()
    while True:
        if handle.expired:
            logger.debug("Race lost to the timer (read done: %s)", pending.done)
            return RaceResult(timed_out=True)
        if pending.done:
            return RaceResult(timed_out=False, line=reader.consume(pending))
        sleep(poll_interval)
