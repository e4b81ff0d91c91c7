# Area: Turn
"""
word_duel._turn.turn_timer - One-shot per-turn deadline
=======================================================

``TurnTimer.arm()`` starts a background ``threading.Timer`` and returns a
``TimerHandle`` the round engine polls while it waits for input.

Handle lifecycle::

    IDLE -> ARMED -> EXPIRED
                  -> CANCELLED

EXPIRED and CANCELLED are terminal. The expiry callback and ``cancel()``
both take the handle's lock, so once ``cancel()`` returns the handle can
no longer become expired even if the timer thread is already running.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger("word_duel.turn.timer")

TimerFactory = Callable[..., threading.Timer]


class TimerState(Enum):
    """Lifecycle of a single armed deadline."""
    IDLE = "idle"
    ARMED = "armed"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class TimerHandle:
    """Observable result of one ``TurnTimer.arm()`` call."""

    def __init__(self, seconds: float):
        self.seconds = seconds
        self._state = TimerState.IDLE
        self._lock = threading.Lock()
        self._expired = threading.Event()

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def expired(self) -> bool:
        return self._expired.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until expiry or ``timeout``; returns whether it expired."""
        return self._expired.wait(timeout)

    def _activate(self) -> None:
        with self._lock:
            self._state = TimerState.ARMED

    def _expire(self) -> bool:
        with self._lock:
            if self._state is not TimerState.ARMED:
                return False
            self._state = TimerState.EXPIRED
            self._expired.set()
            return True

    def _cancel(self) -> bool:
        with self._lock:
            if self._state is not TimerState.ARMED:
                return False
            self._state = TimerState.CANCELLED
            return True


class TurnTimer:
    """
    Arms one-shot deadlines for player turns.

    Only one handle is live at a time: arming again cancels the
    previous handle first.
    """

    def __init__(self, timer_factory: TimerFactory = threading.Timer):
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._handle: Optional[TimerHandle] = None

    @property
    def handle(self) -> Optional[TimerHandle]:
        return self._handle

    def arm(self, seconds: float) -> TimerHandle:
        """Start a fresh deadline of ``seconds`` and return its handle."""
        if self._handle is not None:
            self.cancel(self._handle)

        handle = TimerHandle(seconds)
        timer = self._timer_factory(seconds, self._on_deadline, args=(handle,))
        timer.daemon = True
        handle._activate()
        self._handle = handle
        self._timer = timer
        timer.start()
        logger.debug("Turn timer armed for %ss", seconds)
        return handle

    def cancel(self, handle: Optional[TimerHandle] = None) -> bool:
        """
        Disarm ``handle`` (default: the live one).

        Returns True if the handle was armed and is now cancelled,
        False if it had already expired or been cancelled.
        """
        handle = handle or self._handle
        if handle is None:
            return False
        cancelled = handle._cancel()
        if handle is self._handle and self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if cancelled:
            logger.debug("Turn timer cancelled")
        return cancelled

    def _on_deadline(self, handle: TimerHandle) -> None:
        if handle._expire():
            logger.info("Turn timer expired after %ss", handle.seconds)
