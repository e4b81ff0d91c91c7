# Area: Turn Tests
"""Tests for TurnTimer and TimerHandle."""

import pytest

from word_duel._turn.turn_timer import TimerState, TurnTimer

from conftest import ManualTimerFactory


class TestTurnTimerLifecycle:
    """State transitions of a single armed deadline."""

    @pytest.fixture
    def factory(self):
        return ManualTimerFactory()

    def test_arm_starts_daemon_timer(self, factory):
        timer = TurnTimer(timer_factory=factory)
        handle = timer.arm(5)

        assert handle.state is TimerState.ARMED
        assert handle.expired is False
        assert factory.last.started is True
        assert factory.last.daemon is True
        assert factory.last.interval == 5

    def test_fire_expires_handle(self, factory):
        timer = TurnTimer(timer_factory=factory)
        handle = timer.arm(5)

        factory.last.fire()

        assert handle.state is TimerState.EXPIRED
        assert handle.expired is True

    def test_expiry_fires_only_once(self, factory):
        timer = TurnTimer(timer_factory=factory)
        handle = timer.arm(5)
        factory.last.fire()
        factory.last.fire()
        assert handle.state is TimerState.EXPIRED

    def test_cancel_before_deadline(self, factory):
        timer = TurnTimer(timer_factory=factory)
        handle = timer.arm(5)

        assert timer.cancel(handle) is True
        assert handle.state is TimerState.CANCELLED
        assert factory.last.cancelled is True

    def test_late_callback_after_cancel_has_no_effect(self, factory):
        """A timer thread that fires after cancel() must not set the flag."""
        timer = TurnTimer(timer_factory=factory)
        handle = timer.arm(5)
        timer.cancel(handle)

        factory.last.fire()

        assert handle.expired is False
        assert handle.state is TimerState.CANCELLED

    def test_cancel_after_expiry_returns_false(self, factory):
        timer = TurnTimer(timer_factory=factory)
        handle = timer.arm(5)
        factory.last.fire()

        assert timer.cancel(handle) is False
        assert handle.state is TimerState.EXPIRED

    def test_cancel_without_handle_is_noop(self):
        timer = TurnTimer(timer_factory=ManualTimerFactory())
        assert timer.cancel() is False

    def test_rearm_cancels_previous_handle(self, factory):
        timer = TurnTimer(timer_factory=factory)
        first = timer.arm(5)
        second = timer.arm(5)

        assert first.state is TimerState.CANCELLED
        assert second.state is TimerState.ARMED
        assert timer.handle is second

        # The first timer's thread firing late touches only its own handle
        factory.timers[0].fire()
        assert first.expired is False
        assert second.expired is False

    def test_each_arm_gets_a_fresh_flag(self, factory):
        timer = TurnTimer(timer_factory=factory)
        first = timer.arm(5)
        factory.last.fire()
        second = timer.arm(5)

        assert first.expired is True
        assert second.expired is False


class TestTurnTimerRealThread:
    """Uses the real threading.Timer with a very short deadline."""

    def test_expires_on_schedule(self):
        timer = TurnTimer()
        handle = timer.arm(0.05)
        assert handle.wait(timeout=2) is True
        assert handle.state is TimerState.EXPIRED

    def test_cancelled_timer_never_expires(self):
        timer = TurnTimer()
        handle = timer.arm(0.05)
        timer.cancel(handle)
        assert handle.wait(timeout=0.2) is False
        assert handle.state is TimerState.CANCELLED
