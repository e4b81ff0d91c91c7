# Area: Turn Tests
"""Tests for racing a background line read against the turn timer."""

import threading

import pytest

from word_duel._turn.line_race import BackgroundLineReader, PendingRead, race_line
from word_duel._turn.turn_timer import TurnTimer

from conftest import ManualTimerFactory, ScriptedLineSource


def no_sleep(seconds):
    pass


def short_sleep(seconds):
    threading.Event().wait(0.001)


class TestPendingRead:
    """Tests for PendingRead."""

    def test_result_returns_line(self):
        read = PendingRead(lambda: "plan")
        assert read.wait(timeout=2) is True
        assert read.done is True
        assert read.result() == "plan"

    def test_result_reraises_reader_error(self):
        def broken():
            raise EOFError()

        read = PendingRead(broken)
        read.wait(timeout=2)
        with pytest.raises(EOFError):
            read.result()


class TestBackgroundLineReader:
    """Tests for BackgroundLineReader."""

    def test_request_reuses_unconsumed_read(self):
        source = ScriptedLineSource([])
        reader = BackgroundLineReader(source.read_line)

        first = reader.request()
        second = reader.request()

        assert first is second
        source.release()

    def test_consume_clears_pending(self):
        reader = BackgroundLineReader(lambda: "plan")
        read = reader.request()
        read.wait(timeout=2)

        assert reader.consume(read) == "plan"
        assert reader.pending is None


class TestRaceLine:
    """Tests for race_line()."""

    @pytest.fixture
    def factory(self):
        return ManualTimerFactory()

    def test_line_before_deadline(self, factory):
        handle = TurnTimer(timer_factory=factory).arm(5)
        reader = BackgroundLineReader(lambda: "plan")

        result = race_line(reader, handle, poll_interval=0.001, sleep=short_sleep)

        assert result.timed_out is False
        assert result.line == "plan"
        assert reader.pending is None

    def test_empty_line_is_a_valid_race_outcome(self, factory):
        handle = TurnTimer(timer_factory=factory).arm(5)
        reader = BackgroundLineReader(lambda: "")

        result = race_line(reader, handle, poll_interval=0.001, sleep=short_sleep)

        assert result.timed_out is False
        assert result.line == ""

    def test_deadline_before_line(self, factory):
        source = ScriptedLineSource([])
        handle = TurnTimer(timer_factory=factory).arm(5)
        reader = BackgroundLineReader(source.read_line)
        factory.last.fire()

        result = race_line(reader, handle, sleep=no_sleep)

        assert result.timed_out is True
        assert result.line is None
        source.release()

    def test_timer_wins_a_tie(self, factory):
        """When both are ready in the same poll, the turn counts as timed out."""
        reader = BackgroundLineReader(lambda: "plan")
        pending = reader.request()
        pending.wait(timeout=2)

        timer = TurnTimer(timer_factory=factory)
        handle = timer.arm(5)
        factory.last.fire()

        result = race_line(reader, handle, sleep=no_sleep)

        assert result.timed_out is True
        # The finished read is kept for whoever asks next
        assert reader.pending is pending
        follow_up = race_line(reader, timer.arm(5), sleep=no_sleep)
        assert follow_up.line == "plan"

    def test_reader_error_propagates(self, factory):
        def broken():
            raise EOFError()

        handle = TurnTimer(timer_factory=factory).arm(5)
        reader = BackgroundLineReader(broken)

        with pytest.raises(EOFError):
            race_line(reader, handle, poll_interval=0.001, sleep=short_sleep)

    def test_real_timer_expires_while_reader_blocks(self):
        source = ScriptedLineSource([])
        handle = TurnTimer().arm(0.05)
        reader = BackgroundLineReader(source.read_line)

        result = race_line(reader, handle, poll_interval=0.01)

        assert result.timed_out is True
        source.release()
