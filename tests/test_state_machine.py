# Area: Round Tests
"""Tests for the Round State Machine."""

import pytest

from word_duel._round.enums import RoundEvent, RoundPhase
from word_duel._round.state_machine import TRANSITIONS, RoundStateMachine


class TestRoundStateMachineBase:
    """Tests for basic state machine functionality."""

    def test_initial_state_is_awaiting_input(self):
        sm = RoundStateMachine()
        assert sm.current_state == RoundPhase.AWAITING_INPUT
        assert sm.is_finished is False

    def test_can_transition_returns_true_for_valid(self):
        sm = RoundStateMachine()
        assert sm.can_transition(RoundEvent.WORD_ACCEPTED) is True

    def test_can_transition_returns_false_for_invalid(self):
        """NEXT_PROMPT only follows a handled input."""
        sm = RoundStateMachine()
        assert sm.can_transition(RoundEvent.NEXT_PROMPT) is False

    def test_transition_raises_on_invalid(self):
        sm = RoundStateMachine()
        with pytest.raises(ValueError):
            sm.transition(RoundEvent.NEXT_PROMPT)


class TestRoundStateMachineTransitions:
    """Tests for specific transitions."""

    @pytest.mark.parametrize("event, phase", [
        (RoundEvent.COMMAND_RECEIVED, RoundPhase.COMMAND_LOOP),
        (RoundEvent.WORD_ACCEPTED, RoundPhase.WORD_ACCEPTED),
        (RoundEvent.WORD_REJECTED, RoundPhase.WORD_REJECTED),
    ])
    def test_handled_input_returns_to_awaiting(self, event, phase):
        sm = RoundStateMachine()

        assert sm.transition(event) == phase
        assert sm.transition(RoundEvent.NEXT_PROMPT) == RoundPhase.AWAITING_INPUT

    def test_timeout_is_terminal(self):
        sm = RoundStateMachine()
        sm.transition(RoundEvent.TIMER_EXPIRED)

        assert sm.current_state == RoundPhase.TIMED_OUT
        assert sm.is_finished is True
        assert TRANSITIONS[RoundPhase.TIMED_OUT] == {}
        for event in RoundEvent:
            assert sm.can_transition(event) is False

    def test_no_timeout_while_handling_input(self):
        sm = RoundStateMachine()
        sm.transition(RoundEvent.COMMAND_RECEIVED)
        with pytest.raises(ValueError):
            sm.transition(RoundEvent.TIMER_EXPIRED)
