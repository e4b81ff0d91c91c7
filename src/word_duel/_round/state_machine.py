# Area: Round
"""
word_duel._round.state_machine - Round State Machine
====================================================

Tracks which phase the current turn is in and rejects transitions the
turn protocol does not allow. The engine drives it; the state machine
itself has no knowledge of players or words.
"""

import logging

from .enums import RoundEvent, RoundPhase

logger = logging.getLogger("word_duel.round.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    RoundPhase.AWAITING_INPUT: {
        RoundEvent.COMMAND_RECEIVED: RoundPhase.COMMAND_LOOP,
        RoundEvent.WORD_ACCEPTED: RoundPhase.WORD_ACCEPTED,
        RoundEvent.WORD_REJECTED: RoundPhase.WORD_REJECTED,
        RoundEvent.TIMER_EXPIRED: RoundPhase.TIMED_OUT,
    },
    RoundPhase.COMMAND_LOOP: {
        RoundEvent.NEXT_PROMPT: RoundPhase.AWAITING_INPUT,
    },
    RoundPhase.WORD_ACCEPTED: {
        RoundEvent.NEXT_PROMPT: RoundPhase.AWAITING_INPUT,
    },
    RoundPhase.WORD_REJECTED: {
        RoundEvent.NEXT_PROMPT: RoundPhase.AWAITING_INPUT,
    },
    RoundPhase.TIMED_OUT: {},
}


class RoundStateMachine:
    """
    State machine for one round.

    Attributes:
        current_state: The phase the round is in
    """

    def __init__(self):
        """Initialize state machine in AWAITING_INPUT."""
        self.current_state = RoundPhase.AWAITING_INPUT

    @property
    def is_finished(self) -> bool:
        return self.current_state is RoundPhase.TIMED_OUT

    def can_transition(self, event: RoundEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        return event in TRANSITIONS.get(self.current_state, {})

    def transition(self, event: RoundEvent) -> RoundPhase:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_state.value}"
            )

        next_state = TRANSITIONS[self.current_state][event]
        logger.debug("Phase: %s → %s", self.current_state.value, next_state.value)
        self.current_state = next_state
        return next_state
