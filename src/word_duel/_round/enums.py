# Area: Round
"""
word_duel._round.enums - Round state machine enums
==================================================

Defines the states, events and word verdicts of a single round.
"""

from enum import Enum


class RoundPhase(Enum):
    """
    States of the round state machine.

    State transitions:
    AWAITING_INPUT -> COMMAND_LOOP (on COMMAND_RECEIVED)
    AWAITING_INPUT -> WORD_ACCEPTED (on WORD_ACCEPTED)
    AWAITING_INPUT -> WORD_REJECTED (on WORD_REJECTED)
    AWAITING_INPUT -> TIMED_OUT (on TIMER_EXPIRED)
    COMMAND_LOOP / WORD_ACCEPTED / WORD_REJECTED -> AWAITING_INPUT (on NEXT_PROMPT)
    TIMED_OUT is terminal.
    """
    AWAITING_INPUT = "AWAITING_INPUT"
    COMMAND_LOOP = "COMMAND_LOOP"
    WORD_ACCEPTED = "WORD_ACCEPTED"
    WORD_REJECTED = "WORD_REJECTED"
    TIMED_OUT = "TIMED_OUT"


class RoundEvent(Enum):
    """
    Events that move the round between phases.

    - COMMAND_RECEIVED: a slash command was entered
    - WORD_ACCEPTED: the word passed every check
    - WORD_REJECTED: empty input or a failed word check
    - TIMER_EXPIRED: the turn deadline passed before any input
    - NEXT_PROMPT: the engine is ready to prompt again
    """
    COMMAND_RECEIVED = "COMMAND_RECEIVED"
    WORD_ACCEPTED = "WORD_ACCEPTED"
    WORD_REJECTED = "WORD_REJECTED"
    TIMER_EXPIRED = "TIMER_EXPIRED"
    NEXT_PROMPT = "NEXT_PROMPT"


class WordVerdict(Enum):
    """Result of checking one line of input as a word guess."""
    ACCEPTED = "accepted"
    EMPTY_INPUT = "empty_input"
    ORIGINAL_WORD = "original_word"
    ALREADY_USED = "already_used"
    INVALID_LETTERS = "invalid_letters"

    @property
    def message_key(self) -> str:
        """Localization key of the error shown for a rejected word."""
        return _VERDICT_MESSAGES[self]


_VERDICT_MESSAGES = {
    WordVerdict.ACCEPTED: "",
    WordVerdict.EMPTY_INPUT: "empty_input",
    WordVerdict.ORIGINAL_WORD: "original_word_error",
    WordVerdict.ALREADY_USED: "word_used",
    WordVerdict.INVALID_LETTERS: "invalid_word",
}
