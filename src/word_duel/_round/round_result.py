# Area: Round
"""
word_duel._round.round_result - Round outcome dataclass
=======================================================

Defines the RoundOutcome the engine returns when a round ends. A round
only ends by timeout, so there is always exactly one winner and one
loser.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoundOutcome:
    """
    Terminal result of one round.

    Attributes:
        winner_name: Player who was waiting when the other ran out of time
        loser_name: Player whose turn timed out
        time_limit_seconds: Per-turn limit the round was played with
        starting_word: Word the round was played on
        words_played: Number of words accepted before the timeout
    """

    winner_name: str
    loser_name: str
    time_limit_seconds: int
    starting_word: str = ""
    words_played: int = 0
