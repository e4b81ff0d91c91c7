# Area: Round
"""
word_duel._round.round_state - Round state tracker
==================================================

Holds everything a round remembers between turns: the starting word
and its letter budget, whose turn it is, and the words accepted so
far. Word checks return a ``WordVerdict`` instead of raising.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Sequence, Tuple

from .._turn.letter_budget import LetterBudget, build_budget, is_admissible
from .enums import WordVerdict

logger = logging.getLogger("word_duel.round.state")


class PlayerRotation:
    """
    Two distinct player names in turn order.

    The front of the rotation is the current player; ``rotate()`` moves
    them to the back.
    """

    SIZE = 2

    def __init__(self, names: Sequence[str]):
        names = list(names)
        if len(names) != self.SIZE:
            raise ValueError(f"Expected {self.SIZE} players, got {len(names)}")
        if any(not name or not name.strip() for name in names):
            raise ValueError("Player names must not be empty")
        if len(set(names)) != len(names):
            raise ValueError(f"Player names must be distinct: {names}")
        self._queue: Deque[str] = deque(names)

    @property
    def current(self) -> str:
        return self._queue[0]

    @property
    def other(self) -> str:
        return self._queue[1]

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._queue)

    def rotate(self) -> str:
        """Move the current player to the back; returns the new current player."""
        self._queue.rotate(-1)
        return self.current

    def __contains__(self, name: object) -> bool:
        return name in self._queue

    def __repr__(self) -> str:
        return f"PlayerRotation({list(self._queue)!r})"


@dataclass
class RoundState:
    """
    Full state of one round.

    ``used_words`` is append-only while the round runs and is cleared by
    ``close()`` when the round ends.
    """
    starting_word: str
    rotation: PlayerRotation
    time_limit_seconds: int
    used_words: List[str] = field(default_factory=list)
    budget: LetterBudget = field(init=False, repr=False)

    def __post_init__(self):
        self.starting_word = self.starting_word.lower()
        self.budget = build_budget(self.starting_word)

    @property
    def current_player(self) -> str:
        return self.rotation.current

    def judge(self, text: str) -> WordVerdict:
        """Classify ``text`` as a word guess without changing any state."""
        word = text.strip().lower()
        if not word:
            return WordVerdict.EMPTY_INPUT
        if word == self.starting_word:
            return WordVerdict.ORIGINAL_WORD
        if word in self.used_words:
            return WordVerdict.ALREADY_USED
        if not is_admissible(word, self.budget):
            return WordVerdict.INVALID_LETTERS
        return WordVerdict.ACCEPTED

    def submit(self, text: str) -> WordVerdict:
        """Judge ``text`` and, if accepted, record it and pass the turn."""
        verdict = self.judge(text)
        if verdict is WordVerdict.ACCEPTED:
            word = text.strip().lower()
            player = self.rotation.current
            self.used_words.append(word)
            self.rotation.rotate()
            logger.info("%s played %r (%d words so far)", player, word, len(self.used_words))
        else:
            logger.debug("Rejected %r from %s: %s", text, self.rotation.current, verdict.value)
        return verdict

    def close(self) -> None:
        """Forget the round's words once the round is over."""
        self.used_words.clear()
