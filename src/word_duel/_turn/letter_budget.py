# Area: Turn
"""
word_duel._turn.letter_budget - Letter budget validation
========================================================

A candidate word is admissible when it can be spelled from the
starting word's letters, each letter used at most as many times as it
appears in the starting word (a multiset subset check).
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Mapping

LetterBudget = Mapping[str, int]


def build_budget(word: str) -> LetterBudget:
    """Return a read-only letter -> count mapping for ``word``."""
    return MappingProxyType(dict(Counter(word)))


def is_admissible(candidate: str, budget: LetterBudget) -> bool:
    """
    Check whether ``candidate`` fits inside ``budget``.

    Both sides are compared as given; callers lowercase input first.
    The empty string is vacuously admissible, so empty input must be
    rejected before reaching this check.
    """
    needed = Counter(candidate)
    return all(budget.get(letter, 0) >= count for letter, count in needed.items())
