"""
word_duel.errors - Custom exception classes
===========================================

Defines the exception hierarchy for the game. Word validation never
raises: rejected words are reported through ``WordVerdict``. Exceptions
here cover configuration and persistence failures only.
"""

from __future__ import annotations
from typing import List


class WordDuelError(Exception):
    """Base exception for all Word Duel package errors."""
    pass


class ConfigError(WordDuelError):
    """Raised when the game configuration is missing or invalid."""

    def __init__(self, source: str, problems: List[str]):
        self.source = source
        self.problems = problems
        super().__init__(
            f"Invalid configuration from {source}: {'; '.join(problems)}"
        )


class StatsSaveError(WordDuelError):
    """Raised when player statistics cannot be written to disk."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not save statistics to '{path}': {reason}")
