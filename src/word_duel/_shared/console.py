# Area: Shared
"""
word_duel._shared.console - Line-based console I/O
==================================================

Thin wrappers around the terminal:

- ``StdinLineSource`` - blocking one-line reads from standard input
- ``ConsoleOutput`` - localized messages and prompts
- ``ConsolePrompter`` - the setup questions asked before a round starts
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Collection, Optional, Protocol, TextIO

from .localization import Language, Localizer

logger = logging.getLogger("word_duel.console")


class LineSource(Protocol):
    """Anything that can block until the user enters one line."""

    def read_line(self) -> str:
        ...


class StdinLineSource:
    """Reads lines with ``input()``. EOFError propagates to the caller."""

    def __init__(self, reader: Callable[[], str] = input):
        self._reader = reader

    def read_line(self) -> str:
        return self._reader()


class ConsoleOutput:
    """Writes localized text to a stream."""

    def __init__(self, localizer: Optional[Localizer] = None,
                 stream: Optional[TextIO] = None):
        self.localizer = localizer or Localizer()
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # sys.stdout may be swapped after construction
        return self._stream or sys.stdout

    def use_language(self, language: Language) -> None:
        logger.info("Console language set to %s", language.value)
        self.localizer = Localizer(language)

    def text(self, key: str, *args: object) -> str:
        return self.localizer.text(key, *args)

    def display_message(self, key: str, *args: object) -> None:
        self.display_text(self.text(key, *args))

    def display_prompt(self, key: str, *args: object) -> None:
        self.stream.write(self.text(key, *args))
        self.stream.flush()

    def display_text(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


class ConsolePrompter:
    """Asks the pre-round questions, re-prompting until answers are valid."""

    def __init__(self, source: LineSource, output: ConsoleOutput):
        self.source = source
        self.output = output

    def ask_non_empty_line(self) -> str:
        line = self.source.read_line()
        while not line or not line.strip():
            line = self.source.read_line()
        return line.strip()

    def ask_number(self, min_value: int, max_value: int) -> int:
        while True:
            raw = self.source.read_line().strip()
            try:
                value = int(raw)
            except ValueError:
                value = None
            if value is not None and min_value <= value <= max_value:
                return value
            self.output.display_message("invalid_number", min_value, max_value)

    def ask_language(self) -> Language:
        while True:
            self.output.display_prompt("select_language")
            try:
                return Language.from_choice(self.ask_non_empty_line())
            except ValueError:
                self.output.display_message("invalid_language")

    def ask_player_name(self, number: int, taken: Collection[str] = ()) -> str:
        """Ask for a non-blank name not already used by another player."""
        while True:
            self.output.display_prompt("enter_player_name", number)
            name = self.source.read_line().strip()
            if not name:
                self.output.display_message("invalid_player_name")
            elif name in taken:
                self.output.display_message("duplicate_player_name")
            else:
                return name

    def ask_starting_word(self, min_length: int, max_length: int) -> str:
        while True:
            self.output.display_prompt("enter_initial_word", min_length, max_length)
            word = self.ask_non_empty_line().lower()
            if not min_length <= len(word) <= max_length:
                self.output.display_message("word_length_error", min_length, max_length)
            elif not word.isalpha():
                self.output.display_message("letters_only")
            else:
                return word

    def ask_time_limit(self, min_seconds: int, max_seconds: int) -> int:
        self.output.display_prompt("set_time_limit", min_seconds, max_seconds)
        return self.ask_number(min_seconds, max_seconds)
