# Area: Turn
"""
word_duel._turn.commands - In-turn slash commands
=================================================

Commands let a player inspect the round without ending their turn.
They only read state: used words, the rotation and the persisted
statistics are never modified here.

    /show-words   - words accepted so far, in order
    /score        - persisted record of each player in this round
    /total-score  - every persisted record, most wins first
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Mapping, Optional, Tuple

from .._shared.localization import Localizer

if TYPE_CHECKING:
    from .._round.round_state import RoundState
    from .._stats.models import PlayerStatsRecord

logger = logging.getLogger("word_duel.turn.commands")

COMMAND_PREFIX = "/"


class Command(Enum):
    """Recognized slash commands."""
    SHOW_WORDS = "/show-words"
    SCORE = "/score"
    TOTAL_SCORE = "/total-score"

    @classmethod
    def parse(cls, raw: str) -> Optional["Command"]:
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


def is_command(text: str) -> bool:
    return text.startswith(COMMAND_PREFIX)


@dataclass(frozen=True)
class RenderedView:
    """Text produced by a command: a heading followed by body lines."""
    title: str
    lines: Tuple[str, ...] = ()

    def render(self) -> str:
        return "\n".join((self.title,) + self.lines)


class CommandInterpreter:
    """Renders command views for one round."""

    def __init__(
        self,
        localizer: Localizer,
        round_state: "RoundState",
        records: Mapping[str, "PlayerStatsRecord"],
    ):
        self.localizer = localizer
        self.round_state = round_state
        self.records = records

    def execute(self, command: str) -> RenderedView:
        parsed = Command.parse(command)
        logger.debug("Command %r -> %s", command, parsed)
        if parsed is Command.SHOW_WORDS:
            return self._show_words()
        if parsed is Command.SCORE:
            return self._score()
        if parsed is Command.TOTAL_SCORE:
            return self._total_score()
        return RenderedView(self.localizer.text("unknown_command"))

    def available_commands(self) -> RenderedView:
        return RenderedView(
            self.localizer.text("available_commands"),
            tuple(command.value for command in Command),
        )

    def _show_words(self) -> RenderedView:
        words = ", ".join(self.round_state.used_words)
        return RenderedView(
            self.localizer.text("command_show_words"),
            (self.localizer.text("used_words") + words,),
        )

    def _score(self) -> RenderedView:
        lines = []
        for name in self.round_state.rotation.names:
            record = self.records.get(name)
            if record is None:
                lines.append(self.localizer.text("score_unknown", name))
            else:
                lines.append(self._score_line(record))
        return RenderedView(self.localizer.text("command_score"), tuple(lines))

    def _total_score(self) -> RenderedView:
        # sorted() is stable with reverse=True: equal wins keep load order
        ranked = sorted(self.records.values(), key=lambda r: r.wins, reverse=True)
        return RenderedView(
            self.localizer.text("command_total_score"),
            tuple(self._score_line(record) for record in ranked),
        )

    def _score_line(self, record: "PlayerStatsRecord") -> str:
        return self.localizer.text(
            "score_line", record.name, record.wins, record.games_played
        )
