# Area: Round
"""
word_duel._round.engine - Turn orchestration for one round
==========================================================

The RoundEngine runs turns until one of them times out:

1. Arm the turn timer for the current player and prompt for a word.
2. Race the line read against the timer.
3. Dispatch the line: slash commands are rendered without passing the
   turn; words are judged and either accepted (rotation advances) or
   rejected with a specific message (same player, fresh deadline).
4. On timeout, the other player wins; statistics are updated and saved.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from .._shared.console import ConsoleOutput
from .._stats.stats_store import StatsRecords, StatsStore, apply_outcome
from .._turn.commands import CommandInterpreter, is_command
from .._turn.line_race import DEFAULT_POLL_INTERVAL, BackgroundLineReader, race_line
from .._turn.turn_timer import TurnTimer
from ..errors import StatsSaveError
from .enums import RoundEvent, WordVerdict
from .round_result import RoundOutcome
from .round_state import RoundState
from .state_machine import RoundStateMachine

logger = logging.getLogger("word_duel.round.engine")

SEPARATOR = "-" * 51


class RoundEngine:
    """
    Plays one round to completion.

    Statistics in ``records`` are shared with the command interpreter,
    so ``/score`` and ``/total-score`` show the persisted values and
    the round's own result is counted only once it ends.
    """

    def __init__(
        self,
        state: RoundState,
        output: ConsoleOutput,
        reader: BackgroundLineReader,
        store: StatsStore,
        records: StatsRecords,
        timer: Optional[TurnTimer] = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.state = state
        self.output = output
        self.reader = reader
        self.store = store
        self.records = records
        self.timer = timer or TurnTimer()
        self.poll_interval = poll_interval
        self._sleep = sleep
        self.machine = RoundStateMachine()
        self.commands = CommandInterpreter(output.localizer, state, records)
        self._outcome: Optional[RoundOutcome] = None

    @property
    def outcome(self) -> Optional[RoundOutcome]:
        return self._outcome

    def play(self) -> RoundOutcome:
        """Run turns until the round times out and return its outcome."""
        logger.info(
            "Round started: word=%r players=%s limit=%ss",
            self.state.starting_word, self.state.rotation.names,
            self.state.time_limit_seconds,
        )
        self.output.display_message("game_started")
        self.output.display_message("initial_word", self.state.starting_word)
        self.output.display_text(SEPARATOR)

        while not self.machine.is_finished:
            self.play_turn()
        return self._outcome

    def play_turn(self) -> Optional[RoundOutcome]:
        """
        Prompt the current player until they play a word, enter a
        command, or run out of time.

        Returns the outcome if this turn ended the round, else None.
        """
        player = self.state.current_player
        self.output.display_message("player_turn", player)
        self.output.display_text(self.commands.available_commands().render())

        while True:
            handle = self.timer.arm(self.state.time_limit_seconds)
            self.output.display_prompt("enter_word")
            try:
                result = race_line(self.reader, handle, self.poll_interval, self._sleep)
            except BaseException:
                self.timer.cancel(handle)
                raise

            if result.timed_out:
                return self._finish(loser=player)

            self.timer.cancel(handle)
            line = (result.line or "").strip()

            if is_command(line):
                self.machine.transition(RoundEvent.COMMAND_RECEIVED)
                self.output.display_text(self.commands.execute(line).render())
                self.machine.transition(RoundEvent.NEXT_PROMPT)
                return None

            verdict = self.state.submit(line)
            if verdict is WordVerdict.ACCEPTED:
                self.machine.transition(RoundEvent.WORD_ACCEPTED)
                self.machine.transition(RoundEvent.NEXT_PROMPT)
                return None

            self.machine.transition(RoundEvent.WORD_REJECTED)
            self.output.display_message(verdict.message_key)
            self.machine.transition(RoundEvent.NEXT_PROMPT)

    def _finish(self, loser: str) -> RoundOutcome:
        self.machine.transition(RoundEvent.TIMER_EXPIRED)
        winner = self.state.rotation.other
        outcome = RoundOutcome(
            winner_name=winner,
            loser_name=loser,
            time_limit_seconds=self.state.time_limit_seconds,
            starting_word=self.state.starting_word,
            words_played=len(self.state.used_words),
        )
        logger.info(
            "Round over: %s timed out, %s wins after %d words",
            loser, winner, outcome.words_played,
        )

        self.output.display_message("time_out")
        self.output.display_message("player_lost", loser, outcome.time_limit_seconds)
        self.output.display_message("winner", winner)

        apply_outcome(self.records, outcome, self.state.rotation.names)
        try:
            self.store.save(self.records)
        except StatsSaveError as e:
            self.output.display_message("stats_save_error", e.reason)

        self.state.close()
        self._outcome = outcome
        return outcome
