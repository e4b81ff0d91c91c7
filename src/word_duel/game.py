"""
word_duel.game - Game session
=============================

The WordDuelGame is what the CLI instantiates and calls .run() on. It
shows the rules, asks the setup questions (language, player names,
starting word, time limit) and then plays one round.

Usage
-----
    from word_duel import GameConfig, WordDuelGame

    game = WordDuelGame(GameConfig(language="en", time_limit_seconds=10))
    outcome = game.run()
    print(outcome.winner_name)
"""

from __future__ import annotations

import logging
from typing import Optional

from ._config import (
    MAX_TIME_LIMIT,
    MAX_WORD_LENGTH,
    MIN_TIME_LIMIT,
    MIN_WORD_LENGTH,
    GameConfig,
)
from ._round.engine import RoundEngine
from ._round.round_result import RoundOutcome
from ._round.round_state import PlayerRotation, RoundState
from ._shared.console import ConsoleOutput, ConsolePrompter, LineSource, StdinLineSource
from ._stats.stats_store import StatsStore
from ._turn.line_race import BackgroundLineReader
from ._turn.turn_timer import TurnTimer

logger = logging.getLogger("word_duel.game")


class WordDuelGame:
    """
    One console session: setup questions followed by a single round.

    Statistics are loaded once, when the game is created.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        source: Optional[LineSource] = None,
        output: Optional[ConsoleOutput] = None,
        timer: Optional[TurnTimer] = None,
    ):
        self.config = config or GameConfig()
        self.source = source or StdinLineSource()
        self.output = output or ConsoleOutput()
        self.timer = timer
        self.prompter = ConsolePrompter(self.source, self.output)
        self.reader = BackgroundLineReader(self.source.read_line)
        self.store = StatsStore(self.config.stats_file)
        self.records = self.store.load()

    def run(self) -> RoundOutcome:
        """Play one full game and return the round outcome."""
        self.output.display_message("rules")
        self.select_language()
        players = self.ask_players()
        starting_word = self.prompter.ask_starting_word(MIN_WORD_LENGTH, MAX_WORD_LENGTH)
        time_limit = self.config.time_limit_seconds
        if time_limit is None:
            time_limit = self.prompter.ask_time_limit(MIN_TIME_LIMIT, MAX_TIME_LIMIT)

        state = RoundState(
            starting_word=starting_word,
            rotation=PlayerRotation(players),
            time_limit_seconds=time_limit,
        )
        engine = RoundEngine(
            state=state,
            output=self.output,
            reader=self.reader,
            store=self.store,
            records=self.records,
            timer=self.timer,
            poll_interval=self.config.poll_interval_seconds,
        )
        outcome = engine.play()
        self.output.display_message("game_over")
        return outcome

    def select_language(self) -> None:
        language = self.config.language
        if language is None:
            language = self.prompter.ask_language()
        self.output.use_language(language)

    def ask_players(self) -> list:
        players = []
        for number in range(1, PlayerRotation.SIZE + 1):
            players.append(self.prompter.ask_player_name(number, taken=players))
        logger.info("Players: %s", players)
        return players
