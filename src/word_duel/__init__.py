"""
word_duel - Two-player console word game
========================================

Players take turns entering words made only from the letters of a
starting word. Each turn has a time limit; whoever runs out of time
loses the round. Results are kept as win/loss statistics per player
name across sessions.

Quick Start:
    from word_duel import WordDuelGame
    WordDuelGame().run()

Or from a terminal:
    word-duel --language en --time-limit 10

In-turn commands:
    /show-words     words accepted so far
    /score          record of the two current players
    /total-score    every stored record, most wins first
"""

from ._config import GameConfig, validate_config
from .game import WordDuelGame
from .errors import ConfigError, StatsSaveError, WordDuelError
from ._round import (
    PlayerRotation,
    RoundEngine,
    RoundOutcome,
    RoundState,
    WordVerdict,
)
from ._shared import Language, Localizer
from ._stats import PlayerStatsRecord, StatsStore
from ._turn import build_budget, is_admissible

__all__ = [
    # Main classes
    "WordDuelGame",
    "GameConfig",
    "validate_config",
    # Errors
    "WordDuelError",
    "ConfigError",
    "StatsSaveError",
    # Round
    "PlayerRotation",
    "RoundEngine",
    "RoundOutcome",
    "RoundState",
    "WordVerdict",
    # Text
    "Language",
    "Localizer",
    # Statistics
    "PlayerStatsRecord",
    "StatsStore",
    # Letter budget
    "build_budget",
    "is_admissible",
]
__version__ = "1.0.0"
