# Area: Turn
"""
Turn-level building blocks used by the round engine.

This package handles:
- Letter budget admissibility
- The per-turn deadline timer
- Racing a blocking line read against that timer
- In-turn slash commands
"""

from .letter_budget import LetterBudget, build_budget, is_admissible
from .turn_timer import TimerHandle, TimerState, TurnTimer
from .line_race import (
    DEFAULT_POLL_INTERVAL,
    BackgroundLineReader,
    PendingRead,
    RaceResult,
    race_line,
)
from .commands import (
    COMMAND_PREFIX,
    Command,
    CommandInterpreter,
    RenderedView,
    is_command,
)

__all__ = [
    "LetterBudget",
    "build_budget",
    "is_admissible",
    "TimerHandle",
    "TimerState",
    "TurnTimer",
    "DEFAULT_POLL_INTERVAL",
    "BackgroundLineReader",
    "PendingRead",
    "RaceResult",
    "race_line",
    "COMMAND_PREFIX",
    "Command",
    "CommandInterpreter",
    "RenderedView",
    "is_command",
]
