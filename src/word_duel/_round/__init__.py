# Area: Round
"""
Round execution: state, transitions and turn orchestration.

This package handles:
- Player rotation and used-word tracking
- Word verdicts and phase transitions
- Running turns until a timeout decides the round
"""

from .enums import RoundEvent, RoundPhase, WordVerdict
from .state_machine import TRANSITIONS, RoundStateMachine
from .round_state import PlayerRotation, RoundState
from .round_result import RoundOutcome
from .engine import RoundEngine

__all__ = [
    "RoundEvent",
    "RoundPhase",
    "WordVerdict",
    "TRANSITIONS",
    "RoundStateMachine",
    "PlayerRotation",
    "RoundState",
    "RoundOutcome",
    "RoundEngine",
]
