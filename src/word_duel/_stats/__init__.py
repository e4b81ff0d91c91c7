# Area: Stats
"""
Persistent win/loss statistics keyed by player name.
"""

from .models import GameHistory, PlayerStatsRecord, StoredHistory
from .stats_store import StatsRecords, StatsStore, apply_outcome

__all__ = [
    "GameHistory",
    "PlayerStatsRecord",
    "StoredHistory",
    "StatsRecords",
    "StatsStore",
    "apply_outcome",
]
