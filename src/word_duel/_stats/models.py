# Area: Stats
"""
word_duel._stats.models - Persisted statistics schema
=====================================================

Pydantic models for ``game_stats.json``. The file keeps the
PascalCase keys it has always used::

    {
      "Players": [
        {"Name": "alice", "Wins": 3, "GamesPlayed": 5}
      ]
    }

Python code uses the snake_case field names; the aliases only apply at
the JSON boundary.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class PlayerStatsRecord(BaseModel):
    """
    Aggregate results for one player name.

    Attributes:
        name: Player name, the unique key of the record
        wins: Rounds won
        games_played: Rounds taken part in
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    name: str = Field(alias="Name", min_length=1)
    wins: int = Field(default=0, ge=0, alias="Wins")
    games_played: int = Field(default=0, ge=0, alias="GamesPlayed")


class GameHistory(BaseModel):
    """Top-level document stored in the stats file."""

    model_config = ConfigDict(populate_by_name=True)

    players: List[PlayerStatsRecord] = Field(default_factory=list, alias="Players")


class StoredHistory(BaseModel):
    """
    The stats document as read from disk, entries not yet validated.

    Each entry is validated into a ``PlayerStatsRecord`` separately, so
    one bad entry does not discard the others.
    """

    model_config = ConfigDict(populate_by_name=True)

    players: List[Any] = Field(default_factory=list, alias="Players")
