# Area: Shared
"""
word_duel._config - Game configuration
======================================

Configuration model, validation and limits for a game session.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._shared.localization import Language
from .errors import ConfigError

logger = logging.getLogger("word_duel.config")

MIN_WORD_LENGTH = 8
MAX_WORD_LENGTH = 30
MIN_TIME_LIMIT = 5
MAX_TIME_LIMIT = 60

STATS_FILE_NAME = "game_stats.json"
PACKAGE_DIR = Path(__file__).resolve().parent


def default_stats_path() -> Path:
    """
    Stats file beside the running program.

    Under ``python -m word_duel`` the program is a file inside this
    package, so the working directory is used instead.
    """
    if not sys.argv or not sys.argv[0]:
        return Path.cwd() / STATS_FILE_NAME
    program = Path(sys.argv[0]).resolve()
    if PACKAGE_DIR in program.parents:
        return Path.cwd() / STATS_FILE_NAME
    return program.parent / STATS_FILE_NAME


class GameConfig(BaseModel):
    """
    Settings for one game session.

    ``language`` and ``time_limit_seconds`` are optional: when unset the
    player is asked at startup.
    """

    model_config = ConfigDict(extra="forbid")

    language: Optional[Language] = None
    time_limit_seconds: Optional[int] = Field(
        default=None, ge=MIN_TIME_LIMIT, le=MAX_TIME_LIMIT
    )
    stats_file: Path = Field(default_factory=default_stats_path)
    log_file: Optional[str] = "word_duel.log"
    log_level: str = "INFO"
    poll_interval_seconds: float = Field(default=0.1, gt=0, le=1)

    @field_validator("language", mode="before")
    @classmethod
    def _accept_menu_choice(cls, value: Any) -> Any:
        # "1"/"2" as in the startup menu, besides "ru"/"en"
        if isinstance(value, str) and value.strip() in ("1", "2"):
            return Language.from_choice(value)
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_file", mode="before")
    @classmethod
    def _blank_log_file_disables(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def validate_config(config: Dict[str, Any], source: str = "config") -> GameConfig:
    """
    Validate a raw configuration dict.

    Args:
        config: Configuration dict (file values merged with overrides)
        source: Where the values came from, for error messages

    Raises:
        ConfigError: If any value is missing or out of range
    """
    try:
        return GameConfig(**config)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigError(source, problems) from e
