# Area: Shared
"""
Shared collaborators used by the round engine and the game session.

This package contains:
- Localized message tables and lookup helpers
- Line-based console input and output
- Logging configuration
"""

from .localization import (
    DEFAULT_LANGUAGE,
    Language,
    Localizer,
    format_message,
    lookup,
)
from .console import ConsoleOutput, ConsolePrompter, LineSource, StdinLineSource
from .logging_config import parse_level, setup_logging

__all__ = [
    "DEFAULT_LANGUAGE",
    "Language",
    "Localizer",
    "format_message",
    "lookup",
    "ConsoleOutput",
    "ConsolePrompter",
    "LineSource",
    "StdinLineSource",
    "parse_level",
    "setup_logging",
]
