# Area: Shared
"""
word_duel.cli - Command-line interface
======================================

Provides the CLI entry point for playing a game.

Usage:
    word-duel                                   # Ask everything interactively
    word-duel --language en --time-limit 10     # Skip the language/time prompts
    python -m word_duel --config config.json    # Read settings from a file

Settings can come from (later wins):
    1. Config file: --config path/to/config.json
    2. Environment variables (a .env file is loaded first), e.g.
       WORD_DUEL_LANGUAGE=en
    3. CLI flags
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from ._config import GameConfig, validate_config
from ._shared.console import ConsoleOutput
from ._shared.logging_config import parse_level, setup_logging
from .errors import ConfigError
from .game import WordDuelGame

logger = logging.getLogger("word_duel.cli")

ENV_MAPPINGS = {
    "WORD_DUEL_LANGUAGE": "language",
    "WORD_DUEL_TIME_LIMIT": "time_limit_seconds",
    "WORD_DUEL_STATS_FILE": "stats_file",
    "WORD_DUEL_LOG_FILE": "log_file",
    "WORD_DUEL_LOG_LEVEL": "log_level",
    "WORD_DUEL_POLL_INTERVAL": "poll_interval_seconds",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="word-duel",
        description="Word Duel - build words from the letters of a starting word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  word-duel
  word-duel --language en --time-limit 15
  word-duel --config config.json --stats-file ~/word_duel_stats.json
  WORD_DUEL_LANGUAGE=ru word-duel
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--language",
        type=str,
        help="Interface language: ru or en (1 or 2 also accepted)",
    )

    parser.add_argument(
        "--time-limit",
        dest="time_limit_seconds",
        type=int,
        help="Seconds per turn (5-60); asked interactively if omitted",
    )

    parser.add_argument(
        "--stats-file",
        type=str,
        help="Where aggregate player statistics are stored",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="JSON log file path (empty string disables file logging)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        help="Log level for the log file (default: INFO)",
    )

    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load config from file or environment."""
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(config_path, ["file not found"])
        try:
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(config_path, [str(e)]) from e
        if not isinstance(config, dict):
            raise ConfigError(config_path, ["top-level JSON value must be an object"])

    # Override with environment variables
    load_dotenv()
    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    return config


def apply_overrides(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    """Let explicit CLI flags win over file and environment values."""
    for key in ("language", "time_limit_seconds", "stats_file", "log_file", "log_level"):
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value
    return config


def build_config(argv: Optional[List[str]] = None) -> GameConfig:
    args = parse_args(argv)
    config = apply_overrides(load_config(args.config), args)
    return validate_config(config, source=args.config or "environment")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        config = build_config(argv)
        level = parse_level(config.log_level)
    except (ConfigError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    setup_logging(log_file_path=config.log_file, level=level)
    output = ConsoleOutput()

    try:
        outcome = WordDuelGame(config=config, output=output).run()
    except KeyboardInterrupt:
        output.display_message("goodbye")
        return 130
    except EOFError:
        output.display_message("goodbye")
        return 0
    except Exception as e:
        logger.exception("Unexpected error")
        output.display_message("unexpected_error", e)
        return 1

    logger.info("Game finished, winner: %s", outcome.winner_name)
    return 0
