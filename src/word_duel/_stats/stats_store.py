# Area: Stats
"""
word_duel._stats.stats_store - JSON-backed player statistics
============================================================

Loads and saves aggregate per-player results. Loading never fails: a
missing or unreadable file yields empty statistics, and invalid
entries are skipped, so a broken stats file cannot stop a game from
starting. Saving writes a temporary file in the same directory and
swaps it in with ``os.replace``, so the previous file stays intact if
anything goes wrong. A file that did not load cleanly is moved to
``<name>.bak`` before the first save replaces it.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Union

from pydantic import ValidationError

from ..errors import StatsSaveError
from .models import GameHistory, PlayerStatsRecord, StoredHistory

if TYPE_CHECKING:
    from .._round.round_result import RoundOutcome

logger = logging.getLogger("word_duel.stats.store")

BACKUP_SUFFIX = ".bak"

StatsRecords = Dict[str, PlayerStatsRecord]


class StatsStore:
    """
    Reads and writes the stats file at ``path``.

    Records are returned as a dict keyed by player name, in file order.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.backup_path = self.path.with_name(self.path.name + BACKUP_SUFFIX)
        self.load_was_lossy = False

    def load(self) -> StatsRecords:
        """
        Load all records; never raises.

        An unreadable file yields an empty dict. Entries that fail
        validation are skipped one by one. Either way
        ``load_was_lossy`` is set, and the next ``save()`` moves the
        current file to ``backup_path`` instead of overwriting it.
        """
        self.load_was_lossy = False
        if not self.path.exists():
            logger.info("No stats file at %s, starting fresh", self.path)
            return {}

        try:
            raw = self.path.read_text(encoding="utf-8")
            stored = StoredHistory.model_validate_json(raw)
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("Ignoring unreadable stats file %s: %s", self.path, e)
            self.load_was_lossy = True
            return {}

        records: StatsRecords = {}
        for position, entry in enumerate(stored.players):
            try:
                record = PlayerStatsRecord.model_validate(entry)
            except ValidationError as e:
                logger.warning("Skipping invalid stats entry #%d: %s", position, e)
                self.load_was_lossy = True
                continue
            if record.name in records:
                logger.warning("Duplicate stats entry for %r ignored", record.name)
                continue
            records[record.name] = record
        logger.info("Loaded stats for %d players from %s", len(records), self.path)
        return records

    def save(self, records: Mapping[str, PlayerStatsRecord]) -> None:
        """
        Atomically replace the stats file with ``records``.

        Raises:
            StatsSaveError: If the file cannot be written.
        """
        history = GameHistory(players=list(records.values()))
        payload = history.model_dump_json(indent=2, by_alias=True)

        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            if self.load_was_lossy and self.path.exists():
                os.replace(self.path, self.backup_path)
                logger.warning(
                    "Kept the unreadable stats file as %s", self.backup_path
                )
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            logger.error("Saving stats to %s failed: %s", self.path, e)
            raise StatsSaveError(str(self.path), str(e)) from e

        self.load_was_lossy = False
        logger.info("Saved stats for %d players to %s", len(records), self.path)


def apply_outcome(
    records: StatsRecords,
    outcome: "RoundOutcome",
    participants: Iterable[str],
) -> StatsRecords:
    """
    Count one finished round into ``records`` (mutated in place).

    Every participant gets one more game played and the winner one more
    win. A winner missing from ``participants`` is still credited with
    both, creating the record if needed.
    """
    participants = list(participants)
    for name in participants:
        record = _get_or_create(records, name)
        record.games_played += 1
        if name == outcome.winner_name:
            record.wins += 1

    if outcome.winner_name not in participants:
        logger.warning(
            "Winner %r was not a participant; crediting anyway", outcome.winner_name
        )
        record = _get_or_create(records, outcome.winner_name)
        record.wins += 1
        record.games_played += 1

    return records


def _get_or_create(records: StatsRecords, name: str) -> PlayerStatsRecord:
    record = records.get(name)
    if record is None:
        record = PlayerStatsRecord(name=name)
        records[name] = record
    return record
