"""
Entry Log - append-only in-memory ledger of completed missions.

AICODE-NOTE: Only data access, no business rules. Entries are never updated
or removed. The ledger lives for the session; a persistent store would
implement the same record_entry / read_all interface.
"""

import logging
from datetime import date

from swell.core.models import Entry

logger = logging.getLogger(__name__)


class EntryLog:
    """Session ledger keyed by (date, mission_id)."""

    def __init__(self, entries: list[Entry] | None = None):
        self._entries: list[Entry] = []
        self._keys: set[tuple[date, str]] = set()
        for entry in entries or []:
            self.record_entry(entry)

    def record_entry(self, entry: Entry) -> bool:
        """
        Append an entry unless one exists for (entry.date, entry.mission_id).

        Returns:
            True if appended, False if it was a duplicate (no-op)
        """
        key = (entry.date, entry.mission_id)
        if key in self._keys:
            logger.debug(f"Entry for {entry.mission_id} on {entry.date} exists, skipping")
            return False
        self._keys.add(key)
        self._entries.append(entry)
        return True

    def has_entry(self, day: date, mission_id: str) -> bool:
        return (day, mission_id) in self._keys

    def read_all(self) -> list[Entry]:
        """All entries, most recent first."""
        return list(reversed(self._entries))

    def entries_for(self, day: date) -> list[Entry]:
        return [e for e in self.read_all() if e.date == day]

    def __len__(self) -> int:
        return len(self._entries)
