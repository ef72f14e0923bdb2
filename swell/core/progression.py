"""
Progression State - totals, level, unlocks and streaks derived from the ledger.

AICODE-NOTE: Nothing here is stored besides the EntryLog. total_xp and
total_shells are sums over entries, recomputed on every read, so there is no
way to set them independently of the ledger.
"""

from datetime import date

from swell.core.domain import gamification, streak_rules
from swell.core.models import Entry, LevelMeta, Milestone
from swell.storage.entry_log import EntryLog


class ProgressionState:
    """Read/append facade over one session's EntryLog."""

    def __init__(self, log: EntryLog | None = None):
        self.log = log if log is not None else EntryLog()

    def record_entry(self, entry: Entry) -> bool:
        """Append entry; duplicate (date, mission_id) is a silent no-op."""
        return self.log.record_entry(entry)

    @property
    def entries(self) -> list[Entry]:
        """Ledger, most recent first."""
        return self.log.read_all()

    @property
    def total_xp(self) -> int:
        return sum(e.xp for e in self.log.read_all())

    @property
    def total_shells(self) -> int:
        return sum(e.shells for e in self.log.read_all())

    def level_meta(self) -> LevelMeta:
        return gamification.compute_level(self.total_xp)

    def unlocks(self) -> frozenset[str]:
        return gamification.compute_unlocks(self.total_xp, self.total_shells)

    def milestones(self) -> list[Milestone]:
        return gamification.milestone_progress(self.total_xp)

    def current_streak(self, today: date) -> int:
        return streak_rules.current_streak(self.log.read_all(), today)

    def longest_streak(self) -> int:
        return streak_rules.longest_streak(self.log.read_all())

    def completed_mission_ids(self, day: date) -> set[str]:
        return {e.mission_id for e in self.log.entries_for(day)}

    def is_claimed(self, day: date, mission_id: str) -> bool:
        return self.log.has_entry(day, mission_id)
