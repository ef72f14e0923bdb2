"""
Get Progress Use Case - read model for the beach/progress screen.
"""

from dataclasses import dataclass
from datetime import date

from swell.core.domain.streak_rules import format_streak_text
from swell.core.models import Entry, LevelMeta, Milestone
from swell.core.progression import ProgressionState


@dataclass
class ProgressSnapshot:
    total_xp: int
    total_shells: int
    level: LevelMeta
    unlocks: list[str]
    current_streak: int
    longest_streak: int
    streak_text: str
    milestones: list[Milestone]
    entries: list[Entry]


def get_progress(progression: ProgressionState, today: date) -> ProgressSnapshot:
    """Recompute every derived view from the ledger."""
    streak = progression.current_streak(today)
    return ProgressSnapshot(
        total_xp=progression.total_xp,
        total_shells=progression.total_shells,
        level=progression.level_meta(),
        unlocks=sorted(progression.unlocks()),
        current_streak=streak,
        longest_streak=progression.longest_streak(),
        streak_text=format_streak_text(streak),
        milestones=progression.milestones(),
        entries=progression.entries,
    )
