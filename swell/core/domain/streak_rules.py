"""
Streak Domain Rules - current and longest streak from the entry ledger.

AICODE-NOTE: Pure functions over the full ledger. Nothing is cached between
calls; the streak is recomputed from entry dates every time.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from swell.core.models import Entry


def active_days(entries: Iterable[Entry]) -> set[date]:
    """Unique days with at least one entry."""
    return {entry.date for entry in entries}


def current_streak(entries: Iterable[Entry], today: date) -> int:
    """
    Count consecutive days with an entry, walking back from today.

    Returns 0 if today itself has no entry.
    """
    days = active_days(entries)

    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def longest_streak(entries: Iterable[Entry]) -> int:
    """Longest run of calendar-consecutive days anywhere in the ledger."""
    days = sorted(active_days(entries))
    if not days:
        return 0

    longest = run = 1
    for previous, current in zip(days, days[1:]):
        if current - previous == timedelta(days=1):
            run += 1
            longest = max(longest, run)
        else:
            run = 1
    return longest


def format_streak_text(streak_days: int) -> str:
    """
    Streak caption for the header.

    Returns:
        "Streak ready" if streak == 0, else "N-day streak"
    """
    if streak_days <= 0:
        return "Streak ready"
    return f"{streak_days}-day streak"
