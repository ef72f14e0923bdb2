"""
Day keys - canonical "today" for mission ids and streaks.

AICODE-NOTE: The day boundary is config.DAY_TIMEZONE (UTC by default), not
the host's local time, so midnight means the same thing for every caller.
"""

from datetime import date, datetime, timezone, tzinfo

from swell.config import config


def day_for(moment: datetime, tz: tzinfo | None = None) -> date:
    """Calendar day of a timestamp in the configured zone (naive = UTC)."""
    zone = tz or config.day_zone
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(zone).date()


def today_id(tz: tzinfo | None = None) -> date:
    """Today's calendar day."""
    zone = tz or config.day_zone
    return datetime.now(zone).date()
