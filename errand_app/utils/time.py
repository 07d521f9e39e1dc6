"""Wall-clock helpers.

Schedule checks compare against the local time of day of the campus, so the
current time is always resolved in the configured timezone.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from errand_app.core.config import settings


def current_local_datetime() -> datetime:
    """Return timezone-aware 'now' in the configured application timezone."""
    return datetime.now(ZoneInfo(settings.app_timezone))


def minutes_of_day(value: datetime) -> int:
    """Return minutes elapsed since local midnight, ignoring seconds."""
    return value.hour * 60 + value.minute
