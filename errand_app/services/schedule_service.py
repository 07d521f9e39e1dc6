"""Time-of-day checks for errands scheduled later the same day."""

from __future__ import annotations

from datetime import datetime, timedelta

from errand_app.models.errand import ScheduledTime
from errand_app.utils.time import minutes_of_day

PAST_TIME_MESSAGE: str = "Please select a time that hasn't passed yet."


def to_24_hour(hour: int, period: str) -> int:
    """Convert a 12-hour clock hour to 0-23."""
    if period == "AM" and hour == 12:
        return 0
    if period == "PM" and hour != 12:
        return hour + 12
    return hour


def to_minutes(hour: int, minute: int, period: str) -> int:
    """Return minutes since midnight for a 12-hour time."""
    return to_24_hour(hour, period) * 60 + minute


def is_time_in_past(hour: int, minute: int, period: str, now: datetime) -> bool:
    """Return whether the time has passed today; the current minute counts as past."""
    hour24 = to_24_hour(hour, period)
    if hour24 < now.hour:
        return True
    return hour24 == now.hour and minute <= now.minute


def is_hour_disabled(hour: int, period: str, now: datetime) -> bool:
    """Return whether no minute of the hour can still be picked."""
    return to_minutes(hour, 59, period) < minutes_of_day(now)


def is_minute_disabled(hour: int, minute: int, period: str, now: datetime) -> bool:
    return to_minutes(hour, minute, period) < minutes_of_day(now)


def next_future_selection(now: datetime) -> ScheduledTime:
    """Return the picker selection one minute after now."""
    upcoming = now + timedelta(minutes=1)
    period = "PM" if upcoming.hour >= 12 else "AM"
    hour12 = upcoming.hour % 12 or 12
    return ScheduledTime(hour=hour12, minute=upcoming.minute, period=period)


def suggest_future_time(now: datetime) -> ScheduledTime | None:
    """Return the next pickable time today, or None once the day has run out.

    At 11:59 PM the next minute wraps to 12:00 AM, which is already past today.
    """
    suggestion = next_future_selection(now)
    if is_time_in_past(suggestion.hour, suggestion.minute, suggestion.period, now):
        return None
    return suggestion


def disabled_hours(period: str, now: datetime) -> list[int]:
    """Return picker hours of the period with no minute left today."""
    return [hour for hour in range(1, 13) if is_hour_disabled(hour, period, now)]


def disabled_minutes(hour: int, period: str, now: datetime) -> list[int]:
    return [minute for minute in range(60) if is_minute_disabled(hour, minute, period, now)]


def format_scheduled_time(hour: int, minute: int, period: str) -> str:
    """Render the stored form of a scheduled time, e.g. ``3:05 PM``."""
    return f"{hour}:{minute:02d} {period}"

