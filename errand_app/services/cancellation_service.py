"""Cancellation window helpers for freshly posted errands."""

from __future__ import annotations

import math
from datetime import datetime, timedelta

CANCEL_WINDOW_SECONDS: int = 30
CANCELLABLE_STATUS: str = "pending"


def remaining_cancel_seconds(created_at: datetime | None, now: datetime) -> int:
    """Return whole seconds left in the cancellation window, within [0, 30].

    Clock skew that puts ``now`` before ``created_at`` yields a full window,
    never more. An errand without a creation time has no window left.
    """
    if created_at is None:
        return 0
    age = max(0, math.floor((now - created_at).total_seconds()))
    return max(0, min(CANCEL_WINDOW_SECONDS, CANCEL_WINDOW_SECONDS - age))


def can_cancel(created_at: datetime | None, now: datetime, status: str) -> bool:
    """Return whether the caller may still be offered the cancel action."""
    return status == CANCELLABLE_STATUS and remaining_cancel_seconds(created_at, now) > 0


def cancellation_cutoff(now: datetime) -> datetime:
    """Return the oldest ``created_at`` a conditional cancel update may still match."""
    return now - timedelta(seconds=CANCEL_WINDOW_SECONDS)
