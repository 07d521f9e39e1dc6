"""Scheduled time validation endpoints."""

from datetime import datetime

from fastapi import APIRouter, Query

from errand_app.models.errand import ScheduledTime
from errand_app.schemas.errand import (
    Period,
    ScheduleCheckRequest,
    ScheduleCheckResponse,
    SchedulePickerResponse,
)
from errand_app.services.schedule_service import (
    PAST_TIME_MESSAGE,
    disabled_hours,
    disabled_minutes,
    format_scheduled_time,
    is_time_in_past,
    suggest_future_time,
)
from errand_app.utils import time as time_utils

router: APIRouter = APIRouter()


def _format_suggestion(suggestion: ScheduledTime | None) -> str | None:
    if suggestion is None:
        return None
    return format_scheduled_time(suggestion.hour, suggestion.minute, suggestion.period)


@router.post("/check", response_model=ScheduleCheckResponse)
def check_scheduled_time(payload: ScheduleCheckRequest) -> ScheduleCheckResponse:
    """Tell whether a picked time has already passed today."""
    now: datetime = time_utils.current_local_datetime()
    scheduled_time = format_scheduled_time(payload.hour, payload.minute, payload.period)
    if not is_time_in_past(payload.hour, payload.minute, payload.period, now):
        return ScheduleCheckResponse(is_past=False, scheduled_time=scheduled_time)

    return ScheduleCheckResponse(
        is_past=True,
        scheduled_time=scheduled_time,
        message=PAST_TIME_MESSAGE,
        suggested_time=_format_suggestion(suggest_future_time(now)),
    )


@router.get("/picker", response_model=SchedulePickerResponse)
def get_picker_options(
    period: Period = Query(...),
    hour: int = Query(ge=1, le=12),
) -> SchedulePickerResponse:
    """Return which picker hours and minutes are already gone today."""
    now: datetime = time_utils.current_local_datetime()
    return SchedulePickerResponse(
        period=period,
        hour=hour,
        disabled_hours=disabled_hours(period, now),
        disabled_minutes=disabled_minutes(hour, period, now),
        suggested_time=_format_suggestion(suggest_future_time(now)),
    )
