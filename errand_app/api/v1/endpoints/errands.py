"""Errand posting, repost and cancellation endpoints.

Nothing is persisted here: payloads are returned for the caller to insert
through its own data layer.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from errand_app.schemas.errand import (
    CancellationStatusRequest,
    CancellationStatusResponse,
    DraftIssueResponse,
    DraftValidationResponse,
    ErrandDraftPayload,
    ErrandPayloadResponse,
    StoredErrandPayload,
)
from errand_app.services.cancellation_service import (
    can_cancel,
    cancellation_cutoff,
    remaining_cancel_seconds,
)
from errand_app.services.errand_service import (
    ISSUE_MESSAGES,
    DraftValidationError,
    RepostNotAllowedError,
    build_repost_payload,
    build_submission_payload,
    collect_draft_issues,
)
from errand_app.utils import time as time_utils

router: APIRouter = APIRouter()


def _issue_responses(issues: list[str]) -> list[DraftIssueResponse]:
    return [DraftIssueResponse(code=code, message=ISSUE_MESSAGES[code]) for code in issues]


@router.post("/validate", response_model=DraftValidationResponse)
def validate_draft(payload: ErrandDraftPayload) -> DraftValidationResponse:
    """Report every condition that keeps the draft from being posted."""
    issues: list[str] = collect_draft_issues(payload.to_domain(), time_utils.current_local_datetime())
    return DraftValidationResponse(is_valid=not issues, issues=_issue_responses(issues))


@router.post("/payload", response_model=ErrandPayloadResponse)
def create_errand_payload(payload: ErrandDraftPayload) -> ErrandPayloadResponse:
    """Build the insert payload of a new errand with its computed amount."""
    try:
        errand_payload = build_submission_payload(payload.to_domain(), time_utils.current_local_datetime())
    except DraftValidationError as exc:
        detail = [issue.model_dump() for issue in _issue_responses(exc.issues)]
        raise HTTPException(status_code=400, detail=detail) from exc
    return ErrandPayloadResponse(payload=errand_payload)


@router.post("/repost", response_model=ErrandPayloadResponse)
def create_repost_payload(payload: StoredErrandPayload) -> ErrandPayloadResponse:
    """Build the insert payload that reposts a cancelled errand."""
    try:
        errand_payload = build_repost_payload(payload.to_domain())
    except RepostNotAllowedError as exc:
        raise HTTPException(status_code=409, detail="Only cancelled errands can be reposted.") from exc
    return ErrandPayloadResponse(payload=errand_payload)


@router.post("/cancellation", response_model=CancellationStatusResponse)
def get_cancellation_status(payload: CancellationStatusRequest) -> CancellationStatusResponse:
    """Return the live countdown of the cancellation window."""
    now: datetime = time_utils.current_local_datetime()
    created_at: datetime | None = payload.created_at
    if created_at is not None and created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    remaining: int = remaining_cancel_seconds(created_at, now)
    allowed: bool = can_cancel(created_at, now, payload.status)
    message = f"You can cancel for {remaining}s." if allowed else "Cancellation window ended."
    return CancellationStatusResponse(
        remaining_seconds=remaining,
        can_cancel=allowed,
        created_after=cancellation_cutoff(now),
        message=message,
    )
