"""Errand draft validation and insert payloads for the persistence layer.

The payloads built here are handed to the external store as-is; the
``amount_price`` they carry is always the freshly computed breakdown total.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from errand_app.models.errand import DELIVER_ITEMS, PRINTING, Errand, ErrandDraft, LineItem, PrintingSelection
from errand_app.services.pricing_service import (
    compute_price_breakdown,
    has_empty_quantities,
    is_blank,
    resolve_unit_price,
)
from errand_app.services.schedule_service import format_scheduled_time, is_time_in_past

logger = logging.getLogger(__name__)

REPOSTABLE_STATUS: str = "cancelled"

ISSUE_MESSAGES: dict[str, str] = {
    "missing_title": "Please enter an errand title.",
    "missing_description": "Please enter an errand description.",
    "missing_category": "Please select a category.",
    "past_schedule_time": "Please select a future time for the errand.",
    "empty_quantity": "Please fill in the quantity for all items before proceeding.",
    "missing_delivery_destination": "Please select a Delivery Destination.",
}


class DraftValidationError(Exception):
    """Raised when a draft cannot be posted yet."""

    def __init__(self, issues: list[str]) -> None:
        super().__init__(", ".join(issues))
        self.issues = issues


class RepostNotAllowedError(Exception):
    """Raised when reposting an errand that was not cancelled."""


def collect_draft_issues(draft: ErrandDraft, now: datetime) -> list[str]:
    """Return issue codes blocking the draft, in the order the form reports them."""
    issues: list[str] = []
    if not draft.title.strip():
        issues.append("missing_title")
    if not draft.description.strip():
        issues.append("missing_description")
    if not draft.category:
        issues.append("missing_category")
    scheduled = draft.scheduled_time
    if scheduled is not None and is_time_in_past(scheduled.hour, scheduled.minute, scheduled.period, now):
        issues.append("past_schedule_time")
    if has_empty_quantities(draft.items):
        issues.append("empty_quantity")
    if draft.category == DELIVER_ITEMS and draft.delivery_location is None:
        issues.append("missing_delivery_destination")
    return issues


def _serialize_items(
    items: list[LineItem],
    category: str,
    printing: PrintingSelection | None,
) -> list[dict[str, Any]]:
    return [
        {
            "name": item.name,
            "qty": item.quantity,
            "price": resolve_unit_price(item, category, printing),
        }
        for item in items
    ]


def _delivery_fields(category: str, errand: ErrandDraft | Errand) -> dict[str, Any]:
    fields: dict[str, Any] = {
        "pickup_status": "pending" if category == DELIVER_ITEMS else None,
        "pickup_photo": None,
        "pickup_confirmed_at": None,
    }
    location = errand.delivery_location
    if category == DELIVER_ITEMS and location is not None:
        fields["delivery_location_id"] = location.id
        fields["delivery_latitude"] = location.latitude
        fields["delivery_longitude"] = location.longitude
    return fields


def _printing_fields(category: str, printing: PrintingSelection | None) -> dict[str, Any]:
    if category != PRINTING or printing is None:
        return {}
    return {"printing_size": printing.size, "printing_color": printing.color}


def build_submission_payload(draft: ErrandDraft, now: datetime) -> dict[str, Any]:
    """Build the insert payload of a new errand.

    Raises:
        DraftValidationError: The draft still has blocking issues.
    """
    issues = collect_draft_issues(draft, now)
    if issues:
        logger.info("Errand draft rejected: %s", ", ".join(issues))
        raise DraftValidationError(issues)

    breakdown = compute_price_breakdown(draft.category, draft.items, draft.printing)
    scheduled = draft.scheduled_time

    payload: dict[str, Any] = {
        "title": draft.title.strip(),
        "description": draft.description.strip(),
        "category": draft.category,
        "status": "pending",
        "items": _serialize_items(draft.items, draft.category, draft.printing),
        "files": [{"fileName": file.file_name, "fileUri": file.file_uri} for file in draft.files],
        "is_scheduled": draft.is_scheduled,
        "scheduled_time": (
            format_scheduled_time(scheduled.hour, scheduled.minute, scheduled.period) if scheduled else None
        ),
        "scheduled_date": now.date().isoformat() if scheduled else None,
        "amount_price": breakdown.total,
    }
    payload.update(_printing_fields(draft.category, draft.printing))
    payload.update(_delivery_fields(draft.category, draft))
    return payload


def build_repost_payload(errand: Errand) -> dict[str, Any]:
    """Clone a cancelled errand into a new pending one.

    The total is recomputed from today's catalog prices; prices stored with
    the old items and the old ``amount_price`` are not reused.

    Raises:
        RepostNotAllowedError: The errand is not cancelled.
    """
    if errand.status != REPOSTABLE_STATUS:
        logger.info("Repost refused for errand in status %s", errand.status)
        raise RepostNotAllowedError(f"Only cancelled errands can be reposted, got {errand.status!r}")

    items = [
        LineItem(name=item.name, quantity="1" if is_blank(item.quantity) else item.quantity)
        for item in errand.items
    ]
    breakdown = compute_price_breakdown(errand.category, items, errand.printing)

    payload: dict[str, Any] = {
        "title": errand.title.strip(),
        "description": errand.description.strip(),
        "category": errand.category or None,
        "status": "pending",
        "items": _serialize_items(items, errand.category, errand.printing),
        "files": [{"fileName": file.file_name, "fileUri": file.file_uri} for file in errand.files],
        "is_scheduled": errand.is_scheduled,
        "scheduled_time": errand.scheduled_time,
        "scheduled_date": errand.scheduled_date,
        "amount_price": breakdown.total,
    }
    payload.update(_printing_fields(errand.category, errand.printing))
    payload.update(_delivery_fields(errand.category, errand))
    return payload
