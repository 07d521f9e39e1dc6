"""Errand domain model exports."""

from errand_app.models.errand import (
    CampusLocation,
    Errand,
    ErrandDraft,
    ErrandFile,
    LineItem,
    PriceBreakdown,
    PriceRow,
    PrintingSelection,
    ScheduledTime,
)

__all__ = [
    "CampusLocation",
    "Errand",
    "ErrandDraft",
    "ErrandFile",
    "LineItem",
    "PriceBreakdown",
    "PriceRow",
    "PrintingSelection",
    "ScheduledTime",
]
