"""Schema exports."""

from errand_app.schemas.errand import (
    CancellationStatusRequest,
    CancellationStatusResponse,
    CatalogEntryResponse,
    ErrandDraftPayload,
    ErrandPayloadResponse,
    QuoteRequest,
    QuoteResponse,
    ScheduleCheckRequest,
    ScheduleCheckResponse,
    SchedulePickerResponse,
    StoredErrandPayload,
)

__all__ = [
    "CancellationStatusRequest",
    "CancellationStatusResponse",
    "CatalogEntryResponse",
    "ErrandDraftPayload",
    "ErrandPayloadResponse",
    "QuoteRequest",
    "QuoteResponse",
    "ScheduleCheckRequest",
    "ScheduleCheckResponse",
    "SchedulePickerResponse",
    "StoredErrandPayload",
]
