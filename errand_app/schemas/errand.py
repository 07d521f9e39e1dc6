"""Errand API schemas."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from errand_app.models.errand import (
    CampusLocation,
    Errand,
    ErrandDraft,
    ErrandFile,
    LineItem,
    PrintingSelection,
    ScheduledTime,
)

Period = Literal["AM", "PM"]


class LineItemPayload(BaseModel):
    """Single item row; quantity is kept as entered."""

    name: str = ""
    qty: str | float | None = ""
    price: float | None = None

    def to_domain(self) -> LineItem:
        return LineItem(name=self.name, quantity=self.qty, price=self.price)


class PrintingSelectionPayload(BaseModel):
    """Printing size/color selection."""

    size: Literal["A3", "A4"] | None = None
    color: Literal["Colored", "Not Colored"] | None = None

    def to_domain(self) -> PrintingSelection:
        return PrintingSelection(size=self.size, color=self.color)


class ScheduledTimePayload(BaseModel):
    """12-hour time of day picked for a scheduled errand."""

    hour: int = Field(ge=1, le=12)
    minute: int = Field(ge=0, le=59)
    period: Period

    def to_domain(self) -> ScheduledTime:
        return ScheduledTime(hour=self.hour, minute=self.minute, period=self.period)


class CampusLocationPayload(BaseModel):
    """Campus delivery destination."""

    id: str
    name: str
    latitude: float
    longitude: float

    def to_domain(self) -> CampusLocation:
        return CampusLocation(id=self.id, name=self.name, latitude=self.latitude, longitude=self.longitude)


class ErrandFilePayload(BaseModel):
    """Reference to an uploaded errand file."""

    file_name: str
    file_uri: str


class QuoteRequest(BaseModel):
    """Inputs of a price breakdown."""

    category: str = ""
    items: list[LineItemPayload] = Field(default_factory=list)
    printing: PrintingSelectionPayload | None = None
    prefer_stored_prices: bool = False


class PriceRowResponse(BaseModel):
    """Serialized priced item row."""

    name: str
    qty: float
    unit_price: float
    line_total: float
    qty_label: str
    line_total_display: str


class QuoteResponse(BaseModel):
    """Unrounded breakdown plus display strings."""

    errand_type: str
    item_rows: list[PriceRowResponse]
    subtotal: float
    total_quantity: float
    delivery_fee: float
    service_fee: float
    total: float
    show_fee_rows: bool
    subtotal_display: str
    delivery_fee_display: str
    service_fee_display: str
    total_display: str
    has_empty_quantities: bool


class CatalogEntryResponse(BaseModel):
    """Serialized catalog item."""

    name: str
    price: float
    price_display: str


class ErrandDraftPayload(BaseModel):
    """Errand form state submitted for validation or payload building."""

    title: str = ""
    description: str = ""
    category: str = ""
    items: list[LineItemPayload] = Field(default_factory=list)
    printing: PrintingSelectionPayload | None = None
    files: list[ErrandFilePayload] = Field(default_factory=list)
    scheduled_time: ScheduledTimePayload | None = None
    delivery_location: CampusLocationPayload | None = None

    def to_domain(self) -> ErrandDraft:
        return ErrandDraft(
            title=self.title,
            description=self.description,
            category=self.category,
            items=[item.to_domain() for item in self.items],
            printing=self.printing.to_domain() if self.printing else None,
            files=[ErrandFile(file_name=file.file_name, file_uri=file.file_uri) for file in self.files],
            scheduled_time=self.scheduled_time.to_domain() if self.scheduled_time else None,
            delivery_location=self.delivery_location.to_domain() if self.delivery_location else None,
        )


class DraftIssueResponse(BaseModel):
    """Single issue blocking an errand draft."""

    code: str
    message: str


class DraftValidationResponse(BaseModel):
    """Draft validation result."""

    is_valid: bool
    issues: list[DraftIssueResponse]


class ErrandPayloadResponse(BaseModel):
    """Insert payload for the persistence collaborator."""

    payload: dict[str, Any]


class StoredErrandPayload(BaseModel):
    """Persisted errand fields read back for repost."""

    category: str = ""
    status: str
    title: str = ""
    description: str = ""
    items: list[LineItemPayload] = Field(default_factory=list)
    printing: PrintingSelectionPayload | None = None
    files: list[ErrandFilePayload] = Field(default_factory=list)
    created_at: datetime | None = None
    amount_price: float | None = None
    is_scheduled: bool = False
    scheduled_time: str | None = None
    scheduled_date: str | None = None
    delivery_location: CampusLocationPayload | None = None

    def to_domain(self) -> Errand:
        return Errand(
            category=self.category,
            items=[item.to_domain() for item in self.items],
            status=self.status,
            created_at=self.created_at,
            amount_price=self.amount_price,
            title=self.title,
            description=self.description,
            printing=self.printing.to_domain() if self.printing else None,
            files=[ErrandFile(file_name=file.file_name, file_uri=file.file_uri) for file in self.files],
            is_scheduled=self.is_scheduled,
            scheduled_time=self.scheduled_time,
            scheduled_date=self.scheduled_date,
            delivery_location=self.delivery_location.to_domain() if self.delivery_location else None,
        )


class CancellationStatusRequest(BaseModel):
    """Errand fields needed for the cancellation countdown."""

    created_at: datetime | None = None
    status: str


class CancellationStatusResponse(BaseModel):
    """Cancellation countdown state."""

    remaining_seconds: int
    can_cancel: bool
    created_after: datetime
    message: str


class ScheduleCheckRequest(BaseModel):
    """12-hour time to check against the current time."""

    hour: int = Field(ge=1, le=12)
    minute: int = Field(ge=0, le=59)
    period: Period


class ScheduleCheckResponse(BaseModel):
    """Result of a scheduled time check."""

    is_past: bool
    scheduled_time: str
    message: str | None = None
    suggested_time: str | None = None


class SchedulePickerResponse(BaseModel):
    """Time picker options that are no longer selectable today."""

    period: Period
    hour: int
    disabled_hours: list[int]
    disabled_minutes: list[int]
    suggested_time: str | None = None
