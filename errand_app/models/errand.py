"""Errand domain records shared by the pricing, schedule and payload services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

DELIVER_ITEMS: str = "Deliver Items"
FOOD_DELIVERY: str = "Food Delivery"
SCHOOL_MATERIALS: str = "School Materials"
PRINTING: str = "Printing"

ERRAND_CATEGORIES: list[str] = [DELIVER_ITEMS, FOOD_DELIVERY, SCHOOL_MATERIALS, PRINTING]

ERRAND_STATUSES: list[str] = ["pending", "accepted", "in_progress", "completed", "cancelled", "delivered"]


@dataclass(frozen=True)
class LineItem:
    """Single errand item row as entered on the form or read back from storage."""

    name: str = ""
    quantity: str | int | float | None = ""
    price: float | None = None


@dataclass(frozen=True)
class PrintingSelection:
    """Size/color pair that prices every page of a printing errand."""

    size: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class PriceRow:
    """Priced item row of a breakdown."""

    name: str
    qty: float
    unit_price: float
    line_total: float


@dataclass(frozen=True)
class PriceBreakdown:
    """Derived price projection of an errand; never persisted directly."""

    item_rows: tuple[PriceRow, ...]
    subtotal: float
    total_quantity: float
    delivery_fee: float
    service_fee: float
    total: float


@dataclass(frozen=True)
class CampusLocation:
    """Delivery destination picked from the campus locations list."""

    id: str
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ErrandFile:
    """Reference to an already uploaded file attached to an errand."""

    file_name: str
    file_uri: str


@dataclass(frozen=True)
class ScheduledTime:
    """12-hour time of day requested for a scheduled errand."""

    hour: int
    minute: int
    period: str


@dataclass
class ErrandDraft:
    """Form state of an errand that has not been posted yet."""

    title: str = ""
    description: str = ""
    category: str = ""
    items: list[LineItem] = field(default_factory=list)
    printing: PrintingSelection | None = None
    files: list[ErrandFile] = field(default_factory=list)
    scheduled_time: ScheduledTime | None = None
    delivery_location: CampusLocation | None = None

    @property
    def is_scheduled(self) -> bool:
        return self.scheduled_time is not None


@dataclass
class Errand:
    """Persisted errand fields read back by detail and repost views."""

    category: str
    items: list[LineItem]
    status: str
    created_at: datetime | None = None
    amount_price: float | None = None
    title: str = ""
    description: str = ""
    printing: PrintingSelection | None = None
    files: list[ErrandFile] = field(default_factory=list)
    is_scheduled: bool = False
    scheduled_time: str | None = None
    scheduled_date: str | None = None
    delivery_location: CampusLocation | None = None
