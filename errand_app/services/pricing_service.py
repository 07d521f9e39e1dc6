"""Errand price breakdown: item pricing, delivery fee tiers and service fee.

Every form, detail view and repost flow prices errands through
:func:`compute_price_breakdown`, so the total shown to the caller and the
``amount_price`` stored with the errand always come from the same rule.

Degraded input never raises: an unparsable quantity, an unknown item name or
an incomplete printing selection simply contributes zero.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable

from errand_app.models.errand import (
    DELIVER_ITEMS,
    FOOD_DELIVERY,
    PRINTING,
    SCHOOL_MATERIALS,
    LineItem,
    PriceBreakdown,
    PriceRow,
    PrintingSelection,
)

logger = logging.getLogger(__name__)

FOOD_CATALOG: dict[str, dict[str, float]] = {
    "Canteen": {
        "Toppings": 55.0,
        "Biscuits": 10.0,
        "Pansit Canton": 30.0,
        "Waffles": 35.0,
        "Pastel": 20.0,
        "Rice Bowl": 60.0,
    },
    "Drinks": {
        "Real Leaf": 30.0,
        "Water (500ml)": 25.0,
        "Minute Maid": 30.0,
        "Kopiko Lucky Day": 30.0,
    },
}

SCHOOL_MATERIALS_CATALOG: dict[str, float] = {
    "Yellowpad": 10.0,
    "Ballpen": 10.0,
}

PRINTING_PRICES: dict[tuple[str, str], float] = {
    ("A3", "Colored"): 25.0,
    ("A3", "Not Colored"): 15.0,
    ("A4", "Colored"): 5.0,
    ("A4", "Not Colored"): 2.0,
}

# (base flat fee, add-on per unit beyond the first)
DELIVERY_FEE_SCHEDULE: dict[str, tuple[float, float]] = {
    DELIVER_ITEMS: (20.0, 5.0),
    FOOD_DELIVERY: (15.0, 5.0),
    SCHOOL_MATERIALS: (10.0, 5.0),
    PRINTING: (5.0, 2.0),
}

SERVICE_FEE_BASE: float = 10.0
SERVICE_FEE_VAT_RATE: float = 0.12

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def is_blank(value: str | int | float | None) -> bool:
    """Return True for a missing, empty or whitespace-only field value."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return value == 0


def parse_quantity(value: str | int | float | None) -> float:
    """Read the leading decimal number of a quantity field.

    Mirrors how the form reads user input: trailing text is ignored
    (``"3 pcs"`` is 3) and anything unusable is 0.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return 0.0
        number = float(match.group(1).replace("Infinity", "inf"))
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def printing_unit_price(printing: PrintingSelection | None) -> float:
    """Return per-page price for a size/color pair, 0 until both are chosen."""
    if printing is None or printing.size is None or printing.color is None:
        return 0.0
    return PRINTING_PRICES.get((printing.size, printing.color), 0.0)


def catalog_unit_price(name: str) -> float:
    """Look up an item by exact name, food catalogs first, then school supplies."""
    for section in FOOD_CATALOG.values():
        if name in section:
            return section[name]
    if name in SCHOOL_MATERIALS_CATALOG:
        return SCHOOL_MATERIALS_CATALOG[name]
    return 0.0


def list_catalog(category: str) -> list[tuple[str, float]]:
    """Return (name, price) pairs a form offers for the category."""
    if category == FOOD_DELIVERY:
        return [(name, price) for section in FOOD_CATALOG.values() for name, price in section.items()]
    if category == SCHOOL_MATERIALS:
        return list(SCHOOL_MATERIALS_CATALOG.items())
    return []


def resolve_unit_price(
    item: LineItem,
    category: str,
    printing: PrintingSelection | None = None,
    *,
    prefer_stored_prices: bool = False,
) -> float:
    """Return the unit price for one item under the category's pricing rule."""
    if prefer_stored_prices and item.price is not None:
        return float(item.price)
    if category == PRINTING:
        price = printing_unit_price(printing)
        if price == 0.0:
            logger.debug("Printing selection %s has no price yet", printing)
        return price
    price = catalog_unit_price(item.name)
    if price == 0.0:
        logger.debug("No catalog price for item %r, pricing at 0", item.name)
    return price


def total_quantity(items: Iterable[LineItem]) -> float:
    """Sum quantities of every named item.

    A named item with a blank quantity still takes part and adds 0, which is
    what the delivery fee tiers are based on. Whitespace-only names do not
    count as named here.
    """
    return sum((parse_quantity(item.quantity) for item in items if not is_blank(item.name)), 0.0)


def delivery_fee(category: str, quantity: float) -> float:
    """Return flat base fee plus the add-on for every unit beyond the first."""
    base, per_extra = DELIVERY_FEE_SCHEDULE.get(category, (0.0, 0.0))
    return base + per_extra * max(quantity - 1, 0)


def service_fee() -> float:
    """Return the platform service fee with VAT applied to the fee only."""
    return SERVICE_FEE_BASE + SERVICE_FEE_BASE * SERVICE_FEE_VAT_RATE


def has_empty_quantities(items: Iterable[LineItem]) -> bool:
    """Return True when any item row is missing its quantity."""
    return any(is_blank(item.quantity) for item in items)


def compute_price_breakdown(
    category: str,
    items: Iterable[LineItem],
    printing: PrintingSelection | None = None,
    *,
    prefer_stored_prices: bool = False,
) -> PriceBreakdown:
    """Compute the full price breakdown of an errand.

    Args:
        category: Errand category; unknown values get no delivery fee.
        items: Item rows. Only rows with both a name and a quantity are priced.
        printing: Size/color selection, used by the Printing category only.
        prefer_stored_prices: Use the unit price saved with each item when
            present. Only detail views redisplaying a stored errand set this.

    Returns:
        Unrounded breakdown; round only when displaying it.
    """
    items = list(items)
    rows: list[PriceRow] = []
    subtotal: float = 0.0

    for item in items:
        # whitespace-only names still get a row
        if not item.name or is_blank(item.quantity):
            continue
        unit_price = resolve_unit_price(
            item,
            category,
            printing,
            prefer_stored_prices=prefer_stored_prices,
        )
        qty = parse_quantity(item.quantity)
        line_total = unit_price * qty
        rows.append(PriceRow(name=item.name, qty=qty, unit_price=unit_price, line_total=line_total))
        subtotal += line_total

    quantity = total_quantity(items)
    fee = delivery_fee(category, quantity)
    service = service_fee()

    return PriceBreakdown(
        item_rows=tuple(rows),
        subtotal=subtotal,
        total_quantity=quantity,
        delivery_fee=fee,
        service_fee=service,
        total=subtotal + fee + service,
    )


def format_peso(amount: float) -> str:
    """Render an amount for display, e.g. ``₱81.20``."""
    return f"₱{amount:.2f}"


def format_quantity_label(qty: float) -> str:
    """Render a row quantity, e.g. ``x1 pc`` or ``x3 pcs``."""
    shown = int(qty) if float(qty).is_integer() else qty
    return f"x{shown} {'pc' if qty == 1 else 'pcs'}"


def shows_fee_rows(breakdown: PriceBreakdown) -> bool:
    """Return whether service fee and total rows are worth showing yet."""
    return breakdown.subtotal > 0 or breakdown.delivery_fee > 0


def describe_errand_type(category: str, printing: PrintingSelection | None = None) -> str:
    """Return the errand type label, e.g. ``Printing-A3-Colored``."""
    if category == PRINTING and printing is not None and printing.size:
        label = f"Printing-{printing.size}"
        if printing.color:
            label += f"-{printing.color}"
        return label
    return category
