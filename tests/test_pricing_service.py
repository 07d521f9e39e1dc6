"""Price breakdown rule tests."""

import pytest

from errand_app.models.errand import LineItem, PrintingSelection
from errand_app.services.pricing_service import (
    DELIVERY_FEE_SCHEDULE,
    catalog_unit_price,
    compute_price_breakdown,
    delivery_fee,
    describe_errand_type,
    format_peso,
    format_quantity_label,
    has_empty_quantities,
    list_catalog,
    parse_quantity,
    printing_unit_price,
    service_fee,
    shows_fee_rows,
    total_quantity,
)


def test_deliver_items_unmatched_name_pays_only_fees() -> None:
    """Free-text items price at 0 but still drive the delivery fee tiers."""
    breakdown = compute_price_breakdown("Deliver Items", [LineItem(name="Box", quantity="2")])

    assert breakdown.subtotal == 0
    assert breakdown.total_quantity == 2
    assert breakdown.delivery_fee == 25
    assert breakdown.service_fee == pytest.approx(11.20)
    assert breakdown.total == pytest.approx(36.20)
    assert breakdown.item_rows[0].unit_price == 0


def test_food_delivery_uses_catalog_price() -> None:
    """Food items are priced from the food catalog."""
    breakdown = compute_price_breakdown("Food Delivery", [LineItem(name="Toppings", quantity="1")])

    assert breakdown.subtotal == 55
    assert breakdown.total_quantity == 1
    assert breakdown.delivery_fee == 15
    assert breakdown.total == pytest.approx(81.20)


def test_printing_uses_size_and_color_table() -> None:
    """Printing rows take their unit price from the size and color table."""
    breakdown = compute_price_breakdown(
        "Printing",
        [LineItem(name="file.pdf", quantity="3")],
        PrintingSelection(size="A3", color="Colored"),
    )

    assert breakdown.item_rows[0].unit_price == 25
    assert breakdown.subtotal == 75
    assert breakdown.delivery_fee == 9
    assert breakdown.total == pytest.approx(95.20)


def test_total_is_sum_of_parts_for_every_category() -> None:
    """Total equals subtotal plus both fees whatever the category."""
    items = [
        LineItem(name="Toppings", quantity="2"),
        LineItem(name="Ballpen", quantity="1.5"),
        LineItem(name="Mystery", quantity="abc"),
        LineItem(name="Water (500ml)", quantity=""),
    ]
    printing = PrintingSelection(size="A4", color="Not Colored")
    for category in ["Deliver Items", "Food Delivery", "School Materials", "Printing", ""]:
        breakdown = compute_price_breakdown(category, items, printing)
        assert abs(breakdown.total - (breakdown.subtotal + breakdown.delivery_fee + breakdown.service_fee)) < 1e-9
        assert breakdown.service_fee == pytest.approx(11.20)


def test_single_unit_pays_base_delivery_fee() -> None:
    """Quantities up to one unit pay only the base delivery fee."""
    for category, (base, _) in DELIVERY_FEE_SCHEDULE.items():
        assert delivery_fee(category, 1) == base
        assert delivery_fee(category, 0) == base
        assert delivery_fee(category, 0.5) == base


def test_unrecognized_category_has_no_delivery_fee() -> None:
    """Unknown or empty categories carry no delivery fee."""
    assert delivery_fee("Laundry", 4) == 0
    assert delivery_fee("", 4) == 0


def test_service_fee_is_constant() -> None:
    """The service fee is charged even on an empty breakdown."""
    assert service_fee() == pytest.approx(11.20)
    empty = compute_price_breakdown("", [])
    assert empty.service_fee == pytest.approx(11.20)
    assert empty.total == pytest.approx(11.20)


def test_printing_price_needs_both_dimensions() -> None:
    """A printing price needs both a size and a color."""
    assert printing_unit_price(PrintingSelection(size="A3", color=None)) == 0
    assert printing_unit_price(PrintingSelection(size=None, color="Colored")) == 0
    assert printing_unit_price(None) == 0
    assert printing_unit_price(PrintingSelection(size="A3", color="Not Colored")) == 15
    assert printing_unit_price(PrintingSelection(size="A4", color="Colored")) == 5
    assert printing_unit_price(PrintingSelection(size="A4", color="Not Colored")) == 2


def test_printing_without_color_keeps_row_at_zero() -> None:
    """A partial printing selection still lists the row at zero."""
    breakdown = compute_price_breakdown(
        "Printing",
        [LineItem(name="notes.pdf", quantity="4")],
        PrintingSelection(size="A4"),
    )

    assert breakdown.subtotal == 0
    assert breakdown.delivery_fee == 11
    assert len(breakdown.item_rows) == 1


def test_catalog_lookup_prefers_food_then_school() -> None:
    """Catalog lookup is exact and checks food before school materials."""
    assert catalog_unit_price("Rice Bowl") == 60
    assert catalog_unit_price("Kopiko Lucky Day") == 30
    assert catalog_unit_price("Yellowpad") == 10
    assert catalog_unit_price("yellowpad") == 0
    assert catalog_unit_price("") == 0


def test_list_catalog_by_category() -> None:
    """Each category lists its own catalog entries."""
    assert ("Toppings", 55.0) in list_catalog("Food Delivery")
    assert len(list_catalog("Food Delivery")) == 10
    assert list_catalog("School Materials") == [("Yellowpad", 10.0), ("Ballpen", 10.0)]
    assert list_catalog("Deliver Items") == []


def test_parse_quantity_reads_leading_number() -> None:
    """Quantities read the leading number of the entered text."""
    assert parse_quantity("3") == 3
    assert parse_quantity(" 2.5kg") == 2.5
    assert parse_quantity(".5") == 0.5
    assert parse_quantity("1e2") == 100
    assert parse_quantity(4) == 4


@pytest.mark.parametrize("value", ["", "   ", "abc", None, "-2", "Infinity", "NaN", "x3"])
def test_parse_quantity_degrades_to_zero(value) -> None:
    """Unreadable, negative or infinite quantities count as zero."""
    assert parse_quantity(value) == 0


def test_blank_quantity_is_excluded_from_rows_but_named_item_counts() -> None:
    """A named row without quantity adds no line and contributes 0 to the tier quantity."""
    items = [
        LineItem(name="Toppings", quantity="2"),
        LineItem(name="Biscuits", quantity=""),
        LineItem(name="", quantity="5"),
    ]
    breakdown = compute_price_breakdown("Food Delivery", items)

    assert [row.name for row in breakdown.item_rows] == ["Toppings"]
    assert breakdown.subtotal == 110
    assert total_quantity(items) == 2
    assert breakdown.delivery_fee == 20


def test_stored_prices_only_used_when_requested() -> None:
    """Stored item prices are ignored unless asked for."""
    items = [LineItem(name="Toppings", quantity="2", price=50.0)]

    assert compute_price_breakdown("Food Delivery", items).subtotal == 110
    assert compute_price_breakdown("Food Delivery", items, prefer_stored_prices=True).subtotal == 100


def test_has_empty_quantities() -> None:
    """Only blank quantities count as empty."""
    assert has_empty_quantities([LineItem(name="Box", quantity="1"), LineItem(name="Bag", quantity=" ")])
    assert has_empty_quantities([LineItem(name="Box", quantity=None)])
    assert not has_empty_quantities([LineItem(name="Box", quantity="abc")])
    assert not has_empty_quantities([])


def test_display_helpers() -> None:
    """Display strings use peso formatting and piece labels."""
    breakdown = compute_price_breakdown("Food Delivery", [LineItem(name="Toppings", quantity="1")])

    assert format_peso(breakdown.total) == "₱81.20"
    assert format_quantity_label(1) == "x1 pc"
    assert format_quantity_label(3.0) == "x3 pcs"
    assert format_quantity_label(1.5) == "x1.5 pcs"
    assert shows_fee_rows(breakdown)
    assert not shows_fee_rows(compute_price_breakdown("", []))


def test_describe_errand_type() -> None:
    """Printing errand types carry their size and color."""
    assert describe_errand_type("Printing", PrintingSelection(size="A3", color="Colored")) == "Printing-A3-Colored"
    assert describe_errand_type("Printing", PrintingSelection(size="A4")) == "Printing-A4"
    assert describe_errand_type("Printing") == "Printing"
    assert describe_errand_type("Food Delivery") == "Food Delivery"


def test_whitespace_name_is_priced_but_not_counted_for_delivery_tier() -> None:
    """A whitespace-only name still gets a priced row; only the tier quantity skips it."""
    items = [LineItem(name="doc.pdf", quantity="2"), LineItem(name="  ", quantity="3")]
    breakdown = compute_price_breakdown("Printing", items, PrintingSelection(size="A4", color="Colored"))

    assert [row.name for row in breakdown.item_rows] == ["doc.pdf", "  "]
    assert breakdown.subtotal == 25
    assert breakdown.total_quantity == 2
    assert breakdown.delivery_fee == 7
    assert breakdown.total == pytest.approx(43.20)
