"""Price breakdown endpoints."""

from fastapi import APIRouter

from errand_app.models.errand import LineItem, PrintingSelection
from errand_app.schemas.errand import PriceRowResponse, QuoteRequest, QuoteResponse
from errand_app.services.pricing_service import (
    compute_price_breakdown,
    describe_errand_type,
    format_peso,
    format_quantity_label,
    has_empty_quantities,
    shows_fee_rows,
)

router: APIRouter = APIRouter()


@router.post("", response_model=QuoteResponse)
def create_quote(payload: QuoteRequest) -> QuoteResponse:
    """Price an errand draft or a stored errand."""
    items: list[LineItem] = [item.to_domain() for item in payload.items]
    printing: PrintingSelection | None = payload.printing.to_domain() if payload.printing else None
    breakdown = compute_price_breakdown(
        payload.category,
        items,
        printing,
        prefer_stored_prices=payload.prefer_stored_prices,
    )

    return QuoteResponse(
        errand_type=describe_errand_type(payload.category, printing),
        item_rows=[
            PriceRowResponse(
                name=row.name,
                qty=row.qty,
                unit_price=row.unit_price,
                line_total=row.line_total,
                qty_label=format_quantity_label(row.qty),
                line_total_display=format_peso(row.line_total),
            )
            for row in breakdown.item_rows
        ],
        subtotal=breakdown.subtotal,
        total_quantity=breakdown.total_quantity,
        delivery_fee=breakdown.delivery_fee,
        service_fee=breakdown.service_fee,
        total=breakdown.total,
        show_fee_rows=shows_fee_rows(breakdown),
        subtotal_display=format_peso(breakdown.subtotal),
        delivery_fee_display=format_peso(breakdown.delivery_fee),
        service_fee_display=format_peso(breakdown.service_fee),
        total_display=format_peso(breakdown.total),
        has_empty_quantities=has_empty_quantities(items),
    )
