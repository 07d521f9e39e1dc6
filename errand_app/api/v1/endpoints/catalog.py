"""Static item catalog endpoints."""

from fastapi import APIRouter, HTTPException

from errand_app.models.errand import ERRAND_CATEGORIES
from errand_app.schemas.errand import CatalogEntryResponse
from errand_app.services.pricing_service import format_peso, list_catalog

router: APIRouter = APIRouter()


@router.get("/{category}", response_model=list[CatalogEntryResponse])
def get_catalog(category: str) -> list[CatalogEntryResponse]:
    """Return priced items offered for a category; free-text categories have none."""
    if category not in ERRAND_CATEGORIES:
        raise HTTPException(status_code=404, detail="Category not found")
    return [
        CatalogEntryResponse(name=name, price=price, price_display=format_peso(price))
        for name, price in list_catalog(category)
    ]
