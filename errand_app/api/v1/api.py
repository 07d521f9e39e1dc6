"""API v1 router composition."""

from fastapi import APIRouter

from errand_app.api.v1.endpoints import catalog, errands, quotes, schedule

api_router: APIRouter = APIRouter()
api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
api_router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
api_router.include_router(errands.router, prefix="/errands", tags=["errands"])
api_router.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
