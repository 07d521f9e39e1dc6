"""FastAPI entrypoint for the errand pricing service."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from errand_app.api.v1.api import api_router
from errand_app.core.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(title="Errand Pricing API", debug=settings.debug)
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting %s (env=%s, timezone=%s)", settings.app_name, settings.app_env, settings.app_timezone)


@app.get("/")
def root() -> dict[str, str]:
    """Return service name and status."""
    return {"name": settings.app_name, "status": "ok"}
