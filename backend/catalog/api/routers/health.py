"""Root status plus liveness and readiness endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from catalog.db.session import engine

logger = logging.getLogger(__name__)

root_router = APIRouter(tags=["health"])
router = APIRouter(prefix="/health", tags=["health"])


@root_router.get("/", summary="Service status")
async def index() -> dict[str, str]:
    return {"message": "status: ok"}


@router.get("/live", summary="Liveness probe")
async def live() -> dict[str, str]:
    """Indicates the API process is running."""
    return {"status": "ok", "service": "product-catalog-api"}


@router.get("/ready", summary="Readiness probe")
async def ready() -> dict[str, Any]:
    """Check that the database answers a trivial query.

    Responds 503 with the per-check breakdown when the database is
    unreachable, so load balancers stop routing traffic here.
    """
    checks: dict[str, Any] = {
        "status": "ok",
        "service": "product-catalog-api",
        "checks": {},
    }

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
        checks["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful",
        }
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        checks["checks"]["database"] = {
            "status": "unhealthy",
            "message": "Database connection failed",
        }
        checks["status"] = "unhealthy"
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=checks,
        ) from e

    return checks
