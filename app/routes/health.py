"""
Health check endpoints.
Used for monitoring, deployment readiness checks, and basic connectivity tests.
"""

from fastapi import APIRouter, HTTPException
from app.config.store import get_store
from app.core.errors import PersistenceUnavailable
from app.core.settings import settings
from datetime import datetime, timezone


router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if service is running.
    """
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/store")
async def store_health():
    """
    Record store check.
    Re-reads every record from the backend to verify it is reachable.
    """
    try:
        store = get_store()
        loaded = store.backend.load()
        counts = {key: len(items) for key, items in store.snapshot().items()}

        return {
            "status": "healthy",
            "backend": store.describe(),
            "connected": True,
            "persisted_records": sorted(key for key, items in loaded.items() if items is not None),
            "counts": counts,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    except PersistenceUnavailable as e:
        raise HTTPException(
            status_code=503,
            detail=f"Record store unavailable: {e.message}"
        )
