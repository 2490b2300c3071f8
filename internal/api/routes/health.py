"""Health check API routes."""

import asyncio
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends  # type: ignore

from pkg.minio.interface import IObjectStorage
from pkg.postgre.interface import IDatabase
from internal.api.constant import API_VERSION
from internal.api.dependencies import get_database, get_storage

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, str]:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/detailed")
async def detailed_health_check(
    db: Optional[IDatabase] = Depends(get_database),
    storage: Optional[IObjectStorage] = Depends(get_storage),
) -> Dict[str, Any]:
    """Detailed health check with dependency status."""
    db_healthy = db is not None and await db.health_check()
    storage_healthy = storage is not None and await asyncio.to_thread(storage.health_check)

    overall_status = "healthy" if db_healthy and storage_healthy else "unhealthy"

    return {
        "status": overall_status,
        "version": API_VERSION,
        "dependencies": {
            "database": "healthy" if db_healthy else "unhealthy",
            "object_store": "healthy" if storage_healthy else "unhealthy",
        },
    }
