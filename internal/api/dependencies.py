"""Dependency injection for API endpoints.

Provides FastAPI dependencies for the use cases and adapters that are
initialized once during application startup and kept on app.state.
"""

from typing import Any, Optional

from fastapi import Request, HTTPException, status  # type: ignore

from pkg.logger.logger import Logger
from pkg.minio.interface import IObjectStorage
from pkg.postgre.interface import IDatabase
from internal.analytics.interface import IAnalyticsUseCase
from internal.ingestion.interface import IIngestionUseCase


def _require(request: Request, name: str, label: str) -> Any:
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{label} is not available. The service may still be starting up or failed to initialize.",
        )
    return value


def get_ingestion_usecase(request: Request) -> IIngestionUseCase:
    """Ingestion pipeline.

    Raises:
        HTTPException: If the pipeline is not initialized (503 Service Unavailable)
    """
    return _require(request, "ingestion_usecase", "Ingestion pipeline")


def get_analytics_usecase(request: Request) -> IAnalyticsUseCase:
    """Analytics query.

    Raises:
        HTTPException: If the query is not initialized (503 Service Unavailable)
    """
    return _require(request, "analytics_usecase", "Analytics query")


def get_database(request: Request) -> Optional[IDatabase]:
    return getattr(request.app.state, "db", None)


def get_storage(request: Request) -> Optional[IObjectStorage]:
    return getattr(request.app.state, "storage", None)


def get_logger(request: Request) -> Optional[Logger]:
    return getattr(request.app.state, "logger", None)


__all__ = [
    "get_ingestion_usecase",
    "get_analytics_usecase",
    "get_database",
    "get_storage",
    "get_logger",
]
