"""
FastAPI application setup and configuration.
Defines the app factory, middleware, exception handlers, and route registration.
"""

import time
import uuid
from typing import Any, List, Optional

from fastapi import FastAPI, Request  # type: ignore
from fastapi.middleware.cors import CORSMiddleware  # type: ignore

from pkg.logger.logger import Logger
from internal.api.constant import *
from internal.api.response import new_error_resp
from internal.api.routes import analytics, health, ingest


def create_app(
    lifespan: Optional[Any] = None,
    logger: Optional[Logger] = None,
    cors_origins: Optional[List[str]] = None,
    root_path: str = "",
) -> FastAPI:
    """Create the FastAPI application.

    Use cases and adapters are read from app.state, which the lifespan (or a
    test) fills in.
    """
    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
        docs_url="/swagger/index.html",
        redoc_url=None,
        openapi_url="/openapi.json",
        root_path=root_path or "",
        lifespan=lifespan,
    )
    app.state.logger = logger

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log incoming requests and responses."""
        log = request.app.state.logger
        request_id = getattr(request.state, "request_id", "unknown")
        start_time = time.perf_counter()

        if log:
            log.info(
                f"Request {request_id}: {request.method} {request.url.path} "
                f"from {request.client.host if request.client else 'unknown'}"
            )

        response = await call_next(request)

        if log:
            duration = (time.perf_counter() - start_time) * 1000
            log.info(f"Response {request_id}: {response.status_code} ({duration:.1f}ms)")
        return response

    # Registered last so it runs first and the logging middleware sees the ID
    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        """Add request ID to each request for tracing."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        log = request.app.state.logger
        if log:
            with log.trace_context(trace_id=request_id, request_id=request_id):
                response = await call_next(request)
        else:
            response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler returning the error envelope."""
        log = request.app.state.logger
        if log:
            request_id = getattr(request.state, "request_id", "unknown")
            log.exception(f"Unhandled exception in request {request_id}: {exc}")
        return new_error_resp(exc, CONTEXT_API)

    app.include_router(ingest.router, tags=["ingest"])
    app.include_router(analytics.router, tags=["analytics"])
    app.include_router(health.router, tags=["health"])

    return app


__all__ = ["create_app"]
