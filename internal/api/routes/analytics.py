"""Analytics query API routes."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore
from pydantic import BaseModel  # type: ignore

from pkg.logger.logger import Logger
from internal.analytics.errors import QueryError
from internal.analytics.interface import IAnalyticsUseCase
from internal.analytics.type import QueryInput
from internal.api.constant import CONTEXT_ANALYTICS
from internal.api.dependencies import get_analytics_usecase, get_logger
from internal.api.response import new_error_resp

router = APIRouter()

CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}


class AnalyticsRequest(BaseModel):
    user_id: Optional[str] = None


async def _query(
    user_id: Optional[str],
    usecase: IAnalyticsUseCase,
    logger: Optional[Logger],
) -> JSONResponse:
    try:
        result = await usecase.query(QueryInput(user_id=user_id))
    except QueryError as exc:
        if logger:
            logger.error(
                f"[AnalyticsAPI] Query failed: component={exc.component}, "
                f"kind={exc.kind.value}, error={exc}"
            )
        return new_error_resp(exc, CONTEXT_ANALYTICS)

    return JSONResponse(content=result.to_dict(), headers=CORS_HEADERS)


@router.get("/analytics")
async def get_analytics(
    user_id: Optional[str] = Query(default=None),
    usecase: IAnalyticsUseCase = Depends(get_analytics_usecase),
    logger: Optional[Logger] = Depends(get_logger),
):
    """Per-user and global upload statistics."""
    return await _query(user_id, usecase, logger)


@router.post("/analytics")
async def post_analytics(
    body: Optional[AnalyticsRequest] = Body(default=None),
    usecase: IAnalyticsUseCase = Depends(get_analytics_usecase),
    logger: Optional[Logger] = Depends(get_logger),
):
    """Same as GET, with the user in the JSON body."""
    return await _query(body.user_id if body else None, usecase, logger)
