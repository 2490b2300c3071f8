"""Notification ingestion API route."""

import json
from typing import Optional

from fastapi import APIRouter, Depends, Request  # type: ignore
from fastapi.responses import JSONResponse  # type: ignore

from pkg.logger.logger import Logger
from internal.ingestion.interface import IIngestionUseCase
from internal.ingestion.delivery.presenters import new_batch_resp, parse_envelope, to_notifications
from internal.api.constant import CONTEXT_INGESTION
from internal.api.dependencies import get_ingestion_usecase, get_logger
from internal.api.response import new_error_resp

router = APIRouter()


@router.post("/ingest")
async def ingest(
    request: Request,
    usecase: IIngestionUseCase = Depends(get_ingestion_usecase),
    logger: Optional[Logger] = Depends(get_logger),
):
    """Process one bucket notification batch.

    Responds 200 when every record was processed or skipped, 207 when some
    failed and 500 when all of them did. An undecodable body is a 500 with
    the error envelope.
    """
    try:
        envelope = parse_envelope(json.loads(await request.body()))
    except ValueError as exc:
        if logger:
            logger.error(f"[IngestAPI] Invalid notification body: {exc}")
        return new_error_resp(exc, CONTEXT_INGESTION)

    result = await usecase.process_batch(to_notifications(envelope))
    return JSONResponse(status_code=result.status_code, content=new_batch_resp(result))
