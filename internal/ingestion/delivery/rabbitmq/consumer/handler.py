"""Bucket notification handler for the RabbitMQ consumer.

The handler is thin:
1. Receive message
2. Decode JSON and parse into delivery DTOs (presenters)
3. Convert to usecase input
4. Call usecase
5. Log / ACK or NACK

Undecodable or structurally invalid bodies are logged and acked, since
redelivering them cannot succeed. A batch whose failures are all timeouts or
unavailable dependencies is nacked for redelivery; items that already went
through are skipped as duplicates on the next attempt when their record
carries an ETag. Other failed items are
acked and reported individually. Anything unexpected propagates and the
message is requeued.
"""

from __future__ import annotations

import json
import time
import uuid
from typing import Optional

from aio_pika import IncomingMessage

from pkg.logger.logger import Logger
from internal.ingestion.interface import IIngestionHandler, IIngestionUseCase
from internal.ingestion.delivery.presenters import parse_envelope, to_notifications


class IngestionHandler(IIngestionHandler):
    """Adapter between the notification queue and the ingestion usecase."""

    def __init__(
        self,
        usecase: IIngestionUseCase,
        logger: Optional[Logger] = None,
    ):
        self.usecase = usecase
        self.logger = logger

    async def handle(self, message: IncomingMessage) -> None:
        """Handle incoming message (called by consumer server)."""
        trace_id = message.message_id or message.correlation_id or str(uuid.uuid4())

        if self.logger:
            with self.logger.trace_context(trace_id=trace_id):
                await self.handle_message(message)
        else:
            await self.handle_message(message)

    async def handle_message(self, message: IncomingMessage) -> None:
        async with message.process(requeue=True, ignore_processed=True):
            start_time = time.perf_counter()

            try:
                body = json.loads(message.body.decode("utf-8"))
                envelope = parse_envelope(body)
            except (UnicodeDecodeError, json.JSONDecodeError) as exc:
                if self.logger:
                    self.logger.error(f"[IngestionHandler] Invalid JSON, discarding message: {exc}")
                return
            except ValueError as exc:
                if self.logger:
                    self.logger.error(f"[IngestionHandler] Invalid notification, discarding message: {exc}")
                return

            notifications = to_notifications(envelope)
            if self.logger:
                self.logger.debug(
                    f"[IngestionHandler] Received notification with {len(notifications)} record(s)"
                )

            result = await self.usecase.process_batch(notifications)

            if self.logger:
                elapsed_ms = int((time.perf_counter() - start_time) * 1000)
                log = self.logger.warning if result.failed else self.logger.info
                log(
                    f"[IngestionHandler] Message processed: status={result.status_code}, "
                    f"processed={result.processed}, skipped={result.skipped}, "
                    f"failed={result.failed}, elapsed_ms={elapsed_ms}"
                )

            if result.retryable:
                if self.logger:
                    self.logger.warning(
                        "[IngestionHandler] Only transient failures, requeueing message for redelivery"
                    )
                await message.nack(requeue=True)


__all__ = ["IngestionHandler"]
