from typing import List, Protocol, runtime_checkable

from aio_pika import IncomingMessage

from .type import BatchResult, ItemResult, Notification


@runtime_checkable
class IIngestionUseCase(Protocol):
    """Protocol for the ingestion pipeline."""

    async def process_batch(self, notifications: List[Notification]) -> BatchResult:
        """Process every notification in order; one failure never aborts the rest."""
        ...

    async def process_notification(self, notification: Notification) -> ItemResult:
        """Process a single notification."""
        ...


@runtime_checkable
class IIngestionHandler(Protocol):
    """Protocol for the notification message handler."""

    async def handle(self, message: IncomingMessage) -> None:
        ...


__all__ = ["IIngestionUseCase", "IIngestionHandler"]
