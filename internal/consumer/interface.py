from typing import Protocol, runtime_checkable


@runtime_checkable
class IConsumerServer(Protocol):
    """Long-running process that feeds queued bucket notifications to the pipeline."""

    async def start(self) -> None:
        """Wire the pipeline, bind the notification queue and consume.

        Returns when the consumer stops; returns immediately when the queue
        is disabled in configuration.
        """
        ...

    async def shutdown(self) -> None:
        """Stop consuming, then close the broker connection."""
        ...

    def is_running(self) -> bool: ...


__all__ = ["IConsumerServer"]
