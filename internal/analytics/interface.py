from typing import Protocol, runtime_checkable

from .type import AnalyticsResult, QueryInput


@runtime_checkable
class IAnalyticsUseCase(Protocol):
    """Protocol for the analytics aggregation query."""

    async def query(self, input_data: QueryInput) -> AnalyticsResult:
        """Aggregate per-user and global statistics."""
        ...


__all__ = ["IAnalyticsUseCase"]
