"""Interface of the metadata store connection."""

from contextlib import AbstractAsyncContextManager
from typing import Any, Dict, Protocol, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncSession


@runtime_checkable
class IDatabase(Protocol):
    """Pooled async connection shared by the repositories.

    Repositories open one session per call; sessions are not shared between
    concurrent tasks.
    """

    def get_session(self) -> AbstractAsyncContextManager[AsyncSession]:
        """Session scoped to an `async with` block, rolled back on error."""
        ...

    async def health_check(self) -> bool:
        """True when a trivial statement round-trips."""
        ...

    async def get_pool_status(self) -> Dict[str, Any]: ...

    async def close(self) -> None:
        """Dispose of the pool."""
        ...


__all__ = ["IDatabase"]
