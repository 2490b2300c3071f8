from typing import Optional, Protocol, runtime_checkable

from internal.model.user_analytics import UserAnalytics
from .option import IncrementUploadOptions


@runtime_checkable
class IUserAnalyticsRepository(Protocol):
    async def increment_upload(self, opt: IncrementUploadOptions) -> UserAnalytics: ...
    async def detail(self, user_id: str) -> Optional[UserAnalytics]: ...


__all__ = ["IUserAnalyticsRepository"]
