"""Analytics aggregation query - core business logic."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from pkg.logger.logger import Logger
from internal.content_metadata.repository.interface import IContentMetadataRepository
from internal.content_metadata.repository.option import ListByUserOptions, ListRecentOptions
from internal.content_metadata.repository.errors import RepositoryError as ContentRepositoryError
from internal.user_analytics.repository.interface import IUserAnalyticsRepository
from internal.user_analytics.repository.errors import RepositoryError as UserRepositoryError
from internal.model.constant import kind_of
from ..interface import IAnalyticsUseCase
from ..errors import QueryError
from ..type import (
    AnalyticsResult,
    Config,
    GlobalStats,
    QueryInput,
    RecentContent,
    RecentUpload,
    UserContent,
    UserStats,
)
from ..constant import COMPONENT_CONTENT_METADATA, COMPONENT_USER_ANALYTICS
from .helpers import compression_ratio, distinct_users, newest_first


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnalyticsUseCase(IAnalyticsUseCase):
    """Rebuilds per-user and global statistics from stored records.

    Per-user figures come from the counter row and the user's full record
    set. Global figures only cover the most recent global_window records.
    Read failures raise QueryError; there is no cached fallback.
    """

    def __init__(
        self,
        config: Config,
        content_repository: IContentMetadataRepository,
        user_repository: IUserAnalyticsRepository,
        logger: Optional[Logger] = None,
        *,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.config = config
        self.content_repository = content_repository
        self.user_repository = user_repository
        self.logger = logger
        self.clock = clock

    async def query(self, input_data: QueryInput) -> AnalyticsResult:
        user_id = (input_data.user_id or "").strip() or self.config.default_user_id

        if self.logger:
            self.logger.info(f"[AnalyticsUseCase] Querying analytics for user: {user_id}")

        try:
            counter = await self.user_repository.detail(user_id)
        except UserRepositoryError as exc:
            raise QueryError(str(exc), kind_of(exc), COMPONENT_USER_ANALYTICS) from exc

        try:
            user_records = await self.content_repository.list_by_user(
                ListByUserOptions(user_id=user_id)
            )
            # One row past the window tells a full table from a truncated scan
            scanned = await self.content_repository.list_recent(
                ListRecentOptions(limit=self.config.global_window + 1)
            )
        except ContentRepositoryError as exc:
            raise QueryError(str(exc), kind_of(exc), COMPONENT_CONTENT_METADATA) from exc

        window = newest_first(scanned)[: self.config.global_window]

        total_original = sum(r.original_size or 0 for r in user_records)
        total_processed = sum(r.processed_size or 0 for r in user_records)

        user_stats = UserStats(
            upload_count=counter.upload_count if counter else 0,
            last_upload=counter.last_upload if counter else None,
            total_original_size=total_original,
            total_processed_size=total_processed,
            compression_ratio=compression_ratio(total_original, total_processed) if user_records else 0,
        )

        user_content = UserContent(
            total_items=len(user_records),
            recent_content_ids=[
                RecentContent(
                    content_id=r.content_id,
                    original_key=r.original_key,
                    processed_key=r.processed_key,
                    created_at=r.created_at,
                )
                for r in newest_first(user_records)[: self.config.recent_user_items]
            ],
        )

        global_stats = GlobalStats(
            total_content_items=len(window),
            total_users=distinct_users(window),
            recent_uploads=[
                RecentUpload(content_id=r.content_id, user_id=r.user_id, created_at=r.created_at)
                for r in window[: self.config.recent_global_items]
            ],
            window_size=self.config.global_window,
            is_approximate=len(scanned) > self.config.global_window,
        )

        result = AnalyticsResult(
            user_id=user_id,
            user_stats=user_stats,
            user_content=user_content,
            global_stats=global_stats,
            query_timestamp=self.clock(),
        )

        if self.logger:
            self.logger.info(
                f"[AnalyticsUseCase] Analytics generated for user {user_id}: "
                f"upload_count={user_stats.upload_count}, items={user_content.total_items}, "
                f"compression_ratio={user_stats.compression_ratio}"
            )
        return result


__all__ = ["AnalyticsUseCase"]
