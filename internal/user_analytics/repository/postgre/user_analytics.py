from __future__ import annotations

from typing import Optional

from sqlalchemy import Table

from pkg.logger.logger import Logger
from pkg.postgre.postgres import DATABASE_ERRORS, PostgresDatabase, classify_error
from internal.model.user_analytics import UserAnalytics
from ..interface import IUserAnalyticsRepository
from ..option import IncrementUploadOptions
from ..errors import ErrFailedToGet, ErrFailedToUpsert, ErrInvalidData
from .user_analytics_query import build_increment_upload_query, build_detail_query
from .helpers import from_row


class UserAnalyticsPostgresRepository(IUserAnalyticsRepository):

    def __init__(self, db: PostgresDatabase, table: Table, logger: Optional[Logger] = None):
        self.db = db
        self.table = table
        self.logger = logger

    async def increment_upload(self, opt: IncrementUploadOptions) -> UserAnalytics:
        if not opt.user_id:
            raise ErrInvalidData("user_id is required")

        stmt = build_increment_upload_query(self.table, opt)

        try:
            async with self.db.get_session() as session:
                result = await session.execute(stmt)
                row = result.mappings().one()
                await session.commit()
                return from_row(row)

        except DATABASE_ERRORS as exc:
            if self.logger:
                self.logger.error(
                    f"internal.user_analytics.repository.postgre.user_analytics.increment_upload: {exc}"
                )
            raise ErrFailedToUpsert(exc, kind=classify_error(exc)) from exc

    async def detail(self, user_id: str) -> Optional[UserAnalytics]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_detail_query(self.table, user_id))
                row = result.mappings().first()
                return from_row(row) if row else None

        except DATABASE_ERRORS as exc:
            if self.logger:
                self.logger.error(
                    f"internal.user_analytics.repository.postgre.user_analytics.detail: {exc}"
                )
            raise ErrFailedToGet(exc, kind=classify_error(exc)) from exc


__all__ = ["UserAnalyticsPostgresRepository"]
