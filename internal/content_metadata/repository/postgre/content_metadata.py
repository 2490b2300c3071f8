from __future__ import annotations

from typing import List, Optional

from sqlalchemy import Table

from pkg.logger.logger import Logger
from pkg.postgre.postgres import DATABASE_ERRORS, PostgresDatabase, classify_error
from internal.model.content_metadata import ContentMetadata
from ..interface import IContentMetadataRepository
from ..option import (
    CreateOptions,
    ListByUserOptions,
    ListRecentOptions,
    FindBySourceOptions,
)
from ..errors import ErrFailedToCreate, ErrFailedToGet
from .content_metadata_query import (
    build_create_query,
    build_detail_query,
    build_list_by_user_query,
    build_list_recent_query,
    build_find_by_source_query,
)
from .helpers import from_row


class ContentMetadataPostgresRepository(IContentMetadataRepository):

    def __init__(self, db: PostgresDatabase, table: Table, logger: Optional[Logger] = None):
        self.db = db
        self.table = table
        self.logger = logger

    def _log_error(self, method: str, exc: BaseException) -> None:
        if self.logger:
            self.logger.error(
                f"internal.content_metadata.repository.postgre.content_metadata.{method}: {exc}"
            )

    async def create(self, opt: CreateOptions) -> ContentMetadata:
        stmt = build_create_query(self.table, opt)

        try:
            async with self.db.get_session() as session:
                await session.execute(stmt)
                await session.commit()
                return opt.data

        except DATABASE_ERRORS as exc:
            self._log_error("create", exc)
            raise ErrFailedToCreate(exc, kind=classify_error(exc)) from exc

    async def detail(self, content_id: str) -> Optional[ContentMetadata]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_detail_query(self.table, content_id))
                row = result.mappings().first()
                return from_row(row) if row else None

        except DATABASE_ERRORS as exc:
            self._log_error("detail", exc)
            raise ErrFailedToGet(exc, kind=classify_error(exc)) from exc

    async def list_by_user(self, opt: ListByUserOptions) -> List[ContentMetadata]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_by_user_query(self.table, opt))
                return [from_row(row) for row in result.mappings().all()]

        except DATABASE_ERRORS as exc:
            self._log_error("list_by_user", exc)
            raise ErrFailedToGet(exc, kind=classify_error(exc)) from exc

    async def list_recent(self, opt: ListRecentOptions) -> List[ContentMetadata]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_list_recent_query(self.table, opt))
                return [from_row(row) for row in result.mappings().all()]

        except DATABASE_ERRORS as exc:
            self._log_error("list_recent", exc)
            raise ErrFailedToGet(exc, kind=classify_error(exc)) from exc

    async def find_by_source(self, opt: FindBySourceOptions) -> Optional[ContentMetadata]:
        try:
            async with self.db.get_session() as session:
                result = await session.execute(build_find_by_source_query(self.table, opt))
                row = result.mappings().first()
                return from_row(row) if row else None

        except DATABASE_ERRORS as exc:
            self._log_error("find_by_source", exc)
            raise ErrFailedToGet(exc, kind=classify_error(exc)) from exc


__all__ = ["ContentMetadataPostgresRepository"]
