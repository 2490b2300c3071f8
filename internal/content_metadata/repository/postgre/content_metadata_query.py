from sqlalchemy import Table, insert, select

from ..option import (
    CreateOptions,
    ListByUserOptions,
    ListRecentOptions,
    FindBySourceOptions,
)
from .helpers import to_row


def build_create_query(table: Table, opt: CreateOptions):
    return insert(table).values(**to_row(opt.data))


def build_detail_query(table: Table, content_id: str):
    return select(table).where(table.c.content_id == content_id).limit(1)


def build_list_by_user_query(table: Table, opt: ListByUserOptions):
    stmt = (
        select(table)
        .where(table.c.user_id == opt.user_id)
        .order_by(table.c.created_at.desc(), table.c.content_id.desc())
    )

    if opt.limit is not None and opt.limit > 0:
        stmt = stmt.limit(opt.limit)

    return stmt


def build_list_recent_query(table: Table, opt: ListRecentOptions):
    return (
        select(table)
        .order_by(table.c.created_at.desc(), table.c.content_id.desc())
        .limit(opt.limit)
    )


def build_find_by_source_query(table: Table, opt: FindBySourceOptions):
    return (
        select(table)
        .where(
            table.c.original_bucket == opt.original_bucket,
            table.c.original_key == opt.original_key,
            table.c.source_etag == opt.source_etag,
            table.c.status == opt.status.value,
        )
        .order_by(table.c.created_at.desc())
        .limit(1)
    )


__all__ = [
    "build_create_query",
    "build_detail_query",
    "build_list_by_user_query",
    "build_list_recent_query",
    "build_find_by_source_query",
]
