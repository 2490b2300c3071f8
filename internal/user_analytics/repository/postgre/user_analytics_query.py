from sqlalchemy import Table, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert

from ..option import IncrementUploadOptions


def build_increment_upload_query(table: Table, opt: IncrementUploadOptions):
    """Single-statement upsert: first upload inserts 1, later ones add 1.

    last_upload never moves backwards when deliveries are processed out of order.
    """
    stmt = pg_insert(table).values(
        user_id=opt.user_id,
        upload_count=1,
        last_upload=opt.uploaded_at,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.user_id],
        set_={
            "upload_count": table.c.upload_count + 1,
            "last_upload": func.greatest(table.c.last_upload, stmt.excluded.last_upload),
        },
    )
    return stmt.returning(table.c.user_id, table.c.upload_count, table.c.last_upload)


def build_detail_query(table: Table, user_id: str):
    return select(table).where(table.c.user_id == user_id).limit(1)


__all__ = [
    "build_increment_upload_query",
    "build_detail_query",
]
