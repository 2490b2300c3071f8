from typing import Optional

from sqlalchemy import Table

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.content_metadata import ContentMetadataPostgresRepository


def New(
    db: PostgresDatabase,
    table: Table,
    logger: Optional[Logger] = None,
) -> ContentMetadataPostgresRepository:
    return ContentMetadataPostgresRepository(db=db, table=table, logger=logger)


__all__ = ["New"]
