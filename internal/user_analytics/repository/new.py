from typing import Optional

from sqlalchemy import Table

from pkg.logger.logger import Logger
from pkg.postgre.postgres import PostgresDatabase
from .postgre.user_analytics import UserAnalyticsPostgresRepository


def New(
    db: PostgresDatabase,
    table: Table,
    logger: Optional[Logger] = None,
) -> UserAnalyticsPostgresRepository:
    return UserAnalyticsPostgresRepository(db=db, table=table, logger=logger)


__all__ = ["New"]
